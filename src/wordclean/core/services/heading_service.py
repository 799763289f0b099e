# src/wordclean/core/services/heading_service.py
from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import Tag

from wordclean.core.dom.style_map import get_style
from wordclean.core.dom.tree_utils import class_string, is_live, move_children, new_tag

logger = logging.getLogger(__name__)

_PARASTYLE_HEADING = re.compile(r"^heading\s+(\d+)$")
_FONT_SIZE_PT = re.compile(r"font-size:\s*([\d.]+)pt", re.IGNORECASE)

# Legacy desktop class names, checked in this order
_MSO_HEADING_CLASSES = tuple((f"MsoHeading{n}", n) for n in range(1, 7))


def _level_from_role(p: Tag) -> Optional[int]:
    """Word Online built-in headings: role="heading" + aria-level."""
    if p.get("role") != "heading":
        return None
    try:
        level = int(p.get("aria-level") or "0")
    except (TypeError, ValueError):
        return None
    return level if 1 <= level <= 6 else None


def _level_from_parastyle(p: Tag) -> Optional[int]:
    """
    Word Online paragraph style names: data-ccp-parastyle="heading N".
    N <= 6 maps directly; custom styles numbered higher are sized by font.
    """
    span = p.find("span", attrs={"data-ccp-parastyle": True})
    if span is None:
        return None
    style_name = (span.get("data-ccp-parastyle") or "").lower().strip()
    match = _PARASTYLE_HEADING.match(style_name)
    if not match:
        return None
    n = int(match.group(1))
    if 1 <= n <= 6:
        return n
    return infer_level_from_font_size(p)


def infer_level_from_font_size(p: Tag) -> int:
    """
    Estimates a heading level (1-5) from the largest pt font size on the
    paragraph or any styled span inside it.

    Thresholds follow typical Word Online heading sizes:
    h1 >= 20pt, h2 >= 16pt, h3 >= 14pt, h4 >= 12pt, else h5.
    """
    max_pt = 0.0

    def check(style: str) -> None:
        nonlocal max_pt
        match = _FONT_SIZE_PT.search(style or "")
        if not match:
            return
        try:
            pt = float(match.group(1))
        except ValueError:
            return
        max_pt = max(max_pt, pt)

    check(get_style(p))
    for span in p.find_all("span", style=True):
        check(get_style(span))

    if max_pt >= 20:
        return 1
    if max_pt >= 16:
        return 2
    if max_pt >= 14:
        return 3
    if max_pt >= 12:
        return 4
    return 5


def _level_from_mso_class(p: Tag) -> Optional[int]:
    cls = class_string(p)
    for mso_class, level in _MSO_HEADING_CLASSES:
        if mso_class in cls:
            return level
    return None


def detect_heading_level(p: Tag) -> Optional[int]:
    """Returns the heading level for a paragraph, or None if it is body text."""
    for signal in (_level_from_role, _level_from_parastyle, _level_from_mso_class):
        level = signal(p)
        if level is not None:
            return level
    return None


def convert_headings(container: Tag) -> Tag:
    """
    Replaces heading paragraphs with <h1>-<h6>. The paragraph's children move
    into the heading unchanged so inline formatting survives.
    """
    converted = 0
    for p in container.find_all("p"):
        if not is_live(p):
            continue
        level = detect_heading_level(p)
        if level is None:
            continue
        heading = new_tag(p, f"h{level}")
        move_children(p, heading)
        p.replace_with(heading)
        converted += 1

    if converted:
        logger.debug("Converted %d paragraphs to headings.", converted)
    return container

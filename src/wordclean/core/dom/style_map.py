# src/wordclean/core/dom/style_map.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from bs4 import Tag

# An ordered mapping of lower-cased CSS property -> trimmed value.
StyleMap = Dict[str, str]

_IMPORTANT_PATTERN = re.compile(r"\s*!important\s*$", re.IGNORECASE)


def split_declarations(style: Optional[str]) -> List[Tuple[str, str]]:
    """
    Splits a semicolon-delimited declaration list into (property, value) pairs.

    Declarations without a colon or with an empty property are skipped. The
    property is lower-cased and both sides are trimmed; the value keeps its case.
    """
    pairs: List[Tuple[str, str]] = []
    for decl in (style or "").split(";"):
        colon = decl.find(":")
        if colon == -1:
            continue
        prop = decl[:colon].strip().lower()
        value = decl[colon + 1:].strip()
        if prop:
            pairs.append((prop, value))
    return pairs


def parse_style(style: Optional[str], lower_values: bool = False) -> StyleMap:
    """
    Parses a style attribute into a StyleMap. Later duplicates overwrite
    earlier ones, matching the CSS cascade for a single declaration block.
    """
    result: StyleMap = {}
    for prop, value in split_declarations(style):
        if lower_values:
            value = value.lower()
        if value:
            result[prop] = value
    return result


def serialize_style(style_map: StyleMap) -> str:
    """Serializes a StyleMap as 'prop: value' pairs joined by '; '."""
    return "; ".join(f"{prop}: {value}" for prop, value in style_map.items())


def strip_important(value: str) -> str:
    """Removes a trailing '!important' qualifier from a declaration value."""
    return _IMPORTANT_PATTERN.sub("", value)


def get_style(tag: Tag) -> str:
    """Returns the raw style attribute of a tag ('' when absent)."""
    value = tag.get("style")
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def set_style(tag: Tag, declarations: Iterable[str] | StyleMap) -> None:
    """
    Writes declarations back onto a tag, removing the attribute entirely
    when nothing survives rather than leaving an empty style.
    """
    if isinstance(declarations, dict):
        text = serialize_style(declarations)
    else:
        text = "; ".join(d for d in declarations if d)
    if text:
        tag["style"] = text
    elif tag.has_attr("style"):
        del tag["style"]

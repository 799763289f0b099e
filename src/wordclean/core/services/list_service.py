# src/wordclean/core/services/list_service.py
from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Tuple

from bs4 import NavigableString, PageElement, Tag

from wordclean.core.dom.style_map import get_style
from wordclean.core.dom.tree_utils import (
    class_string,
    clone,
    inner_html,
    is_eop_span,
    remove,
    unwrap,
)
from wordclean.core.services.nested_list_builder import build_nested_list
from wordclean.model import ListItemDescriptor

logger = logging.getLogger(__name__)

_MSO_LIST_STYLE = re.compile(r"mso-list\s*:", re.IGNORECASE)
_MSO_LIST_LEVEL = re.compile(r"mso-list\s*:[^;]*level\s*(\d+)", re.IGNORECASE)
_ORDERED_MARKERS = (
    re.compile(r"^\d+[.)]"),
    re.compile(r"^[ivxlcdm]+[.)]", re.IGNORECASE),
    re.compile(r"^[a-zA-Z][.)]"),
)
_MARKER_STYLES = ("mso-list:Ignore", "mso-list: Ignore")

Run = List[Tuple[Tag, ListItemDescriptor]]


# --- Shared run scanning ---

def _is_blank_text(node: PageElement) -> bool:
    return isinstance(node, NavigableString) and not node.strip()


def _collect_runs(
        parent: Tag,
        is_marker: Callable[[PageElement], bool],
        describe: Callable[[Tag], Optional[ListItemDescriptor]],
) -> List[Run]:
    """
    Scans the children of `parent` left to right and groups maximal runs of
    consecutive marker elements. Whitespace-only text between markers does not
    break a run. Markers `describe` rejects stay in place but still count as
    part of the run.
    """
    runs: List[Run] = []
    current: Run = []
    in_run = False

    for child in list(parent.children):
        if is_marker(child):
            in_run = True
            descriptor = describe(child)
            if descriptor is not None:
                current.append((child, descriptor))
            continue
        if in_run and _is_blank_text(child):
            continue
        if current:
            runs.append(current)
        current, in_run = [], False

    if current:
        runs.append(current)
    return runs


def _splice_run(run: Run) -> None:
    """Inserts the rebuilt list before the first original and removes the originals."""
    first = run[0][0]
    list_root = build_nested_list(first, [descriptor for _, descriptor in run])
    first.insert_before(list_root)
    for el, _ in run:
        remove(el)


# --- Word Online (wrapper per item) ---

def is_online_list_wrapper(node: PageElement) -> bool:
    return isinstance(node, Tag) and "ListContainerWrapper" in class_string(node)


def extract_online_item_content(li: Tag) -> str:
    """
    Returns the markup of a Word Online <li> without paragraph-end markers,
    inner <p> wrappers, or trailing non-breaking spaces.
    """
    item = clone(li)
    for span in item.find_all("span"):
        if is_eop_span(span):
            remove(span)
    for p in item.find_all("p"):
        unwrap(p)
    return inner_html(item).strip().rstrip("\xa0").strip()


def describe_online_wrapper(wrapper: Tag) -> Optional[ListItemDescriptor]:
    list_el = wrapper.find(["ul", "ol"])
    li = list_el.find("li") if list_el is not None else None
    if li is None:
        return None
    return ListItemDescriptor(
        level=li.get("data-aria-level") or 1,
        ordered=list_el.name == "ol",
        content=extract_online_item_content(li),
    )


def convert_online_lists(container: Tag) -> Tag:
    """
    Rebuilds Word Online lists, where every item arrives in its own
    ListContainerWrapper div holding a one-item <ul>/<ol>.

    Wrappers may sit below extra layout divs, so every distinct parent of a
    wrapper is scanned.
    """
    parents: List[Tag] = []
    for el in container.find_all(is_online_list_wrapper):
        parent = el.parent
        if parent is not None and not any(parent is seen for seen in parents):
            parents.append(parent)

    rebuilt = 0
    for parent in parents:
        for run in _collect_runs(parent, is_online_list_wrapper, describe_online_wrapper):
            _splice_run(run)
            rebuilt += 1

    if rebuilt:
        logger.debug("Rebuilt %d Word Online list(s).", rebuilt)
    return container


# --- Desktop Word (flat MsoList paragraphs) ---

def is_list_paragraph(node: PageElement) -> bool:
    if not isinstance(node, Tag) or node.name not in ("p", "div"):
        return False
    return bool(_MSO_LIST_STYLE.search(get_style(node))) or "MsoList" in class_string(node)


def get_list_level(para: Tag) -> int:
    """The N of `mso-list: l0 levelN lfo1`; 1 when absent."""
    match = _MSO_LIST_LEVEL.search(get_style(para))
    return int(match.group(1)) if match else 1


def _find_marker_spans(para: Tag) -> List[Tag]:
    """Elements holding the literal bullet/number glyph Word renders inline."""
    return para.find_all(lambda t: any(s in get_style(t) for s in _MARKER_STYLES))


def is_ordered_list(para: Tag) -> bool:
    cls = class_string(para)
    if "MsoListNumber" in cls:
        return True
    if "MsoListBullet" in cls:
        return False

    markers = _find_marker_spans(para)
    if markers:
        text = markers[0].get_text().replace("\xa0", "").strip()
        return any(p.search(text) for p in _ORDERED_MARKERS)
    return False


def extract_list_item_content(para: Tag) -> str:
    item = clone(para)
    for marker in _find_marker_spans(item):
        remove(marker)
    return inner_html(item).strip()


def describe_list_paragraph(para: Tag) -> ListItemDescriptor:
    return ListItemDescriptor(
        level=get_list_level(para),
        ordered=is_ordered_list(para),
        content=extract_list_item_content(para),
    )


def convert_lists(container: Tag) -> Tag:
    """
    Converts runs of sibling MsoList paragraphs directly below the container
    into nested <ul>/<ol> trees using the level in each paragraph's mso-list
    declaration.
    """
    runs = _collect_runs(container, is_list_paragraph, describe_list_paragraph)
    for run in runs:
        _splice_run(run)

    if runs:
        logger.debug("Rebuilt %d desktop list(s).", len(runs))
    return container

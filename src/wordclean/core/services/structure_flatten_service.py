# src/wordclean/core/services/structure_flatten_service.py
from __future__ import annotations

import logging

from bs4 import Tag

from wordclean.core.dom.tree_utils import is_live, move_children, previous_element_sibling, remove, unwrap

logger = logging.getLogger(__name__)


def unwrap_divs(container: Tag) -> Tag:
    """
    Unwraps every <div> below the container. Word Online wraps content in
    layout-only divs. Deepest first, so inner divs resolve before their parents.
    """
    divs = container.find_all("div")
    for div in reversed(divs):
        unwrap(div)
    return container


def merge_sibling_lists(container: Tag) -> Tag:
    """
    Merges adjacent <ul>/<ol> siblings of the same kind until none are left.
    After div unwrapping the per-item Word Online lists end up side by side.
    """
    merged = 0
    changed = True
    while changed:
        changed = False
        for lst in container.find_all(["ul", "ol"]):
            if not is_live(lst):
                continue
            prev = previous_element_sibling(lst)
            if prev is not None and prev.name == lst.name:
                move_children(lst, prev)
                remove(lst)
                merged += 1
                changed = True

    if merged:
        logger.debug("Merged %d sibling list(s).", merged)
    return container

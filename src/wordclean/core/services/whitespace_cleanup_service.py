# src/wordclean/core/services/whitespace_cleanup_service.py
from __future__ import annotations

import logging

from bs4 import Tag

from wordclean.core.dom.defaults import REMOVABLE_EMPTY_TAGS
from wordclean.core.dom.tree_utils import (
    HEADING_TAGS,
    has_media_descendant,
    is_live,
    remove,
    text_nodes,
    unwrap,
)

logger = logging.getLogger(__name__)


def clean_heading_spans(container: Tag) -> Tag:
    """
    Unwraps all spans inside headings. The heading carries the semantic
    styling, so span-level color/size/weight inside it is Word noise.
    """
    spans = [
        span for heading in container.find_all(HEADING_TAGS)
        for span in heading.find_all("span")
    ]
    for span in reversed(spans):
        unwrap(span)
    return container


def unwrap_empty_spans(container: Tag) -> Tag:
    """Unwraps spans left without any attribute, deepest first."""
    for span in reversed(container.find_all("span")):
        if not span.attrs:
            unwrap(span)
    return container


def replace_nbsp(container: Tag) -> Tag:
    for node in text_nodes(container):
        if "\xa0" in node:
            node.replace_with(node.replace("\xa0", " "))
    return container


def unwrap_whitespace_spans(container: Tag) -> Tag:
    """
    Unwraps spans whose text is only whitespace. Word wraps single spaces in
    styled spans; the space itself stays in the parent.
    """
    for span in container.find_all("span"):
        if not is_live(span):
            continue
        if not span.get_text().strip() and not has_media_descendant(span):
            unwrap(span)
    return container


def remove_empty_blocks(container: Tag) -> Tag:
    """
    Removes empty paragraphs, divs, headings and spans until none are left.
    Elements containing an <img> or <br> are kept; a lone <br> is how Word
    spaces paragraphs.
    """
    removed = 0
    changed = True
    while changed:
        changed = False
        for el in container.find_all(REMOVABLE_EMPTY_TAGS):
            if not is_live(el):
                continue
            if not el.get_text().strip() and not has_media_descendant(el):
                remove(el)
                removed += 1
                changed = True

    if removed:
        logger.debug("Removed %d empty block(s).", removed)
    return container

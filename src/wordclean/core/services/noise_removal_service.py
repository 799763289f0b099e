# src/wordclean/core/services/noise_removal_service.py
from __future__ import annotations

import logging
import re

from bs4 import Comment, Declaration, Doctype, ProcessingInstruction, Tag

from wordclean.core.dom.defaults import REMOTE_IMAGE_PREFIXES, VISUAL_PROPERTIES
from wordclean.core.dom.style_map import get_style, split_declarations
from wordclean.core.dom.tree_utils import (
    direct_children,
    is_eop_span,
    is_live,
    new_tag,
    remove,
    unwrap,
)

logger = logging.getLogger(__name__)

_MSO_PREFIX = re.compile(r"mso-", re.IGNORECASE)

# html.parser keeps <![if ...]> and <?xml:namespace ...> as these node types
_MARKUP_NOISE = (Comment, ProcessingInstruction, Declaration, Doctype)


def has_only_noisy_styles(span: Tag) -> bool:
    """True if the span's style carries no property from the visual set."""
    style = get_style(span)
    if not style.strip():
        return True
    return all(prop not in VISUAL_PROPERTIES for prop, _ in split_declarations(style))


def remove_comments(container: Tag) -> None:
    """
    Drops comments (e.g. <!--StartFragment-->), processing instructions and
    declarations left over from Office conditional markup.
    """
    for node in container.find_all(string=lambda s: isinstance(s, _MARKUP_NOISE)):
        node.extract()


def remove_office_paragraph_markers(container: Tag) -> None:
    """<o:p> is unwrapped when it holds text, otherwise deleted."""
    for el in container.find_all("o:p"):
        if not is_live(el):
            continue
        if el.get_text().strip():
            unwrap(el)
        else:
            remove(el)


def unwrap_namespaced_elements(container: Tag) -> None:
    """Unwraps vendor XML elements such as <w:sdt> or <st1:place>."""
    for el in container.find_all(lambda t: ":" in (t.name or "")):
        unwrap(el)


def remove_eop_spans(container: Tag) -> None:
    for span in container.find_all("span"):
        if is_live(span) and is_eop_span(span):
            remove(span)


def unwrap_noise_spans(container: Tag) -> None:
    """Unwraps spans that carry no visual style (MSO spans, TextRun spans)."""
    for span in container.find_all("span"):
        if is_live(span) and has_only_noisy_styles(span):
            unwrap(span)


def unwrap_cell_paragraphs(container: Tag) -> None:
    """
    Unwraps direct-child <p> elements of <li>, <td> and <th>. A <br> goes in
    front of every paragraph after the first to keep the line breaks.
    """
    for cell in container.find_all(["li", "td", "th"]):
        for idx, p in enumerate(direct_children(cell, "p")):
            if idx > 0:
                p.insert_before(new_tag(p, "br"))
            unwrap(p)


def remove_local_images(container: Tag) -> None:
    """Word-internal image references (image001.png, file://) cannot resolve."""
    for img in container.find_all("img"):
        src = img.get("src") or ""
        if not src.startswith(REMOTE_IMAGE_PREFIXES):
            remove(img)


def clean_line_break_styles(container: Tag) -> None:
    for br in container.find_all("br", style=True):
        if _MSO_PREFIX.search(get_style(br)):
            del br["style"]


def remove_noise_nodes(container: Tag) -> Tag:
    """Runs every noise removal step in its fixed order."""
    remove_comments(container)
    remove_office_paragraph_markers(container)
    unwrap_namespaced_elements(container)
    remove_eop_spans(container)
    unwrap_noise_spans(container)
    unwrap_cell_paragraphs(container)
    remove_local_images(container)
    clean_line_break_styles(container)
    return container

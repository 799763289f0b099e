# src/wordclean/core/dom/tree_utils.py
from __future__ import annotations

import copy
import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
_EOP_PATTERN = re.compile(r"\bEOP\b")

# HTML5 void elements (<br>, <img>) without the XHTML slash; only &, < and > are escaped
FRAGMENT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def parse_fragment(html: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parses an HTML fragment into a standalone BeautifulSoup tree."""
    return BeautifulSoup(html or "", parser)


def is_live(tag: Tag) -> bool:
    """False once a tag has been decomposed, unwrapped or otherwise detached."""
    return not getattr(tag, "decomposed", False) and tag.parent is not None


def unwrap(tag: Tag) -> None:
    """
    Replaces `tag` with its own children in its parent's child sequence,
    preserving order. Detached tags are ignored.
    """
    if is_live(tag):
        tag.unwrap()


def remove(tag: Tag) -> None:
    """Removes a tag and its whole subtree from the tree."""
    if is_live(tag):
        tag.decompose()


def class_string(tag: Tag) -> str:
    """
    Returns the class attribute as a single string. bs4 splits multi-valued
    attributes into lists; Word markers are matched against the raw text.
    """
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def is_eop_span(tag: Tag) -> bool:
    """Word Online paragraph-end marker span."""
    return tag.name == "span" and bool(_EOP_PATTERN.search(class_string(tag)))


def has_media_descendant(tag: Tag) -> bool:
    """True if the tag contains an <img> or <br> somewhere below it."""
    return tag.find(["img", "br"]) is not None


def inner_html(tag: Tag) -> str:
    """Serializes the children of a tag."""
    return tag.decode_contents()


def serialize_fragment(tag: Tag) -> str:
    """Serializes the children of a tag as an HTML5 fragment."""
    return tag.decode_contents(formatter=FRAGMENT_FORMATTER)


def owning_soup(tag: Tag) -> Optional[BeautifulSoup]:
    node = tag
    while node is not None and not isinstance(node, BeautifulSoup):
        node = node.parent
    return node


def parser_of(tag: Tag) -> str:
    """Name of the tree builder that produced `tag` ('html.parser' when detached)."""
    soup = owning_soup(tag)
    builder = getattr(soup, "builder", None)
    return getattr(builder, "NAME", None) or "html.parser"


def replace_children(tag: Tag, html: str, parser: Optional[str] = None) -> None:
    """
    Replaces the children of `tag` with the nodes parsed from `html`. The
    markup is parsed with the same builder as `tag`'s tree unless `parser`
    is given. Builders that add <html>/<body> around a fragment are unwrapped.
    """
    tag.clear()
    fragment = parse_fragment(html, parser or parser_of(tag))
    root = fragment.body or fragment
    for child in list(root.contents):
        tag.append(child.extract())


def clone(tag: Tag) -> Tag:
    """Deep copy of a tag, detached from any tree."""
    return copy.copy(tag)


def direct_children(tag: Tag, name: Optional[str] = None) -> List[Tag]:
    """Element children of `tag`, optionally filtered by tag name."""
    return [
        child for child in tag.children
        if isinstance(child, Tag) and (name is None or child.name == name)
    ]


def previous_element_sibling(tag: Tag) -> Optional[Tag]:
    """The nearest preceding sibling that is an element (text is skipped)."""
    node = tag.previous_sibling
    while node is not None and not isinstance(node, Tag):
        node = node.previous_sibling
    return node


def text_nodes(tag: Tag) -> List[NavigableString]:
    """All plain text nodes under `tag` (comments and other specials excluded)."""
    return [
        node for node in tag.descendants
        if type(node) is NavigableString
    ]


def new_tag(anchor: Tag, name: str) -> Tag:
    """
    Creates a new element owned by the same BeautifulSoup object as `anchor`,
    so builder-specific behaviour (void elements like <br>) stays consistent.
    """
    soup = owning_soup(anchor)
    if soup is None:
        soup = BeautifulSoup("", "html.parser")
    return soup.new_tag(name)


def move_children(source: Tag, target: Tag) -> None:
    """Appends every child of `source` to `target`, preserving order."""
    for child in list(source.contents):
        target.append(child.extract())

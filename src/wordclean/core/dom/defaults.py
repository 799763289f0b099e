# src/wordclean/core/dom/defaults.py
"""
Immutable tables shared by the normalization passes.

Everything here is built once at import time and never mutated.
"""
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping


class ElementKind(str, Enum):
    """Element kinds that carry their own attribute allow-list."""
    ANCHOR = "a"
    IMAGE = "img"
    TABLE_DATA_CELL = "td"
    TABLE_HEADER_CELL = "th"
    ORDERED_LIST = "ol"
    OTHER = "*"

    @classmethod
    def for_tag(cls, tag_name: str) -> "ElementKind":
        try:
            return cls((tag_name or "").lower())
        except ValueError:
            return cls.OTHER


# Properties that carry visual information on an inline span.
VISUAL_PROPERTIES: FrozenSet[str] = frozenset({
    "color", "background-color", "font-size", "font-weight",
    "font-style", "text-decoration", "vertical-align",
})

# Properties kept by the style normalizer.
KEPT_PROPERTIES: FrozenSet[str] = VISUAL_PROPERTIES | {"text-align"}

# Properties Excel class rules may contribute to inline styles.
EXCEL_KEPT_PROPERTIES: FrozenSet[str] = frozenset({
    "color", "background-color", "font-weight", "font-style", "text-decoration",
})

# Values visually equivalent to the browser default, compared lower-cased.
DEFAULT_VALUES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "color": frozenset({
        "#000000", "black", "windowtext", "inherit", "rgb(0,0,0)", "rgb(0, 0, 0)",
    }),
    "background-color": frozenset({
        "#ffffff", "white", "transparent", "inherit",
        "rgb(255,255,255)", "rgb(255, 255, 255)",
    }),
    "font-size": frozenset({"12pt"}),
    "font-weight": frozenset({"normal", "400"}),
    "font-style": frozenset({"normal"}),
    "vertical-align": frozenset({"baseline", "top"}),
    "text-align": frozenset({"left", "start"}),
})

# Attributes preserved per element kind; 'style' is always kept.
ALLOWED_ATTRIBUTES: Mapping[ElementKind, FrozenSet[str]] = MappingProxyType({
    ElementKind.ANCHOR: frozenset({"href", "target", "title", "rel"}),
    ElementKind.IMAGE: frozenset({"src", "alt", "width", "height"}),
    ElementKind.TABLE_DATA_CELL: frozenset({"colspan", "rowspan"}),
    ElementKind.TABLE_HEADER_CELL: frozenset({"colspan", "rowspan", "scope"}),
    ElementKind.ORDERED_LIST: frozenset({"start", "type"}),
    ElementKind.OTHER: frozenset(),
})
UNIVERSAL_ATTRIBUTES: FrozenSet[str] = frozenset({"style"})

# Image sources that resolve outside the originating document.
REMOTE_IMAGE_PREFIXES = ("http://", "https://", "data:")

# Block elements the empty-block pass may remove.
REMOVABLE_EMPTY_TAGS = ("p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "span")

# src/wordclean/core/services/style_normalize_service.py
from __future__ import annotations

from typing import FrozenSet, List, Mapping, Optional

from bs4 import Tag

from wordclean.core.dom.defaults import DEFAULT_VALUES, KEPT_PROPERTIES
from wordclean.core.dom.style_map import get_style, set_style, strip_important


def normalize_style(
        style: Optional[str],
        kept: FrozenSet[str] = KEPT_PROPERTIES,
        defaults: Mapping[str, FrozenSet[str]] = DEFAULT_VALUES,
) -> str:
    """
    Reduces a style attribute to the kept properties, dropping declarations
    whose value is the browser default. Kept declarations keep their original
    spelling; the comparison ignores case and a trailing '!important'.
    """
    cleaned: List[str] = []
    for part in (style or "").split(";"):
        part = part.strip()
        if not part:
            continue
        colon = part.find(":")
        if colon == -1:
            continue
        prop = part[:colon].strip().lower()
        if prop not in kept:
            continue
        value = strip_important(part[colon + 1:].strip().lower())
        if value in defaults.get(prop, ()):
            continue
        cleaned.append(part)
    return "; ".join(cleaned)


def clean_styles(container: Tag) -> Tag:
    for el in container.find_all(style=True):
        set_style(el, [normalize_style(get_style(el))])
    return container

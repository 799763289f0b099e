# src/wordclean/core/services/inherited_style_service.py
from __future__ import annotations

from bs4 import Tag

from wordclean.core.dom.style_map import get_style, parse_style, set_style


def deduplicate_inherited_styles(container: Tag) -> Tag:
    """
    Removes declarations an element repeats from its direct parent. Runs after
    style/attribute cleaning so only kept properties are compared. Spans left
    without a style are picked up by the empty-span unwrap afterwards.
    """
    for el in container.find_all(style=True):
        parent = el.parent
        if parent is None:
            continue
        parent_styles = parse_style(get_style(parent), lower_values=True)
        if not parent_styles:
            continue
        child_styles = parse_style(get_style(el), lower_values=True)
        unique = {
            prop: value for prop, value in child_styles.items()
            if parent_styles.get(prop) != value
        }
        set_style(el, unique)
    return container

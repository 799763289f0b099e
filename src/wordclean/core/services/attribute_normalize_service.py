# src/wordclean/core/services/attribute_normalize_service.py
from __future__ import annotations

from bs4 import Tag

from wordclean.core.dom.defaults import ALLOWED_ATTRIBUTES, UNIVERSAL_ATTRIBUTES, ElementKind


def clean_attributes(container: Tag) -> Tag:
    """
    Keeps only the per-kind allow-listed attributes plus 'style'. Classes,
    lang, data-* markers and consumed ARIA heading markers all go.
    """
    for el in container.find_all(True):
        allowed = ALLOWED_ATTRIBUTES[ElementKind.for_tag(el.name)]
        for name in list(el.attrs):
            lowered = name.lower()
            if lowered not in UNIVERSAL_ATTRIBUTES and lowered not in allowed:
                del el[name]
    return container

# src/wordclean/core/services/nested_list_builder.py
from __future__ import annotations

from typing import List, Sequence, Tuple

from bs4 import Tag

from wordclean.core.dom.tree_utils import direct_children, new_tag, parser_of, replace_children
from wordclean.model import ListItemDescriptor


def build_nested_list(anchor: Tag, items: Sequence[ListItemDescriptor]) -> Tag:
    """
    Builds a nested <ul>/<ol> tree from a flat run of list items with levels.

    Args:
        anchor (Tag): Any tag of the target tree; new elements are created
                      through its BeautifulSoup object.
        items (Sequence[ListItemDescriptor]): Items in document order.

    Returns:
        Tag: The root list. Each depth takes its list kind from the item that
             opened it, so bullet and numbered levels can be mixed.
    """
    if not items:
        return new_tag(anchor, "ul")

    # Item markup is parsed by the same builder as the target tree
    parser = parser_of(anchor)
    root = new_tag(anchor, "ol" if items[0].ordered else "ul")
    # (list element, level) frames; the root frame is never popped
    stack: List[Tuple[Tag, int]] = [(root, 1)]

    for item in items:
        while len(stack) > 1 and stack[-1][1] > item.level:
            stack.pop()

        top_list, top_level = stack[-1]
        if top_level < item.level:
            entries = direct_children(top_list, "li")
            nested = new_tag(anchor, "ol" if item.ordered else "ul")
            (entries[-1] if entries else top_list).append(nested)
            stack.append((nested, item.level))

        li = new_tag(anchor, "li")
        replace_children(li, item.content, parser)
        stack[-1][0].append(li)

    return root

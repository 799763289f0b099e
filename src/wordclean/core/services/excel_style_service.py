# src/wordclean/core/services/excel_style_service.py
from __future__ import annotations

import logging
import re
from typing import Dict, List

from bs4 import BeautifulSoup

from wordclean.core.dom.defaults import EXCEL_KEPT_PROPERTIES
from wordclean.core.dom.style_map import get_style, split_declarations
from wordclean.core.dom.tree_utils import class_string, remove

logger = logging.getLogger(__name__)

# Class selector rules only: `.xl66 { font-weight: 700 }`
_CLASS_RULE = re.compile(r"\.([a-zA-Z][\w-]*)\s*\{([^}]*)\}")

ClassRuleTable = Dict[str, List[str]]

_DROPPED_TAGS = ("col", "colgroup", "meta", "link", "style", "title")


class ExcelStyleService:
    """
    Bakes Excel's stylesheet classes into inline styles.

    Excel keeps cell formatting in a <style> block in the head. The head is
    discarded by body extraction, so the class rules have to be applied to the
    cells before that happens.
    """

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def preprocess(self, html: str) -> str:
        """
        Applies class rules as inline styles, then removes <col>/<colgroup>
        and the head-only elements a fragment paste without <body> would
        otherwise leak into the output. Returns the re-serialized document.
        """
        soup = BeautifulSoup(html, self.parser)
        rules = self.build_class_rules(soup)
        if rules:
            applied = self.apply_class_rules(soup, rules)
            logger.debug("Applied %d Excel class rules to %d elements.", len(rules), applied)

        for el in soup.find_all(_DROPPED_TAGS):
            remove(el)
        return str(soup)

    @staticmethod
    def build_class_rules(soup: BeautifulSoup) -> ClassRuleTable:
        """
        Collects the kept declarations of every class rule in every <style> block.
        Element selectors are ignored. A later rule for the same class replaces
        an earlier one.
        """
        rules: ClassRuleTable = {}
        for style_el in soup.find_all("style"):
            text = style_el.get_text() or ""
            for match in _CLASS_RULE.finditer(text):
                class_name, body = match.group(1), match.group(2)
                declarations: List[str] = []
                for prop, value in split_declarations(body):
                    if not value:
                        continue
                    # Excel only ever writes solid fills through the shorthand
                    if prop == "background":
                        prop = "background-color"
                    if prop in EXCEL_KEPT_PROPERTIES:
                        declarations.append(f"{prop}: {value}")
                if declarations:
                    rules[class_name] = declarations
        return rules

    @staticmethod
    def apply_class_rules(soup: BeautifulSoup, rules: ClassRuleTable) -> int:
        """
        Prepends matching class declarations to each element's inline style.
        Existing inline declarations come last so they win on conflicts.
        Returns the number of elements touched.
        """
        touched = 0
        for el in soup.find_all(class_=True):
            to_apply: List[str] = []
            for cls in class_string(el).split():
                to_apply.extend(rules.get(cls, ()))
            if not to_apply:
                continue
            existing = get_style(el)
            combined = "; ".join(to_apply) + ("; " + existing if existing else "")
            el["style"] = combined
            touched += 1
        return touched

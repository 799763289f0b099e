# src/wordclean/core/services/classifier_service.py
from __future__ import annotations

import re
from typing import Pattern, Tuple

# --- Desktop Word (MSO) markers ---
_WORD_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'xmlns:o="urn:schemas-microsoft-com'),
    re.compile(r'ProgId=Word\.Document'),
    re.compile(r'class="?Mso[A-Z]'),
    re.compile(r'<o:p[\s>]'),
    re.compile(r'mso-list\s*:'),
    # Word Online: one wrapper per pasted list item
    re.compile(r'class="[^"]*ListContainerWrapper'),
    re.compile(r'data-listid='),
    # Word Online: full document paste (native lists inside wrapper divs)
    re.compile(r'color:\s*windowtext', re.IGNORECASE),
    re.compile(r'border-bottom:\s*1px solid transparent'),
)

# --- Excel (desktop and Online) markers ---
_EXCEL_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r'content=["\']?Excel\.Sheet', re.IGNORECASE),
    re.compile(r'mso-displayed-decimal-separator'),
    re.compile(r'Generator["\']?\s+content=["\']?Microsoft\s+Excel', re.IGNORECASE),
)


class SourceClassifier:
    """
    Heuristic detection of Office clipboard markup.
    Works on the raw string: several markers live outside the body and Word
    output is often not well-formed enough to parse first.
    """

    @staticmethod
    def is_excel_content(html: str) -> bool:
        """Returns True if the HTML string appears to originate from Microsoft Excel."""
        if not isinstance(html, str) or not html:
            return False
        return any(p.search(html) for p in _EXCEL_PATTERNS)

    @staticmethod
    def is_word_content(html: str) -> bool:
        """
        Returns True if the HTML string appears to originate from Microsoft Word
        (desktop or Word Online) or Excel.
        """
        if not isinstance(html, str) or not html:
            return False
        return (
            any(p.search(html) for p in _WORD_PATTERNS)
            or SourceClassifier.is_excel_content(html)
        )

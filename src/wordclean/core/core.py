# src/wordclean/core/core.py
from __future__ import annotations

import logging

from wordclean.core.controllers.clean_controller import WordCleaner

logger = logging.getLogger(__name__)


# A shared cleaner configured from settings.json. It holds no per-call state,
# so the bound methods below are safe to call from anywhere.
CLEANER = WordCleaner()

# Export core functionality for use by hosts and the CLI.
is_word_content = CLEANER.is_word_content
is_excel_content = CLEANER.is_excel_content
clean = CLEANER.clean

__all__ = ["CLEANER", "WordCleaner", "clean", "is_excel_content", "is_word_content"]

# src/wordclean/core/controllers/clean_controller.py
from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup

from wordclean.core.dom.tree_utils import serialize_fragment
from wordclean.core.pipeline import CleanPipeline
from wordclean.core.services.classifier_service import SourceClassifier
from wordclean.core.services.excel_style_service import ExcelStyleService
from wordclean.core.services.structural_preprocess_service import (
    extract_body_content,
    remove_conditional_comments,
)
from wordclean.model import CleanerSettings

logger = logging.getLogger(__name__)

WRAPPER_ID = "__pfword__"


class WordCleaner:
    """
    Orchestrates detection and cleanup of Word/Excel clipboard HTML.

    The instance only holds immutable settings and the stage list, so a single
    cleaner can serve any number of calls.
    """

    def __init__(
            self,
            settings: Optional[CleanerSettings] = None,
            pipeline: Optional[CleanPipeline] = None,
    ) -> None:
        self.settings = settings or CleanerSettings.from_config()
        self.pipeline = pipeline or CleanPipeline(log_stages=self.settings.log_stages)
        self.excel = ExcelStyleService(parser=self.settings.parser)

    # -------- Detection --------

    def is_word_content(self, html: str) -> bool:
        return SourceClassifier.is_word_content(html)

    def is_excel_content(self, html: str) -> bool:
        return SourceClassifier.is_excel_content(html)

    # -------- Main pipeline --------

    def clean(self, html: str) -> str:
        """
        Converts Word/Excel clipboard HTML into minimal semantic HTML.

        When the parse wrapper cannot be found, or a stage fails while
        cleaner.fallback_on_error is set, the input is returned unchanged.

        Args:
            html (str): Raw clipboard HTML.

        Returns:
            str: The cleaned fragment.
        """
        if not isinstance(html, str):
            logger.warning("clean() expects a string, got %s.", type(html).__name__)
            return ""

        try:
            return self._clean(html)
        except Exception as e:
            if not self.settings.fallback_on_error:
                raise
            logger.error("Cleaning failed, returning input unchanged: %s", e, exc_info=True)
            return html

    def _clean(self, original: str) -> str:
        html = remove_conditional_comments(original)
        if self.is_excel_content(html):
            logger.debug("Excel content detected, baking class styles inline.")
            html = self.excel.preprocess(html)
        html = extract_body_content(html)

        soup = BeautifulSoup(f'<div id="{WRAPPER_ID}">{html}</div>', self.settings.parser)
        container = soup.find(id=WRAPPER_ID)
        if container is None:
            logger.warning("Parse wrapper not found, returning input unchanged.")
            return original

        container = self.pipeline.run(container)
        return serialize_fragment(container)

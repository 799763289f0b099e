# src/wordclean/core/adapters/paste_handler.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from wordclean.core.controllers.clean_controller import WordCleaner
from wordclean.model import PasteEvent

logger = logging.getLogger(__name__)


class PasteHandler:
    """
    Bridges a host editor's paste events to the cleaner.

    With an `on_paste` callback registered, the cleaned markup is attached to
    the event and the callback decides what to insert. Without one, the
    cleaned markup is inserted directly and the event is stopped so no other
    paste handler runs.
    """

    def __init__(
            self,
            insert_html: Callable[[str], None],
            on_paste: Optional[Callable[[PasteEvent], None]] = None,
            cleaner: Optional[WordCleaner] = None,
    ) -> None:
        self.insert_html = insert_html
        self.on_paste = on_paste
        self.cleaner = cleaner or WordCleaner()
        self.attached = False

    # -------- Lifecycle --------

    def attach(self) -> "PasteHandler":
        self.attached = True
        logger.debug("Paste handler attached.")
        return self

    def detach(self) -> None:
        self.attached = False
        logger.debug("Paste handler detached.")

    # -------- Event handling --------

    def handle(self, event: PasteEvent) -> bool:
        """
        Processes one paste event.

        Returns:
            bool: True if the event carried Word content and was handled.
        """
        if not self.attached:
            return False
        html = event.html
        if not html or not self.cleaner.is_word_content(html):
            return False

        logger.debug("Word content detected, cleaning %d characters.", len(html))
        cleaned = self.cleaner.clean(html)
        event.prevent_default()

        if self.on_paste is not None:
            event.attach_cleaned_html(cleaned)
            self.on_paste(event)
        else:
            event.stop_propagation()
            self.insert_html(cleaned)
        return True

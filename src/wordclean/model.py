# ============================================
# file: src/wordclean/model.py
# ============================================
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, PositiveInt, PrivateAttr, field_validator

from wordclean.core.managers.config_manager import config_manager


class ListItemDescriptor(BaseModel):
    """
    A single flattened list entry as read from Word markup.
    Built by the list services and consumed by the nested list builder only.
    """
    level: PositiveInt = 1
    ordered: bool = False
    content: str = ""

    @field_validator('level', mode='before')
    @classmethod
    def coerce_level(cls, v):
        # Word sometimes emits data-aria-level="" or "0"
        try:
            level = int(v)
        except (TypeError, ValueError):
            return 1
        return level if level >= 1 else 1


class CleanerSettings(BaseModel):
    parser: str = "html.parser"
    fallback_on_error: bool = True
    log_stages: bool = False

    @classmethod
    def from_config(cls) -> "CleanerSettings":
        """Builds the settings from the 'cleaner' section of settings.json."""
        section = config_manager.get_nested("cleaner", {}) or {}
        return cls(**{k: v for k, v in section.items() if k in cls.model_fields})


class PasteEvent(BaseModel):
    """
    Host-side representation of a clipboard paste.
    The cleaned markup travels on a private marker so that callbacks can pick
    it up instead of re-reading the clipboard.
    """
    html: Optional[str] = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    _pfw_cleaned_html: Optional[str] = PrivateAttr(default=None)

    @property
    def cleaned_html(self) -> Optional[str]:
        return self._pfw_cleaned_html

    def attach_cleaned_html(self, value: str) -> None:
        self._pfw_cleaned_html = value

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True

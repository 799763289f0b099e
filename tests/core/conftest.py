# tests/core/conftest.py
import pytest
from bs4 import BeautifulSoup

from wordclean.core.controllers.clean_controller import WordCleaner
from wordclean.model import CleanerSettings


@pytest.fixture
def cleaner():
    """A cleaner with default settings, independent of settings.json."""
    return WordCleaner(settings=CleanerSettings())


@pytest.fixture
def soup_of():
    """Parses a fragment the same way the pipeline does."""
    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")
    return _parse

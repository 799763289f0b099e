# src/wordclean/core/utils/path_utils.py
from typing import Optional

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """
        Returns the absolute path of the installed 'wordclean' package directory.
        This is where the bundled settings.json lives.
        """
        # .../wordclean/core/utils/path_utils.py -> .../wordclean
        return Path(__file__).resolve().parent.parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_user_config_dir() -> Path:
        """
        Returns the path to the user's .wordclean config directory.
        (e.g., ~/.wordclean/)
        """
        return Path.home() / ".wordclean"

    # --- Helper methods ---

    @staticmethod
    def get_output_path(source: Path, output_dir: Optional[Path] = None) -> Path:
        """
        Returns the path a cleaned copy of `source` is written to.
        Creates the output directory if it doesn't exist.
        """
        root = output_dir if output_dir else source.parent
        root.mkdir(parents=True, exist_ok=True)
        if output_dir:
            return root / source.name
        return root / f"{source.stem}.clean{source.suffix or '.html'}"

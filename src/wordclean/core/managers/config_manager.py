# src/wordclean/core/managers/config_manager.py
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from wordclean.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

# Points at an alternative user settings file (tests, CI, per-project setups).
SETTINGS_ENV_VAR = "WORDCLEAN_SETTINGS"


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merges `override` into a copy of `base`."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _cast_like(original: Any, value: Any) -> Any:
    """Casts `value` to the type of `original`; strings like 'false' become bools."""
    if isinstance(original, bool) and isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return type(original)(value)


class ConfigManager:
    """
    A singleton holding the layered configuration:
    the bundled settings.json, then the user's settings file on top of it.

    `set_nested` changes the in-memory view only; `save_user_value` also
    persists the value in the user's settings file.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    # --- File locations ---

    @staticmethod
    def user_settings_file() -> Path:
        override = os.environ.get(SETTINGS_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return PathUtils.get_user_config_dir() / "settings.json"

    @staticmethod
    def _load_json(path: Path) -> Dict[str, Any]:
        """Reads a JSON object from `path`; a missing or broken file yields {}."""
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring %s: top level is not a JSON object.", path)
            return {}
        return data

    # --- Reading ---

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire merged configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Retrieves a nested value with a dotted path, e.g. 'cleaner.parser'.
        """
        value: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(key)
        return value if value is not None else default

    # --- Writing ---

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration. The value is cast
        to the type of the current value when there is one.
        """
        keys = key_path.split('.')
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set '%s': '%s' is not a section.", key_path, key)
                return False

        original_value = d.get(keys[-1])
        if original_value is not None:
            try:
                value = _cast_like(original_value, value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as string.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def save_user_value(self, key_path: str, value: Any) -> bool:
        """Sets a value and writes it to the user's settings file."""
        if not self.set_nested(key_path, value):
            return False

        path = self.user_settings_file()
        user = self._load_json(path)
        d = user
        keys = key_path.split('.')
        for key in keys[:-1]:
            if not isinstance(d.get(key), dict):
                d[key] = {}
            d = d[key]
        d[keys[-1]] = self.get_nested(key_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(user, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Could not write %s: %s", path, e)
            return False
        logger.debug("Saved '%s' to %s.", key_path, path)
        return True

    def clear_user_settings(self) -> None:
        """Deletes the user's settings file and reloads the bundled defaults."""
        path = self.user_settings_file()
        if path.exists():
            path.unlink()
            logger.info("Removed user settings %s.", path)
        self.reset()

    def reset(self):
        """Rebuilds the in-memory configuration from the settings files."""
        defaults_path = PathUtils.get_settings_file()
        if not defaults_path.exists():
            logger.warning("settings.json not found at %s. Using empty defaults.", defaults_path)
        defaults = self._load_json(defaults_path)
        self._config = _merge(defaults, self._load_json(self.user_settings_file()))
        logger.debug("Configuration has been (re)loaded.")


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()

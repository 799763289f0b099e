# src/wordclean/core/handlers/config_handler.py
import json
import logging
from typing import List

from wordclean.core.managers.config_manager import config_manager
from wordclean.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

config_help_text = """
  config list                Show the merged configuration as JSON.
  config path                Show the bundled and user settings files.
  config set <key> <value>   Save a value in the user settings file (e.g. cleaner.log_stages true).
  config reset               Delete the user settings file.
""".strip()


def handle_config(args: List[str]) -> int:
    """Handles the 'config' command for viewing and changing settings."""
    if not args:
        print(config_help_text)
        return 1

    command = args[0]

    if command == "list":
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0

    if command == "path":
        print(f"defaults: {PathUtils.get_settings_file()}")
        print(f"user:     {config_manager.user_settings_file()}")
        return 0

    if command == "set":
        if len(args) < 3:
            print("Usage: config set <key> <value>")
            return 1
        key_path = args[1]
        value = " ".join(args[2:])
        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]

        if config_manager.save_user_value(key_path, value):
            new_value = config_manager.get_nested(key_path)
            print(f"✅ Config saved: {key_path} = {new_value} (type: {type(new_value).__name__})")
            return 0
        print(f"❌ Error: Failed to save config value for key '{key_path}'.")
        return 1

    if command == "reset":
        config_manager.clear_user_settings()
        print("✅ User settings removed; using the bundled settings.json.")
        return 0

    print(f"❌ Error: Unknown command 'config {command}'.")
    return 1

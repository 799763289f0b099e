# src/wordclean/app.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordclean.core.managers.config_manager import config_manager
from wordclean.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

HELP_TEXT = """
wordclean - turn Word/Excel clipboard HTML into clean HTML.

COMMANDS:
{detect}

{clean}

{config}

OPTIONS:
  --log-level <LEVEL>   Overrides debug.level from settings.json.
""".strip()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the `wordclean` console script."""
    # Handlers import the shared cleaner, which reads the config on import.
    from wordclean.core.handlers.clean_handler import clean_help_text, handle_clean
    from wordclean.core.handlers.config_handler import config_help_text, handle_config
    from wordclean.core.handlers.detect_handler import detect_help_text, handle_detect

    commands = {"clean": handle_clean, "config": handle_config, "detect": handle_detect}

    parser = argparse.ArgumentParser(prog="wordclean", add_help=False)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("command", nargs="?", default=None)
    parser.add_argument("args", nargs=argparse.REMAINDER)

    try:
        pargs = parser.parse_args(sys.argv[1:] if argv is None else argv)
    except SystemExit:
        return 1

    if pargs.log_level:
        config_manager.set_nested("debug.level", pargs.log_level.upper())
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("debug.modules", {}),
        silenced_loggers=config_manager.get_nested("debug.silenced", {}),
        log_file=config_manager.get_nested("debug.log_file"),
    )

    if pargs.help or not pargs.command:
        print(HELP_TEXT.format(detect=detect_help_text, clean=clean_help_text, config=config_help_text))
        return 0

    name, args = pargs.command, pargs.args
    handler = commands.get(name)
    if handler is None:
        print(f"❌ Error: Unknown command '{name}'.")
        return 1

    logger.debug("Running command '%s' with %d argument(s).", name, len(args))
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())

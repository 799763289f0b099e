# src/wordclean/core/utils/configure_logging.py
import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

Level = Union[str, int]

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


class LogWithTqdm(logging.Handler):
    """
    Routes log records through `tqdm.write()` so they don't break the
    progress bar of a multi-file `clean` run.
    """
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Level, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: Level = 'WARNING',
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None,
        log_file: Optional[str] = None,
) -> logging.Handler:
    """
    Installs the tqdm-aware console handler on the root logger, plus a file
    handler when `log_file` is set. Only the CLI calls this; importing the
    library leaves logging untouched.

    Args:
        general_level: Root level, e.g. 'INFO' (debug.level).
        module_specific_levels: Logger name -> level (debug.modules).
        silenced_loggers: Logger name -> level for chatty dependencies (debug.silenced).
        log_file: Optional path that receives the same records (debug.log_file).

    Returns:
        logging.Handler: The console handler.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    console = LogWithTqdm()
    console.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    # Chatty dependencies such as bs4
    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))

    return console

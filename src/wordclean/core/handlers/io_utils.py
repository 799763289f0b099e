# src/wordclean/core/handlers/io_utils.py
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def read_source(name: str) -> Optional[str]:
    """Reads a file ('-' = stdin). Returns None after reporting a read error."""
    if name == "-":
        return sys.stdin.read()
    try:
        return Path(name).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.error("Could not read %s: %s", name, e)
        print(f"❌ Error: Could not read '{name}': {e}")
        return None


def write_output(text: str, path: Optional[Path]) -> bool:
    """Writes to `path`, or to stdout when no path is given."""
    if path is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return True
    try:
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", path)
        return True
    except OSError as e:
        logger.error("Could not write %s: %s", path, e)
        print(f"❌ Error: Could not write '{path}': {e}")
        return False

# ============================================
# file: src/wordclean/core/handlers/clean_handler.py
# ============================================
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from wordclean.core.core import CLEANER
from wordclean.core.handlers.io_utils import read_source, write_output
from wordclean.core.managers.config_manager import config_manager
from wordclean.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

clean_help_text = """
  clean <file>... [-o <dir>] [--force] [--no-progress]
      Cleans Word/Excel clipboard HTML. Output goes to stdout, or into <dir>
      when -o is given. Non-Word input is skipped unless --force is set.
""".strip()


def handle_clean(args: List[str]) -> int:
    parser = argparse.ArgumentParser(prog="wordclean clean", description="Clean Word/Excel clipboard HTML.")
    parser.add_argument("files", nargs="+", metavar="FILE", help="HTML files ('-' for stdin).")
    parser.add_argument("-o", "--output-dir", type=Path, default=None,
                        help="Directory for cleaned files (default: stdout).")
    parser.add_argument("--force", action="store_true",
                        help="Clean even when no Word/Excel markers are found.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    # show_progress: CLI > config > default(True); only useful for several files
    show_progress = (
        not pargs.no_progress
        and config_manager.get_nested("cli.show_progress", True)
        and len(pargs.files) > 1
    )
    iterator = tqdm(pargs.files, desc="Cleaning", unit="file", leave=False) if show_progress else pargs.files

    exit_code = 0
    for name in iterator:
        html = read_source(name)
        if html is None:
            exit_code = 1
            continue

        if not pargs.force and not CLEANER.is_word_content(html):
            logger.info("No Word/Excel markers in %s, skipping.", name)
            print(f"ℹ️ Skipped '{name}': no Word or Excel markup detected (use --force).")
            continue

        cleaned = CLEANER.clean(html)
        target: Optional[Path] = None
        if pargs.output_dir is not None:
            source = Path("stdin.html") if name == "-" else Path(name)
            target = PathUtils.get_output_path(source, pargs.output_dir)
        if not write_output(cleaned, target):
            exit_code = 1

    return exit_code

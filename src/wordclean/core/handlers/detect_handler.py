# ============================================
# file: src/wordclean/core/handlers/detect_handler.py
# ============================================
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from wordclean.core.core import CLEANER
from wordclean.core.handlers.io_utils import read_source

logger = logging.getLogger(__name__)

detect_help_text = """
  detect <file>...
      Reports whether each file holds Word, Excel or plain HTML.
      Use '-' to read from stdin.
""".strip()


def classify(html: str) -> str:
    if CLEANER.is_excel_content(html):
        return "excel"
    if CLEANER.is_word_content(html):
        return "word"
    return "plain"


def handle_detect(args: List[str]) -> int:
    parser = argparse.ArgumentParser(prog="wordclean detect", description="Detect Office clipboard HTML.")
    parser.add_argument("files", nargs="+", metavar="FILE", help="HTML files ('-' for stdin).")

    try:
        pargs = parser.parse_args(args)
    except SystemExit:
        return 1

    exit_code = 0
    for name in pargs.files:
        html = read_source(name)
        if html is None:
            exit_code = 1
            continue
        print(f"{name}: {classify(html)}", file=sys.stdout)
    return exit_code

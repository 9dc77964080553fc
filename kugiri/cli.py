"""
Command-line interface.

Usage:
    kugiri 私の名前は中野です
    kugiri --separator "|" 私の名前は中野です
    echo 私の名前は中野です | kugiri -
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import KugiriError, MissingInputError
from .segmenter import Segmenter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kugiri",
        description="Split Japanese text into words.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="text to segment, or '-' to read lines from standard input",
    )
    parser.add_argument(
        "-s", "--separator",
        default=" ",
        help="string printed between tokens (default: a single space)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print each result as a JSON object with tokens and spans",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _emit(segmenter: Segmenter, text: str, args: argparse.Namespace) -> None:
    if args.json:
        result = segmenter.analyze(text)
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        print(segmenter.tokenize(text, separator=args.separator))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line and return the exit status.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        segmenter = Segmenter()
        if args.text == "-":
            for lineno, line in enumerate(sys.stdin, start=1):
                logger.debug("Segmenting line %d", lineno)
                _emit(segmenter, line.rstrip("\r\n"), args)
        else:
            _emit(segmenter, args.text, args)
    except MissingInputError:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: no text to segment was given", file=sys.stderr)
        return 2
    except KugiriError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    return 0

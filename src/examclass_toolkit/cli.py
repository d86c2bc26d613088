"""
Module: cli

Purpose:
    Pandoc JSON filter entry point. Reads a document from stdin, converts
    its ``part`` Divs into exam-class LaTeX, and writes it to stdout:

        pandoc exam.md --filter examclass-filter -o exam.tex

Key Functions:
    - build_parser(): Argument parser
    - main(): Console script entry point
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from examclass_toolkit import __version__
from examclass_toolkit.core.schemas.validator import ValidationError
from examclass_toolkit.latex import FilterConfig, filter_text

logger = logging.getLogger("examclass_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="examclass-filter",
        description="Convert part Divs in a Pandoc JSON document to exam-class LaTeX",
    )
    # Pandoc passes the target format as the first argument
    parser.add_argument("format", nargs="?", default="latex", help="Pandoc output format")
    parser.add_argument(
        "--wrap-questions",
        action="store_true",
        help="Add a questions environment when the document has none",
    )
    parser.add_argument(
        "--no-relocate",
        action="store_true",
        help="Leave \\begin{questions} where it is",
    )
    parser.add_argument("--strict", action="store_true", help="Validate input against the JSON schema")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.format not in ("latex", "beamer"):
        logger.info(f"Output format '{args.format}' is not LaTeX; converting anyway")

    config = FilterConfig(
        wrap_questions=args.wrap_questions,
        relocate_preface=not args.no_relocate,
        strict=args.strict,
    )

    # Pandoc always speaks UTF-8, whatever the console locale
    try:
        text = sys.stdin.buffer.read().decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Input is not UTF-8: {e}")
        return 1

    try:
        output = filter_text(text, config=config)
    except ValidationError as e:
        location = f" at {e.path}" if e.path else ""
        logger.error(f"Invalid Pandoc document{location}: {e}")
        for detail in e.errors:
            logger.error(f"  {detail}")
        return 1

    sys.stdout.buffer.write(output.encode("utf-8"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

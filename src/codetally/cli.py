"""Command-line interface for codetally."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from codetally.parsers import ParseError
from codetally.pipeline import (
    format_decorations,
    load_cst,
    resolve_thresholds,
    run,
    run_decorations,
)

logger = logging.getLogger("codetally")


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="codetally",
        description="Method and class size metrics with refactoring hints for Java sources.",
    )
    parser.add_argument(
        "source_file",
        type=Path,
        help="Path to the Java source file to analyze",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output report path (default: <name>-metrics.<format> next to the source)",
    )
    parser.add_argument(
        "--format",
        choices=("html", "json"),
        default="html",
        dest="fmt",
        help="Report format (default: html)",
    )
    parser.add_argument(
        "--decorations",
        action="store_true",
        help="Print inline decoration records instead of writing a report",
    )
    parser.add_argument(
        "--method-loc-threshold",
        type=_positive_int,
        default=None,
        help="Method LOC above which a decoration turns into a warning (default: 10)",
    )
    parser.add_argument(
        "--class-method-threshold",
        type=_positive_int,
        default=None,
        help="Method count above which a class decoration turns into a warning (default: 10)",
    )
    parser.add_argument(
        "--cst",
        type=Path,
        default=None,
        help="Use a pre-parsed java-parser CST (JSON) instead of parsing the source",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        dest="open_browser",
        help="Open the generated HTML in a browser",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("codetally").setLevel(logging.DEBUG)

    if not args.source_file.is_file():
        logger.error("No such file: %s", args.source_file)
        sys.exit(1)

    try:
        parse = load_cst(args.cst) if args.cst else None
        if args.decorations:
            thresholds = resolve_thresholds(
                args.source_file,
                method_loc_threshold=args.method_loc_threshold,
                class_method_threshold=args.class_method_threshold,
            )
            for row in format_decorations(run_decorations(args.source_file, thresholds, parse)):
                print(row)
        else:
            out_path = run(
                args.source_file,
                output=args.output,
                fmt=args.fmt,
                open_browser=args.open_browser,
                parse=parse,
            )
            print(out_path)
    except (ParseError, OSError, json.JSONDecodeError) as e:
        logger.error("Analysis failed for %s: %s", args.source_file, e)
        sys.exit(1)

"""Command-line entry point for aligning and editing markdown tables.

Usage:
    md-table format NOTES.md [--in-place]
    md-table edit NOTES.md --line 4 --column 7 --action insert_row_below [--in-place]
    md-table template
"""

import argparse
import logging
import sys
from pathlib import Path

from md_table import config
from md_table.tables.patterns import TABLE_TEMPLATE
from md_table.tables.pipeline import TableAction, apply_edit, reformat_document

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="md-table", description="Align and edit markdown tables.")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        type=str.upper,
        choices=config.LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    fmt = sub.add_parser("format", help="Align every table in a markdown file")
    fmt.add_argument("path", type=Path)
    fmt.add_argument("--in-place", action="store_true", help="Rewrite the file instead of printing")

    edit = sub.add_parser("edit", help="Apply one structural edit to the table under a caret")
    edit.add_argument("path", type=Path)
    edit.add_argument("--line", type=int, required=True, help="0-based caret line")
    edit.add_argument("--column", type=int, default=0, help="0-based caret character offset on the line")
    edit.add_argument("--action", required=True, choices=[action.value for action in TableAction])
    edit.add_argument("--in-place", action="store_true", help="Rewrite the file instead of printing")

    sub.add_parser("template", help="Print the starter table")
    return parser


def _emit(path: Path, text: str, in_place: bool) -> None:
    """Write *text* back to *path* or to stdout."""
    if in_place:
        with open(path, "w", encoding="utf-8") as fopen:
            fopen.write(text)
        logger.info("Wrote %s", path)
    else:
        sys.stdout.write(text)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    if args.command == "template":
        sys.stdout.write(TABLE_TEMPLATE)
        return 0

    try:
        with open(args.path, "r", encoding="utf-8") as fopen:
            text = fopen.read()
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.path, exc)
        return 1

    if args.command == "format":
        _emit(args.path, reformat_document(text), args.in_place)
        return 0

    lines = text.split("\n")
    edited = apply_edit(lines, args.line, args.column, TableAction(args.action))
    if edited is None:
        logger.error("Line %d of %s is not inside a table", args.line, args.path)
        return 1
    _emit(args.path, "\n".join(edited), args.in_place)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Host-facing table editing entry points.

Ties the pieces together the way the editor drives them: locate and parse the
table under the caret, apply at most one structural edit, re-render the table
aligned, and hand back the text to splice over the located line range.
"""

import logging
from enum import Enum

from pydantic import BaseModel

from md_table.tables.cursor import column_at
from md_table.tables.detection import parse_table
from md_table.tables.editing import try_add_column, try_add_row, try_delete_column, try_delete_row
from md_table.tables.formatting import format_table
from md_table.tables.schema import EditResult

logger = logging.getLogger(__name__)


class TableAction(str, Enum):
    """Structural edits offered by the editor's table menu."""

    INSERT_ROW_ABOVE = "insert_row_above"
    INSERT_ROW_BELOW = "insert_row_below"
    INSERT_COLUMN_LEFT = "insert_column_left"
    INSERT_COLUMN_RIGHT = "insert_column_right"
    DELETE_ROW = "delete_row"
    DELETE_COLUMN = "delete_column"
    ALIGN = "align"


class TableEdit(BaseModel):
    """Formatted replacement text for host lines start_line..end_line (inclusive)."""

    text: str
    start_line: int
    end_line: int
    result: EditResult


# ─── Single Table Edit ───────────────────────────────────────────────────────


def edit_table(lines: list[str], line_index: int, offset: int, action: TableAction) -> TableEdit | None:
    """Apply *action* to the table under the caret and return the re-rendered table.

    *line_index* is the caret's line and *offset* its character position on
    that line.  Returns None when the caret line is not part of a table.  A
    rejected edit still returns the aligned original table, with
    ``result.applied`` set to False.
    """
    parsed = parse_table(lines, line_index)
    if parsed is None:
        logger.debug("Line %d is not inside a table; nothing to edit", line_index)
        return None

    table = parsed.table
    row = line_index - parsed.start_line
    # A caret past the closing pipe still targets the last column
    column = min(column_at(lines[line_index], offset), max(0, table.column_count - 1))

    action = TableAction(action)
    if action is TableAction.INSERT_ROW_ABOVE:
        result = try_add_row(table, row)
    elif action is TableAction.INSERT_ROW_BELOW:
        result = try_add_row(table, row + 1)
    elif action is TableAction.INSERT_COLUMN_LEFT:
        result = try_add_column(table, column)
    elif action is TableAction.INSERT_COLUMN_RIGHT:
        result = try_add_column(table, column + 1)
    elif action is TableAction.DELETE_ROW:
        result = try_delete_row(table, row)
    elif action is TableAction.DELETE_COLUMN:
        result = try_delete_column(table, column)
    else:
        result = EditResult(applied=True, table=table)

    logger.debug(
        "%s at row %d, column %d (lines %d-%d): applied=%s",
        action.value,
        row,
        column,
        parsed.start_line,
        parsed.end_line,
        result.applied,
    )
    return TableEdit(
        text=format_table(result.table),
        start_line=parsed.start_line,
        end_line=parsed.end_line,
        result=result,
    )


def splice_lines(lines: list[str], start_line: int, end_line: int, text: str) -> list[str]:
    """Return a copy of *lines* with lines start_line..end_line replaced by *text*."""
    return lines[:start_line] + text.split("\n") + lines[end_line + 1 :]


def apply_edit(lines: list[str], line_index: int, offset: int, action: TableAction) -> list[str] | None:
    """Run edit_table() and splice its output back into a copy of *lines*."""
    edit = edit_table(lines, line_index, offset, action)
    if edit is None:
        return None
    return splice_lines(lines, edit.start_line, edit.end_line, edit.text)


# ─── Whole Document ──────────────────────────────────────────────────────────


def reformat_document(text: str) -> str:
    """Align every table in a markdown document, leaving other lines untouched."""
    lines = text.split("\n")
    output: list[str] = []
    n_tables = 0

    i = 0
    while i < len(lines):
        parsed = parse_table(lines, i)
        if parsed is None:
            output.append(lines[i])
            i += 1
            continue
        # parse_table() expands from i, and i is always the first line of its run
        output.extend(format_table(parsed.table).split("\n"))
        n_tables += 1
        i = parsed.end_line + 1

    logger.info("Aligned %d table(s) across %d lines", n_tables, len(lines))
    return "\n".join(output)

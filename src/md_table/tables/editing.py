"""Row and column insertion/deletion for markdown tables.

Each ``try_*`` function returns an EditResult: a new Table when the edit is
applied, or the unchanged input plus a reason when it is rejected.  The plain
functions (``add_row``, ``delete_row``, ...) return only the table, so a
rejected edit is a silent no-op and the result compares equal to the input.

The separator row keeps its identity across edits: row insertions above it
shift its index down, deletions above it shift it up, and it cannot itself be
deleted.
"""

import logging

from md_table.tables.patterns import SEPARATOR_CELL
from md_table.tables.schema import EditResult, Table

logger = logging.getLogger(__name__)


def _rejected(table: Table, reason: str) -> EditResult:
    """Build a rejected EditResult carrying the unchanged input table."""
    logger.debug("Edit rejected: %s", reason)
    return EditResult(applied=False, table=table, reason=reason)


# ─── Rows ─────────────────────────────────────────────────────────────────────


def try_add_row(table: Table, at_index: int) -> EditResult:
    """Insert a row of empty cells so that it ends up at *at_index*."""
    if not table.rows:
        return _rejected(table, "table has no rows")
    if at_index < 0 or at_index > len(table.rows):
        return _rejected(table, f"row index {at_index} is outside 0..{len(table.rows)}")

    rows = [list(row) for row in table.rows]
    rows.insert(at_index, [""] * table.column_count)

    # Inserting at or above the separator pushes it down one row
    separator_row_index = table.separator_row_index
    if at_index <= separator_row_index:
        separator_row_index += 1

    return EditResult(applied=True, table=Table(rows=rows, separator_row_index=separator_row_index))


def try_delete_row(table: Table, index: int) -> EditResult:
    """Remove the row at *index*; the separator row is never removed."""
    if index < 0 or index >= len(table.rows):
        return _rejected(table, f"row index {index} is outside 0..{len(table.rows) - 1}")
    if index == table.separator_row_index:
        return _rejected(table, "the separator row cannot be deleted")

    rows = [list(row) for i, row in enumerate(table.rows) if i != index]

    # Removing a row above the separator pulls it up one row
    separator_row_index = table.separator_row_index
    if index < separator_row_index:
        separator_row_index -= 1

    return EditResult(applied=True, table=Table(rows=rows, separator_row_index=separator_row_index))


# ─── Columns ──────────────────────────────────────────────────────────────────


def try_add_column(table: Table, index: int) -> EditResult:
    """Insert a cell at position *index* in every row.

    The new cell is ``---`` in the separator row and empty everywhere else.
    """
    if not table.rows:
        return _rejected(table, "table has no rows")
    if index < 0 or index > table.column_count:
        return _rejected(table, f"column index {index} is outside 0..{table.column_count}")

    rows: list[list[str]] = []
    for row_index, row in enumerate(table.rows):
        cells = list(row)
        cells.insert(index, SEPARATOR_CELL if row_index == table.separator_row_index else "")
        rows.append(cells)

    return EditResult(applied=True, table=Table(rows=rows, separator_row_index=table.separator_row_index))


def try_delete_column(table: Table, index: int) -> EditResult:
    """Remove the cell at *index* from every row, keeping at least one column."""
    if not table.rows:
        return _rejected(table, "table has no rows")
    if index < 0 or index >= table.column_count:
        return _rejected(table, f"column index {index} is outside 0..{table.column_count - 1}")
    if table.column_count == 1:
        return _rejected(table, "the last column cannot be deleted")

    rows = [row[:index] + row[index + 1 :] for row in table.rows]
    return EditResult(applied=True, table=Table(rows=rows, separator_row_index=table.separator_row_index))


# ─── Silent No-op Forms ───────────────────────────────────────────────────────


def add_row(table: Table, at_index: int) -> Table:
    """Return *table* with an empty row inserted at *at_index* (unchanged if rejected)."""
    return try_add_row(table, at_index).table


def delete_row(table: Table, index: int) -> Table:
    """Return *table* without row *index* (unchanged if out of range or the separator)."""
    return try_delete_row(table, index).table


def add_column(table: Table, index: int) -> Table:
    """Return *table* with a new column at *index* (unchanged if rejected)."""
    return try_add_column(table, index).table


def delete_column(table: Table, index: int) -> Table:
    """Return *table* without column *index* (unchanged if out of range or the last column)."""
    return try_delete_column(table, index).table

"""Caret offset to table column mapping."""

from md_table.tables.patterns import CELL_DELIMITER


def column_at(line: str, offset: int) -> int:
    """Return the zero-based column of a caret at *offset* on a table line.

    Counts the pipes before the caret: one pipe means the first cell.  A caret
    before the opening pipe also maps to column 0, and a caret after the
    closing pipe maps to one past the last column.  The caller must already
    know that *line* is a table line.
    """
    pipe_count = line[: max(0, offset)].count(CELL_DELIMITER)
    return max(0, pipe_count - 1)

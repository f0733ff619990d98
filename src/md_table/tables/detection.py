"""Table span location and row/cell parsing.

Operates on a snapshot of host-buffer lines: finds the maximal run of table
lines around a reference line, splits each line into trimmed cells, pads the
rows to a common width, and finds the separator row.
"""

import logging

from md_table.tables.classifiers import is_separator_row, is_table_line
from md_table.tables.patterns import CELL_DELIMITER, NO_SEPARATOR
from md_table.tables.schema import ParsedTable, Table, TableSpan

logger = logging.getLogger(__name__)


# ─── Span Location ────────────────────────────────────────────────────────────


def locate_table(lines: list[str], index: int) -> TableSpan | None:
    """Return the maximal contiguous run of table lines containing *index*.

    Returns None if *index* is out of bounds or its line is not a table line.
    """
    if index < 0 or index >= len(lines):
        return None
    if not is_table_line(lines[index]):
        return None

    # Expand upwards while the previous line is still part of the table
    start_line = index
    while start_line > 0 and is_table_line(lines[start_line - 1]):
        start_line -= 1

    # Expand downwards while the next line is still part of the table
    end_line = index
    while end_line < len(lines) - 1 and is_table_line(lines[end_line + 1]):
        end_line += 1

    logger.debug("Located table lines %d-%d around line %d", start_line, end_line, index)
    return TableSpan(lines=lines[start_line : end_line + 1], start_line=start_line, end_line=end_line)


# ─── Row / Cell Parsing ──────────────────────────────────────────────────────


def parse_row(line: str) -> list[str]:
    """Split a table line into trimmed cells.

    Strips exactly one leading and one trailing pipe, then splits on every
    remaining pipe.  An escaped ``\\|`` inside a cell is split like any other
    pipe.  A lone ``|`` is both the opening and the closing pipe, so it parses
    to a single empty cell.
    """
    content = line.strip()
    inner = content[1:-1]
    return [cell.strip() for cell in inner.split(CELL_DELIMITER)]


def find_separator_row(rows: list[list[str]]) -> int:
    """Return the index of the first separator row, or NO_SEPARATOR."""
    for i, row in enumerate(rows):
        if is_separator_row(row):
            return i
    return NO_SEPARATOR


def build_table(lines: list[str]) -> Table:
    """Parse table lines into a Table, right-padding short rows with empty cells.

    Padding does not mean the cell was intentionally blank: a malformed row
    with a missing pipe has its remaining cells shifted left.
    """
    rows = [parse_row(line) for line in lines]

    # Normalise every row to the widest row's cell count
    if rows:
        max_cells = max(len(row) for row in rows)
        for row in rows:
            row.extend([""] * (max_cells - len(row)))

    return Table(rows=rows, separator_row_index=find_separator_row(rows))


def parse_table(lines: list[str], index: int) -> ParsedTable | None:
    """Locate the table around *index* and parse it, or return None if there is none."""
    span = locate_table(lines, index)
    if span is None:
        return None
    return ParsedTable(table=build_table(span.lines), start_line=span.start_line, end_line=span.end_line)

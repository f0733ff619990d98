"""Line and cell classification helpers for markdown tables.

Each function takes a string (or a parsed row) and returns True/False.
"""

from md_table.tables.patterns import CELL_DELIMITER, SEPARATOR_CELL_RE


def is_table_line(line: str) -> bool:
    """Return True if the trimmed line starts and ends with a pipe.

    This is the only gate for table membership; cell count and content are
    not checked.
    """
    stripped = line.strip()
    return stripped.startswith(CELL_DELIMITER) and stripped.endswith(CELL_DELIMITER)


def is_separator_cell(cell: str) -> bool:
    """Return True if the cell is made only of whitespace, hyphens, and colons."""
    return bool(SEPARATOR_CELL_RE.match(cell))


def is_separator_row(cells: list[str]) -> bool:
    """Return True for a header/body divider row like ``| --- | :-: |``."""
    # Every cell must be dash/colon-only, and at least one must hold a dash
    if not all(is_separator_cell(cell) for cell in cells):
        return False
    return any("-" in cell for cell in cells)

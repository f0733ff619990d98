"""Pydantic models for markdown table editing.

``Table`` is the structured form of a contiguous block of pipe-delimited
lines.  Every operation in this package builds a new ``Table`` rather than
mutating its input, so the model_validator runs on every result and the
cell-count invariant cannot drift.
"""

from pydantic import BaseModel, model_validator

from md_table.tables.patterns import NO_SEPARATOR


class Table(BaseModel):
    """Rows of cell strings plus the index of the header/body separator row.

    ``separator_row_index`` is ``NO_SEPARATOR`` (-1) when the table has no
    separator.  Two tables are equal when their rows and separator index are
    equal, which is how callers of the plain editing functions detect a
    rejected edit.
    """

    rows: list[list[str]]
    separator_row_index: int = NO_SEPARATOR

    @model_validator(mode="after")
    def validate_shape(self) -> "Table":
        """Ensure every row has the same cell count and the separator index is in range."""
        if self.rows:
            n_cols = len(self.rows[0])
            for i, row in enumerate(self.rows):
                if len(row) != n_cols:
                    raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching row 0)")
        if self.separator_row_index != NO_SEPARATOR and not 0 <= self.separator_row_index < len(self.rows):
            raise ValueError(f"separator_row_index {self.separator_row_index} is out of range for {len(self.rows)} rows")
        return self

    @property
    def column_count(self) -> int:
        """Number of cells per row (0 for a table without rows)."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def has_separator(self) -> bool:
        return self.separator_row_index != NO_SEPARATOR


class TableSpan(BaseModel):
    """Raw table lines and the inclusive host-buffer line range they came from."""

    lines: list[str]
    start_line: int
    end_line: int


class ParsedTable(BaseModel):
    """A parsed table plus the inclusive host-buffer line range to replace."""

    table: Table
    start_line: int
    end_line: int


class EditResult(BaseModel):
    """Outcome of a structural edit.

    ``applied`` is False when the edit was rejected; ``table`` is then the
    unchanged input and ``reason`` says why.
    """

    applied: bool
    table: Table
    reason: str | None = None

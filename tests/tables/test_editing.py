"""Unit tests for structural row and column edits.

Covers separator-index bookkeeping, rejected edits (both the silent no-op
forms and the explicit EditResult forms), and the equal-cell-count invariant.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from md_table.tables.editing import (
    add_column,
    add_row,
    delete_column,
    delete_row,
    try_add_column,
    try_add_row,
    try_delete_column,
    try_delete_row,
)
from md_table.tables.patterns import NO_SEPARATOR
from md_table.tables.schema import Table


# ===========================================================================
# add_row tests
# ===========================================================================


class TestAddRow:

    def test_insert_below_separator(self, scenario_table):
        result = add_row(scenario_table, 2)
        assert len(result.rows) == 4
        assert result.separator_row_index == 1
        assert result.rows[2] == ["", ""]

    def test_insert_at_separator_shifts_it(self, scenario_table):
        result = add_row(scenario_table, 1)
        assert result.separator_row_index == 2
        assert result.rows[1] == ["", ""]
        assert result.rows[2] == ["-", "-"]

    def test_insert_at_top(self, scenario_table):
        result = add_row(scenario_table, 0)
        assert result.separator_row_index == 2
        assert result.rows[0] == ["", ""]

    def test_append(self, scenario_table):
        result = add_row(scenario_table, 3)
        assert result.rows[-1] == ["", ""]
        assert result.separator_row_index == 1

    def test_no_separator_stays_sentinel(self):
        table = Table(rows=[["a"], ["b"]])
        assert add_row(table, 0).separator_row_index == NO_SEPARATOR

    def test_input_not_mutated(self, scenario_table):
        before = scenario_table.model_copy(deep=True)
        add_row(scenario_table, 0)
        assert scenario_table == before

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range_is_noop(self, scenario_table, index):
        assert add_row(scenario_table, index) == scenario_table

    def test_empty_table_rejected(self):
        result = try_add_row(Table(rows=[]), 0)
        assert result.applied is False
        assert result.reason == "table has no rows"


# ===========================================================================
# delete_row tests
# ===========================================================================


class TestDeleteRow:

    def test_delete_data_row(self, scenario_table):
        result = delete_row(scenario_table, 2)
        assert result.rows == [["A", "B"], ["-", "-"]]
        assert result.separator_row_index == 1

    def test_delete_above_separator(self, scenario_table):
        result = delete_row(scenario_table, 0)
        assert result.rows == [["-", "-"], ["1", "2"]]
        assert result.separator_row_index == 0

    def test_separator_protected(self, scenario_table):
        assert delete_row(scenario_table, scenario_table.separator_row_index) == scenario_table

    def test_separator_rejection_reason(self, scenario_table):
        result = try_delete_row(scenario_table, 1)
        assert result.applied is False
        assert result.table == scenario_table
        assert "separator" in result.reason

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_is_noop(self, scenario_table, index):
        assert try_delete_row(scenario_table, index).applied is False
        assert delete_row(scenario_table, index) == scenario_table

    def test_delete_without_separator(self):
        table = Table(rows=[["a"], ["b"]])
        result = delete_row(table, 1)
        assert result.rows == [["a"]]
        assert result.separator_row_index == NO_SEPARATOR


# ===========================================================================
# add_column tests
# ===========================================================================


class TestAddColumn:

    def test_insert_first(self, scenario_table):
        result = add_column(scenario_table, 0)
        assert result.rows == [["", "A", "B"], ["---", "-", "-"], ["", "1", "2"]]
        assert result.separator_row_index == 1

    def test_append(self, scenario_table):
        result = add_column(scenario_table, 2)
        assert result.rows == [["A", "B", ""], ["-", "-", "---"], ["1", "2", ""]]

    def test_no_separator(self):
        table = Table(rows=[["a"], ["b"]])
        assert add_column(table, 1).rows == [["a", ""], ["b", ""]]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_out_of_range_is_noop(self, scenario_table, index):
        assert add_column(scenario_table, index) == scenario_table

    def test_empty_table_rejected(self):
        assert try_add_column(Table(rows=[]), 0).applied is False


# ===========================================================================
# delete_column tests
# ===========================================================================


class TestDeleteColumn:

    def test_scenario_d(self, scenario_table):
        result = delete_column(scenario_table, 1)
        assert result.rows == [["A"], ["-"], ["1"]]
        assert result.separator_row_index == 1

    def test_delete_first(self, scenario_table):
        assert delete_column(scenario_table, 0).rows == [["B"], ["-"], ["2"]]

    @pytest.mark.parametrize("index", [-1, 2])
    def test_out_of_range_is_noop(self, scenario_table, index):
        assert delete_column(scenario_table, index) == scenario_table

    def test_empty_table_is_noop(self):
        table = Table(rows=[])
        assert delete_column(table, 0) == table

    def test_last_column_protected(self, scenario_table):
        single = delete_column(scenario_table, 1)
        result = try_delete_column(single, 0)
        assert result.applied is False
        assert result.table == single
        assert "last column" in result.reason


# ===========================================================================
# Invariant tests
# ===========================================================================


class TestCellCountInvariant:

    def test_mixed_column_edits(self, scenario_table):
        table = scenario_table
        for op, index in [
            (add_column, 0),
            (add_column, 3),
            (delete_column, 1),
            (add_column, 1),
            (delete_column, 0),
            (delete_column, 0),
            (delete_column, 0),
            (delete_column, 0),
        ]:
            table = op(table, index)
            assert len({len(row) for row in table.rows}) == 1
        assert table.column_count == 1

    def test_applied_result(self, scenario_table):
        result = try_add_column(scenario_table, 1)
        assert result.applied is True
        assert result.reason is None
        assert result.table.column_count == 3

"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from md_table.tables.detection import parse_table

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")

SCENARIO_LINES = ["| A | B |", "| - | - |", "| 1 | 2 |"]


@pytest.fixture
def scenario_lines() -> list[str]:
    """Three-line table: header, separator, one data row."""
    return list(SCENARIO_LINES)


@pytest.fixture
def scenario_table(scenario_lines):
    """The parsed Table for scenario_lines."""
    return parse_table(scenario_lines, 2).table

"""Compiled regex patterns and layout constants for markdown tables.

Used by classifiers.py to recognise table lines and separator cells, and by
formatting.py / editing.py for the rendered shape of a table.
"""

import re

# ─── Table Line Structure ─────────────────────────────────────────────────────

# Column delimiter inside a table row (escaped pipes are not recognised)
CELL_DELIMITER = "|"

# Separator cell such as "---", ":--", "--:", or " :-: "
SEPARATOR_CELL_RE = re.compile(r"^[\s\-:]+$")

# Sentinel for "this table has no header/body separator row"
NO_SEPARATOR = -1


# ─── Layout Constants ─────────────────────────────────────────────────────────

# Separator cells are always at least this many dashes wide
SEPARATOR_MIN_WIDTH = 3

# Content of a separator cell created by add_column
SEPARATOR_CELL = "-" * SEPARATOR_MIN_WIDTH

# Characters with a code point above this count as double width (CJK, etc.)
WIDE_CHAR_THRESHOLD = 255

# Starter table inserted by the editor's "insert table" command
TABLE_TEMPLATE = "\n| Header 1 | Header 2 |\n| -------- | -------- |\n| Cell 1   | Cell 2   |\n"

"""Display widths and aligned markdown rendering.

Column widths use a simple display-width metric: characters above Latin-1
count as two columns so CJK text lines up in a monospaced editor.
"""

from md_table.tables.patterns import SEPARATOR_MIN_WIDTH, WIDE_CHAR_THRESHOLD
from md_table.tables.schema import Table


# ─── Width Calculation ───────────────────────────────────────────────────────


def _char_width(char: str) -> int:
    """Return 1 for a Latin-1 character, else 2 per UTF-16 code unit."""
    if ord(char) <= WIDE_CHAR_THRESHOLD:
        return 1
    # Astral characters (emoji, rare CJK) take two UTF-16 code units
    return 2 * (len(char.encode("utf-16-le")) // 2)


def display_width(text: str) -> int:
    """Return the display width of *text*.

    Widths are counted per UTF-16 code unit, as the editor measures text: 1
    for Latin-1, 2 otherwise, so an emoji outside the BMP counts as 4.
    """
    return sum(_char_width(char) for char in text)


def column_widths(table: Table) -> list[int]:
    """Return the display width of each column.

    A column is as wide as its widest cell.  Columns of a table with a
    separator row are at least SEPARATOR_MIN_WIDTH wide so the separator
    always renders as ``---`` or longer.
    """
    widths = [0] * table.column_count
    for row in table.rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    if table.has_separator:
        widths = [max(width, SEPARATOR_MIN_WIDTH) for width in widths]
    return widths


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def _render_cell(cell: str, width: int, is_separator: bool) -> str:
    """Pad a data cell with spaces, or replace a separator cell with dashes."""
    # Alignment colons are not preserved; every separator cell becomes plain dashes
    if is_separator:
        return "-" * width
    return cell + " " * (width - display_width(cell))


def format_table(table: Table) -> str:
    """Render *table* as aligned markdown lines joined by newlines.

    Formatting an already-aligned table returns identical text.
    """
    if not table.rows:
        return ""

    widths = column_widths(table)
    lines: list[str] = []
    for row_index, row in enumerate(table.rows):
        is_separator = row_index == table.separator_row_index
        cells = [_render_cell(cell, widths[i], is_separator) for i, cell in enumerate(row)]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)

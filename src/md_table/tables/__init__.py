"""Markdown table location, parsing, alignment, and structural editing.

Submodules:
  patterns     -- compiled regex patterns and layout constants
  classifiers  -- line and cell classification helpers
  schema       -- Table / TableSpan / ParsedTable / EditResult Pydantic models
  detection    -- table span location and row/cell parsing
  formatting   -- display widths and aligned markdown rendering
  editing      -- row and column insertion/deletion
  cursor       -- caret offset to column index mapping
  pipeline     -- host-facing edit_table() entry point and document utilities
"""

"""Markdown table editing engine for the desktop markdown editor."""

"""Themes, key handling and the text of panes, dialogs and footer for a terminal UI."""

__version__ = "1.0.0b0"
__all__ = [
    "fields",
    "footer",
    "help",
    "keys",
    "sidebar",
    "terminal",
    "textspans",
    "theme",
]
"""Splitting lines of text into styled pieces: editor cursor, diff clipping, match highlights."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby


def cursor_segments(line: str, column: int) -> tuple[str, str, str]:
    """Split ``line`` around the cursor at ``column``.

    Returns the text before the cursor, the character under it and the text
    after it. Past the end of the line the cursor sits on a blank.
    """
    if column < 0:
        raise ValueError("column must not be negative")
    if column >= len(line):
        return line, " ", ""
    return line[:column], line[column], line[column + 1:]


def line_number_prefix(row: int, total_lines: int) -> str:
    """The gutter for 0-based ``row``, right-aligned to the widest line number."""
    if row < 0:
        raise ValueError("row must not be negative")
    width = len(str(total_lines))
    return f"{row + 1:>{width}} "


def truncate_to_width(text: str, width: int) -> str:
    """At most ``width`` characters from the start of ``text``."""
    if width < 0:
        raise ValueError("width must not be negative")
    return text[:width]


def match_runs(text: str, indices: Iterable[int]) -> list[tuple[str, bool]]:
    """Group ``text`` into runs of matched and unmatched characters.

    ``indices`` are character positions that matched. Each run is returned as
    ``(segment, matched)`` in order.
    """
    matched = set(indices)
    return [
        ("".join(ch for _, ch in run), is_match)
        for is_match, run in groupby(enumerate(text), key=lambda item: item[0] in matched)
    ]
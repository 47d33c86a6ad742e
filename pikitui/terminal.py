"""Cells to highlight in the terminal pane: mouse selection and search matches."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def _non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


@dataclass(frozen=True)
class Selection:
    """A text selection between two cells, in either direction."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    def __post_init__(self) -> None:
        _non_negative(
            start_row=self.start_row,
            start_col=self.start_col,
            end_row=self.end_row,
            end_col=self.end_col,
        )

    def normalized(self) -> tuple[int, int, int, int]:
        """``(start_row, start_col, end_row, end_col)`` with the start first."""
        first = (self.start_row, self.start_col)
        second = (self.end_row, self.end_col)
        if second < first:
            first, second = second, first
        return (*first, *second)


def selection_cells(selection: Selection, width: int, height: int) -> list[tuple[int, int]]:
    """The ``(row, col)`` cells of a ``width`` by ``height`` pane to highlight."""
    _non_negative(width=width, height=height)
    if width == 0 or height == 0:
        return []
    start_row, start_col, end_row, end_col = selection.normalized()
    first_row = min(start_row, height - 1)
    last_row = min(end_row, height - 1)
    cells: list[tuple[int, int]] = []
    for row in range(first_row, last_row + 1):
        col_start = start_col if row == start_row else 0
        col_end = min(end_col, width - 1) if row == end_row else width - 1
        cells.extend((row, col) for col in range(col_start, col_end + 1))
    return cells


def search_match_cells(
    matches: Sequence[tuple[int, int]],
    current_match: int,
    query_len: int,
    width: int,
    height: int,
) -> list[tuple[int, int, bool]]:
    """The ``(row, col, is_current)`` cells covered by search matches.

    Each match starts at ``(row, col)`` and spans ``query_len`` characters,
    clipped to the pane.
    """
    _non_negative(query_len=query_len, width=width, height=height)
    if query_len == 0:
        return []
    cells: list[tuple[int, int, bool]] = []
    for index, (row, col) in enumerate(matches):
        if row >= height:
            continue
        is_current = index == current_match
        cells.extend(
            (row, c, is_current) for c in range(col, min(col + query_len, width))
        )
    return cells


def search_match_info(
    query: str, matches: Sequence[tuple[int, int]], current_match: int
) -> str:
    """The match counter shown after the search query."""
    if not matches:
        return " (no matches)" if query else ""
    _non_negative(current_match=current_match)
    return f" {current_match + 1}/{len(matches)}"
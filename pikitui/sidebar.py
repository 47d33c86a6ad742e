"""Layout and labels of the sidebar lists and the provider sub-tabs."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

ELLIPSIS = "…"
PROJECT_MARK = "⌂"


@dataclass(frozen=True)
class GroupHeader:
    """A collapsible heading that groups workspaces in the sidebar."""

    name: str
    count: int
    collapsed: bool = False

    @property
    def text(self) -> str:
        """The heading as shown: arrow, name and workspace count."""
        arrow = "▸" if self.collapsed else "▼"
        return f" {arrow} {self.name} ({self.count})"


@dataclass(frozen=True)
class WorkspaceRow:
    """A workspace entry in the sidebar, by index into the workspace list."""

    index: int


SidebarItem = GroupHeader | WorkspaceRow


class FileStatus(enum.Enum):
    """State of a changed file in the working tree."""

    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    UNTRACKED = "?"
    CONFLICTED = "C"
    STAGED = "S"
    STAGED_MODIFIED = "SM"


def _non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def item_height(item: SidebarItem) -> int:
    """Lines an item takes: one for a heading, three for a workspace."""
    if isinstance(item, GroupHeader):
        return 1
    if isinstance(item, WorkspaceRow):
        return 3
    raise TypeError(f"not a sidebar item: {item!r}")


def sidebar_scroll_offset(
    items: Sequence[SidebarItem], selected: int, visible_height: int
) -> int:
    """The first item to draw so that the selected row fits on screen."""
    _non_negative(selected=selected, visible_height=visible_height)
    if visible_height == 0:
        return 0

    height_to_selected = 0
    for row, item in enumerate(items):
        height_to_selected += item_height(item)
        if row == selected:
            break
    if height_to_selected <= visible_height:
        return 0

    offset = 0
    skip = height_to_selected - visible_height
    for row, item in enumerate(items):
        if skip == 0:
            break
        offset = row + 1
        skip = max(skip - item_height(item), 0)
    return offset


def visible_items(
    items: Sequence[SidebarItem], scroll_offset: int, visible_height: int
) -> list[tuple[int, SidebarItem]]:
    """The ``(row, item)`` pairs drawn from ``scroll_offset`` on.

    Items that would overflow the remaining height are left out, while later,
    shorter items may still be drawn.
    """
    _non_negative(scroll_offset=scroll_offset, visible_height=visible_height)
    shown: list[tuple[int, SidebarItem]] = []
    used = 0
    for row, item in enumerate(items):
        if row < scroll_offset:
            continue
        height = item_height(item)
        if used + height > visible_height:
            continue
        used += height
        shown.append((row, item))
    return shown


def list_scroll_offset(selected: int, visible_height: int) -> int:
    """The first row of a one-line-per-entry list that keeps ``selected`` visible."""
    _non_negative(selected=selected, visible_height=visible_height)
    if visible_height > 0 and selected >= visible_height:
        return selected - visible_height + 1
    return 0


def _cut_bytes(text: str, limit: int) -> str:
    """The longest prefix of ``text`` whose UTF-8 form fits in ``limit`` bytes."""
    data = text.encode("utf-8")[:limit]
    return data.decode("utf-8", errors="ignore")


def project_label(name: str, width: int) -> str:
    """The project line of a workspace entry in a list ``width`` cells wide."""
    _non_negative(width=width)
    max_proj = max(width - 6, 0)
    if len(name.encode("utf-8")) > max_proj:
        return f"{PROJECT_MARK} {_cut_bytes(name, max(max_proj - 1, 0))}{ELLIPSIS}"
    return f"{PROJECT_MARK} {name}"


def ahead_behind_title(ahead: int, behind: int) -> str | None:
    """The bottom title of the file list describing upstream sync, if any."""
    _non_negative(ahead=ahead, behind=behind)
    if ahead > 0 and behind > 0:
        return f" ↑{ahead} ↓{behind} "
    if ahead > 0:
        return f" ↑{ahead} to push "
    if behind > 0:
        return f" ↓{behind} behind "
    return None


def status_label(status: FileStatus) -> str:
    """The short marker shown before a changed file."""
    return status.value


def tab_title(label: str, closable: bool) -> str:
    """The title of a sub-tab, with a close marker when it can be closed."""
    marker = " ×" if closable else ""
    return f" {label}{marker} "
"""Text shown in dialog fields: scrolled inputs, the workspace type picker, prompt wrapping."""

from __future__ import annotations

import enum
from collections.abc import Iterator

CURSOR = "█"
ELLIPSIS = "…"
PROMPT_WRAP_WIDTH = 56


class WorkspaceType(enum.Enum):
    """How a workspace relates to its repository."""

    SIMPLE = "Simple"
    WORKTREE = "Worktree"
    PROJECT = "Project"


_TYPE_TEXT = {
    WorkspaceType.SIMPLE: "[Simple]  Worktree   Project",
    WorkspaceType.WORKTREE: " Simple  [Worktree]  Project",
    WorkspaceType.PROJECT: " Simple   Worktree  [Project]",
}


def visible_field(text: str, active: bool, cursor: int, field_max: int) -> str:
    """The part of a text field that fits in ``field_max`` cells.

    An active field shows a block cursor at ``cursor`` and scrolls to keep it
    in view; an inactive field that is too long shows its tail.
    """
    if cursor < 0:
        raise ValueError("cursor must not be negative")
    if not active:
        if len(text) > field_max and field_max > 2:
            return ELLIPSIS + text[len(text) - (field_max - 1):]
        return text

    before = text[:cursor]
    full = before + CURSOR + text[cursor:]
    if len(full) > field_max and field_max > 2:
        start = max(len(before) + 2 - field_max, 0)
        end = min(len(full), start + field_max - 1)
        return ELLIPSIS + full[start:end]
    return full


def commit_field(buffer: str, field_max: int) -> str:
    """The commit message input with a trailing cursor, showing its tail when too long."""
    full = buffer + CURSOR
    if len(full) > field_max and field_max > 2:
        return ELLIPSIS + full[len(full) - (field_max - 1):]
    return full


def workspace_type_text(ws_type: WorkspaceType) -> str:
    """The type selector line with the chosen type in brackets."""
    return _TYPE_TEXT[ws_type]


def _byte_chunks(data: bytes, width: int) -> Iterator[bytes]:
    for start in range(0, len(data), width):
        yield data[start:start + width]


def prompt_chunks(prompt: str, width: int = PROMPT_WRAP_WIDTH) -> list[str]:
    """Split a prompt into pieces of at most ``width`` UTF-8 bytes.

    A character cut in two at a boundary is shown as a replacement character.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    return [
        chunk.decode("utf-8", errors="replace")
        for chunk in _byte_chunks(prompt.encode("utf-8"), width)
    ]
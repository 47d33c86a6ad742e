"""Layout and text of the key hint footer and the system information bar."""

from __future__ import annotations

from collections.abc import Sequence

KeyHint = tuple[str, str]


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def entry_width(key: str, description: str) -> int:
    """The width one hint takes: `` [key] description ``."""
    return _byte_len(key) + _byte_len(description) + 5


def _total_width(keys: Sequence[KeyHint]) -> int:
    return sum(entry_width(key, desc) for key, desc in keys)


def footer_height(keys: Sequence[KeyHint], total_width: int) -> int:
    """Lines the footer needs: one if all hints fit in ``total_width``, else two."""
    if total_width < 0:
        raise ValueError("width must not be negative")
    return 1 if _total_width(keys) <= total_width else 2


def split_footer(
    keys: Sequence[KeyHint], width: int, height: int
) -> list[list[KeyHint]]:
    """Arrange hints on footer lines.

    When they do not fit on one line and there is room for two, the split is
    made at the first hint that brings the first line to half the total width.
    """
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    total = _total_width(keys)
    hints = list(keys)
    if total <= width or height < 2:
        return [hints]
    half = total // 2
    split_at = len(hints)
    acc = 0
    for i, (key, desc) in enumerate(hints):
        acc += entry_width(key, desc)
        if acc >= half:
            split_at = i + 1
            break
    return [hints[:split_at], hints[split_at:]]


def footer_text(keys: Sequence[KeyHint]) -> str:
    """One footer line as plain text."""
    return "".join(f" [{key}] {desc} " for key, desc in keys)


def sysinfo_segments(text: str) -> list[tuple[str, bool]]:
    """Split ``label value | label value`` into styled pieces.

    Each piece is ``(text, is_label)``; a part without a space is shown as a
    single plain piece.
    """
    segments: list[tuple[str, bool]] = []
    for part in text.split(" | "):
        label, sep, value = part.partition(" ")
        if sep:
            segments.append((f" [{label}] ", True))
            segments.append((f"{value} ", False))
        else:
            segments.append((f" {part} ", False))
    return segments
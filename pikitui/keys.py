"""Key events: parsing binding strings and encoding keys as terminal input bytes."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyCode(enum.Enum):
    """Kinds of keys. ``CHAR`` and ``F`` carry a value on the event."""

    CHAR = "char"
    F = "f"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACK_TAB = "backtab"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    DELETE = "delete"
    INSERT = "insert"
    NULL = "null"


class Modifiers(enum.Flag):
    """Modifier keys held while a key is pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: the key, its modifiers, and the character or F-key number."""

    code: KeyCode
    modifiers: Modifiers = Modifiers.NONE
    char: str | None = None
    number: int | None = None

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError("a character key needs exactly one character")
            if self.number is not None:
                raise ValueError("a character key takes no number")
        elif self.code is KeyCode.F:
            if self.number is None or not 0 <= self.number <= 255:
                raise ValueError("a function key needs a number from 0 to 255")
            if self.char is not None:
                raise ValueError("a function key takes no character")
        elif self.char is not None or self.number is not None:
            raise ValueError(f"{self.code.name} takes neither character nor number")


_SEQUENCES: dict[KeyCode, bytes] = {
    KeyCode.ENTER: b"\r",
    KeyCode.BACKSPACE: b"\x7f",
    KeyCode.TAB: b"\t",
    KeyCode.BACK_TAB: b"\x1b[Z",
    KeyCode.ESC: b"\x1b",
    KeyCode.UP: b"\x1b[A",
    KeyCode.DOWN: b"\x1b[B",
    KeyCode.RIGHT: b"\x1b[C",
    KeyCode.LEFT: b"\x1b[D",
    KeyCode.HOME: b"\x1b[H",
    KeyCode.END: b"\x1b[F",
    KeyCode.PAGE_UP: b"\x1b[5~",
    KeyCode.PAGE_DOWN: b"\x1b[6~",
    KeyCode.DELETE: b"\x1b[3~",
    KeyCode.INSERT: b"\x1b[2~",
}

_FUNCTION_KEYS: dict[int, bytes] = {
    1: b"\x1bOP",
    2: b"\x1bOQ",
    3: b"\x1bOR",
    4: b"\x1bOS",
    5: b"\x1b[15~",
    6: b"\x1b[17~",
    7: b"\x1b[18~",
    8: b"\x1b[19~",
    9: b"\x1b[20~",
    10: b"\x1b[21~",
    11: b"\x1b[23~",
    12: b"\x1b[24~",
}


def _control_byte(char: str) -> int | None:
    lowered = char.lower() if char.isascii() else char
    byte = ((ord(lowered) & 0xFF) - ord("a") + 1) % 256
    return byte if 1 <= byte <= 26 else None


def key_to_bytes(key: KeyEvent) -> bytes | None:
    """Return the bytes a terminal expects for ``key``, or None if unhandled."""
    if key.code is KeyCode.ENTER and key.modifiers & (Modifiers.SHIFT | Modifiers.CONTROL):
        # A line feed lets line-editing programs insert a newline.
        return b"\n"

    if key.code is KeyCode.CHAR and key.modifiers & Modifiers.CONTROL:
        control = _control_byte(key.char)
        if control is not None:
            return bytes([control])

    if key.code is KeyCode.CHAR:
        return key.char.encode("utf-8")
    if key.code is KeyCode.F:
        return _FUNCTION_KEYS.get(key.number)
    return _SEQUENCES.get(key.code)


_MODIFIER_NAMES = {
    "ctrl": Modifiers.CONTROL,
    "alt": Modifiers.ALT,
    "shift": Modifiers.SHIFT,
}

_NAMED_KEYS = {
    "enter": KeyCode.ENTER,
    "tab": KeyCode.TAB,
    "backspace": KeyCode.BACKSPACE,
    "esc": KeyCode.ESC,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "insert": KeyCode.INSERT,
    "delete": KeyCode.DELETE,
}


def _parse_byte(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= 255 else None


def parse_key_event(text: str) -> KeyEvent | None:
    """Parse a binding such as ``q``, ``ctrl-g`` or ``f5``; None if invalid."""
    *modifier_names, key_name = text.split("-")
    modifiers = Modifiers.NONE
    for name in modifier_names:
        flag = _MODIFIER_NAMES.get(name.lower())
        if flag is None:
            return None
        modifiers |= flag

    key_name = key_name.lower()
    named = _NAMED_KEYS.get(key_name)
    if named is not None:
        return KeyEvent(named, modifiers)
    if len(key_name.encode("utf-8")) == 1:
        return KeyEvent(KeyCode.CHAR, modifiers, char=key_name)
    if key_name.startswith("f") and len(key_name) > 1:
        number = _parse_byte(key_name[1:])
        if number is None:
            return None
        return KeyEvent(KeyCode.F, modifiers, number=number)
    return None


def key_matches(event: KeyEvent, binding: str) -> bool:
    """Tell whether ``event`` is the key described by ``binding``."""
    target = parse_key_event(binding)
    if target is None:
        return False
    return (
        event.code is target.code
        and event.char == target.char
        and event.number == target.number
        and event.modifiers == target.modifiers
    )
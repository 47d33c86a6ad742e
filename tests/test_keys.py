import pytest

from pikitui.keys import (
    KeyCode,
    KeyEvent,
    Modifiers,
    key_matches,
    key_to_bytes,
    parse_key_event,
)


def char(c, modifiers=Modifiers.NONE):
    return KeyEvent(KeyCode.CHAR, modifiers, char=c)


def test_parse_simple_key():
    event = parse_key_event("q")
    assert event.code is KeyCode.CHAR
    assert event.char == "q"
    assert event.modifiers == Modifiers.NONE


def test_parse_enter():
    assert parse_key_event("enter").code is KeyCode.ENTER


def test_parse_ctrl_modifier():
    event = parse_key_event("ctrl-g")
    assert event.char == "g"
    assert Modifiers.CONTROL in event.modifiers


def test_parse_shift_modifier_uppercase():
    event = parse_key_event("K")
    assert event.char == "k"
    assert event.modifiers == Modifiers.NONE

    event2 = parse_key_event("shift-k")
    assert event2.char == "k"
    assert Modifiers.SHIFT in event2.modifiers


def test_parse_ctrl_shift():
    event = parse_key_event("ctrl-shift-c")
    assert event.char == "c"
    assert Modifiers.CONTROL in event.modifiers
    assert Modifiers.SHIFT in event.modifiers


def test_parse_alt_modifier():
    event = parse_key_event("alt-m")
    assert event.char == "m"
    assert Modifiers.ALT in event.modifiers


def test_parse_function_key():
    event = parse_key_event("f1")
    assert event.code is KeyCode.F
    assert event.number == 1


def test_parse_special_keys():
    assert parse_key_event("esc").code is KeyCode.ESC
    assert parse_key_event("tab").code is KeyCode.TAB
    assert parse_key_event("pageup").code is KeyCode.PAGE_UP
    assert parse_key_event("pagedown").code is KeyCode.PAGE_DOWN


def test_parse_invalid():
    assert parse_key_event("invalid-modifier-x") is None


@pytest.mark.parametrize("text", ["", "-", "f999", "fx", "nothing", "é"])
def test_parse_rejects_unknown(text):
    assert parse_key_event(text) is None


def test_parse_modifier_case_insensitive():
    assert parse_key_event("CTRL-Enter") == KeyEvent(KeyCode.ENTER, Modifiers.CONTROL)


def test_key_matches_basic():
    event = char("q")
    assert key_matches(event, "q")
    assert not key_matches(event, "w")


def test_key_matches_with_modifiers():
    event = char("g", Modifiers.CONTROL)
    assert key_matches(event, "ctrl-g")
    assert not key_matches(event, "g")
    assert not key_matches(event, "alt-g")


def test_key_matches_invalid_binding():
    assert not key_matches(char("q"), "bogus-q")


@pytest.mark.parametrize(
    "binding, expected",
    [
        ("h", char("h")),
        ("j", char("j")),
        ("k", char("k")),
        ("l", char("l")),
        ("enter", KeyEvent(KeyCode.ENTER)),
        ("?", char("?")),
    ],
)
def test_default_navigation_bindings(binding, expected):
    assert parse_key_event(binding) == expected


def test_enter_sends_carriage_return():
    assert key_to_bytes(KeyEvent(KeyCode.ENTER)) == b"\r"


@pytest.mark.parametrize("mods", [Modifiers.SHIFT, Modifiers.CONTROL])
def test_modified_enter_sends_line_feed(mods):
    assert key_to_bytes(KeyEvent(KeyCode.ENTER, mods)) == b"\n"


def test_control_letters():
    assert key_to_bytes(char("a", Modifiers.CONTROL)) == b"\x01"
    assert key_to_bytes(char("Z", Modifiers.CONTROL)) == b"\x1a"


def test_control_non_letter_sends_char():
    assert key_to_bytes(char("1", Modifiers.CONTROL)) == b"1"


def test_plain_chars_are_utf8():
    assert key_to_bytes(char("x")) == b"x"
    assert key_to_bytes(char("é")) == "é".encode("utf-8")


@pytest.mark.parametrize(
    "code, expected",
    [
        (KeyCode.BACKSPACE, b"\x7f"),
        (KeyCode.TAB, b"\t"),
        (KeyCode.BACK_TAB, b"\x1b[Z"),
        (KeyCode.ESC, b"\x1b"),
        (KeyCode.UP, b"\x1b[A"),
        (KeyCode.DOWN, b"\x1b[B"),
        (KeyCode.RIGHT, b"\x1b[C"),
        (KeyCode.LEFT, b"\x1b[D"),
        (KeyCode.HOME, b"\x1b[H"),
        (KeyCode.END, b"\x1b[F"),
        (KeyCode.PAGE_UP, b"\x1b[5~"),
        (KeyCode.PAGE_DOWN, b"\x1b[6~"),
        (KeyCode.DELETE, b"\x1b[3~"),
        (KeyCode.INSERT, b"\x1b[2~"),
    ],
)
def test_special_sequences(code, expected):
    assert key_to_bytes(KeyEvent(code)) == expected


@pytest.mark.parametrize(
    "number, expected",
    [(1, b"\x1bOP"), (4, b"\x1bOS"), (5, b"\x1b[15~"), (11, b"\x1b[23~"), (12, b"\x1b[24~")],
)
def test_function_keys(number, expected):
    assert key_to_bytes(KeyEvent(KeyCode.F, number=number)) == expected


def test_unhandled_keys_give_none():
    assert key_to_bytes(KeyEvent(KeyCode.F, number=13)) is None
    assert key_to_bytes(KeyEvent(KeyCode.NULL)) is None


def test_invalid_events_rejected():
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.F, number=300)
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.ENTER, char="x")
"""Colour theme: defaults, TOML overrides and loading from the config directory."""

from __future__ import annotations

import string
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

import platformdirs

APP_DIR_NAME = "piki-multi"


class Color(Enum):
    """Named terminal colours."""

    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    MAGENTA = "Magenta"
    CYAN = "Cyan"
    GRAY = "Gray"
    DARK_GRAY = "DarkGray"
    LIGHT_RED = "LightRed"
    LIGHT_GREEN = "LightGreen"
    LIGHT_YELLOW = "LightYellow"
    LIGHT_BLUE = "LightBlue"
    LIGHT_MAGENTA = "LightMagenta"
    LIGHT_CYAN = "LightCyan"
    WHITE = "White"
    RESET = "Reset"


@dataclass(frozen=True)
class Rgb:
    """A 24-bit colour."""

    r: int
    g: int
    b: int


ColorValue = Color | Rgb

_NAMED = {c.value: c for c in Color if c is not Color.RESET}
_HEX = frozenset(string.hexdigits)


def _hex_byte(raw: bytes) -> int:
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError:
        return 255
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _HEX:
        return 255
    value = int(digits, 16)
    return value if value <= 255 else 255


def parse_color(text: str) -> ColorValue:
    """Parse a colour name or ``#rrggbb``; anything else yields white."""
    named = _NAMED.get(text)
    if named is not None:
        return named
    raw = text.encode("utf-8")
    if text.startswith("#") and len(raw) == 7:
        return Rgb(_hex_byte(raw[1:3]), _hex_byte(raw[3:5]), _hex_byte(raw[5:7]))
    return Color.WHITE


@dataclass(frozen=True)
class BorderTheme:
    active_interact: ColorValue = Color.GREEN
    active_navigate: ColorValue = Color.YELLOW
    inactive: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class WorkspaceListTheme:
    empty_text: ColorValue = Color.DARK_GRAY
    name_active: ColorValue = Color.WHITE
    name_inactive: ColorValue = Color.GRAY
    detail_selected: ColorValue = Color.GRAY
    detail_normal: ColorValue = Color.DARK_GRAY
    selected_bg: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class FileListTheme:
    empty_text: ColorValue = Color.DARK_GRAY
    modified: ColorValue = Color.YELLOW
    added: ColorValue = Color.GREEN
    deleted: ColorValue = Color.RED
    renamed: ColorValue = Color.CYAN
    untracked: ColorValue = Color.DARK_GRAY
    conflicted: ColorValue = Color.MAGENTA
    staged: ColorValue = Color.GREEN
    staged_modified: ColorValue = Color.YELLOW
    file_path: ColorValue = Color.WHITE
    selected_bg: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class TabsTheme:
    active: ColorValue = Color.YELLOW
    inactive: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class SubtabsTheme:
    active: ColorValue = Color.CYAN
    inactive: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class StatusBarTheme:
    error_bg: ColorValue = Color.RED
    error_fg: ColorValue = Color.WHITE
    diff_bg: ColorValue = Color.DARK_GRAY
    diff_fg: ColorValue = Color.WHITE
    interact_bg: ColorValue = Color.GREEN
    navigate_bg: ColorValue = Color.YELLOW
    mode_fg: ColorValue = Color.BLACK


@dataclass(frozen=True)
class FooterTheme:
    key: ColorValue = Color.YELLOW
    description: ColorValue = Color.GRAY


@dataclass(frozen=True)
class DiffTheme:
    border: ColorValue = Color.CYAN
    empty_text: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class DialogTheme:
    new_ws_border: ColorValue = Color.YELLOW
    new_ws_active: ColorValue = Color.YELLOW
    new_ws_inactive: ColorValue = Color.DARK_GRAY
    delete_border: ColorValue = Color.RED
    delete_text: ColorValue = Color.WHITE
    delete_name: ColorValue = Color.YELLOW
    delete_yes: ColorValue = Color.RED
    delete_no: ColorValue = Color.GREEN
    delete_cancel: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class HelpTheme:
    border: ColorValue = Color.CYAN


@dataclass(frozen=True)
class GeneralTheme:
    welcome_text: ColorValue = Color.GRAY
    muted_text: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class FuzzySearchTheme:
    border: ColorValue = Color.CYAN
    input_text: ColorValue = Color.WHITE
    match_highlight: ColorValue = Color.YELLOW
    result_text: ColorValue = Color.GRAY
    selected_bg: ColorValue = Color.DARK_GRAY
    count_text: ColorValue = Color.DARK_GRAY


@dataclass(frozen=True)
class SelectionTheme:
    bg: ColorValue = Color.LIGHT_BLUE
    fg: ColorValue = Color.BLACK


@dataclass(frozen=True)
class Theme:
    """The full set of colours used by the interface."""

    border: BorderTheme = field(default_factory=BorderTheme)
    workspace_list: WorkspaceListTheme = field(default_factory=WorkspaceListTheme)
    file_list: FileListTheme = field(default_factory=FileListTheme)
    tabs: TabsTheme = field(default_factory=TabsTheme)
    subtabs: SubtabsTheme = field(default_factory=SubtabsTheme)
    status_bar: StatusBarTheme = field(default_factory=StatusBarTheme)
    footer: FooterTheme = field(default_factory=FooterTheme)
    diff: DiffTheme = field(default_factory=DiffTheme)
    dialog: DialogTheme = field(default_factory=DialogTheme)
    help: HelpTheme = field(default_factory=HelpTheme)
    general: GeneralTheme = field(default_factory=GeneralTheme)
    fuzzy_search: FuzzySearchTheme = field(default_factory=FuzzySearchTheme)
    selection: SelectionTheme = field(default_factory=SelectionTheme)


def _override_section(section: Any, name: str, data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"theme section [{name}] must be a table")
    known = {f.name for f in fields(section)}
    changes = {}
    for key, value in data.items():
        if key not in known:
            continue
        if not isinstance(value, str):
            raise ValueError(f"theme value {name}.{key} must be a string")
        changes[key] = parse_color(value)
    return replace(section, **changes)


def theme_from_mapping(data: Mapping[str, Any]) -> Theme:
    """Build a theme from parsed TOML data; unset entries keep their defaults.

    Raises ValueError when a section is not a table or a value is not a string.
    """
    default = Theme()
    sections = {}
    for f in fields(Theme):
        if f.name in data:
            sections[f.name] = _override_section(
                getattr(default, f.name), f.name, data[f.name]
            )
    return replace(default, **sections)


def theme_from_toml(text: str) -> Theme:
    """Build a theme from TOML text. Raises ValueError on malformed input."""
    return theme_from_mapping(tomllib.loads(text))


def _default_config_dir() -> Path:
    return Path(platformdirs.user_config_dir(APP_DIR_NAME, appauthor=False))


def _theme_name(config_path: Path) -> str:
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return "default"
    name = data.get("theme")
    return name if isinstance(name, str) else "default"


def load(config_dir: str | Path | None = None) -> Theme:
    """Load the configured theme, falling back to the default on any problem.

    ``config_dir`` is the application's configuration directory; it holds
    ``config.toml`` and a ``themes`` directory of ``<name>.toml`` files.
    """
    base = Path(config_dir) if config_dir is not None else _default_config_dir()
    name = _theme_name(base / "config.toml")
    theme_path = base / "themes" / f"{name}.toml"
    try:
        return theme_from_toml(theme_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return Theme()
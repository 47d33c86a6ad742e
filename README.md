# pikitui

The building blocks behind a multi-workspace terminal UI. They are written
so that you can use and test them without a terminal. The package covers
colour themes, key handling, and the text and scrolling rules of the panes,
dialogs and footer.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pikitui.theme`: colour themes.
  - `parse_color` accepts the sixteen named colours (`"Red"`, `"DarkGray"`,
    ...) and `#rrggbb` hex values. It returns a `Color` or an `Rgb`. Unknown
    text gives `Color.WHITE`. A bad hex digit pair gives 255.
  - `theme_from_mapping` and `theme_from_toml` build a frozen `Theme`. Any
    entry the input leaves out keeps its default. They raise `ValueError` on
    malformed TOML, on a section that is not a table and on a value that is
    not a string.
  - `load(config_dir=None)` reads `config.toml` from the directory and takes
    its `theme` name, which defaults to `"default"`. It then loads
    `themes/<name>.toml`. Without an argument it uses the user's
    configuration directory for `piki-multi`. On any problem it returns the
    default `Theme()`.
- `pikitui.keys`: key handling.
  - `KeyEvent` is made of a `KeyCode` and `Modifiers`, plus a character for
    `KeyCode.CHAR` or a number for `KeyCode.F`.
  - `parse_key_event("ctrl-g")` turns a binding string into an event. It
    returns `None` for anything it cannot parse.
  - `key_matches(event, binding)` checks an event against a binding string.
  - `key_to_bytes(event)` gives the bytes a pseudo-terminal expects for the
    key. It returns `None` for keys it does not handle.
- `pikitui.fields`: dialog inputs.
  - `visible_field` gives the scrolled text of an input field, with a block
    cursor when the field is active.
  - `commit_field` gives the commit message input.
  - `workspace_type_text` gives the `WorkspaceType` selector line.
  - `prompt_chunks` wraps a prompt into pieces of at most 56 UTF-8 bytes.
- `pikitui.textspans`: splitting text into styled pieces.
  - `cursor_segments` splits an editor line around the cursor.
  - `line_number_prefix` gives the right-aligned line number gutter.
  - `truncate_to_width` cuts text to a number of characters.
  - `match_runs` groups text into matched and unmatched runs for fuzzy
    highlighting.
- `pikitui.help`: the help overlay.
  - `help_lines(get_binding)` builds the overlay's lines.
    `get_binding(section, action)` must return the key bound to an action.
  - `help_scroll` clamps the scroll position.
  - `help_scroll_indicator` gives the page counter on the bottom border.
- `pikitui.footer`: the key hint footer and the system information bar.
  - `entry_width` gives the width of one hint.
  - `footer_height` decides between one line and two.
  - `split_footer` arranges hints on one or two lines, splitting near the
    middle.
  - `footer_text` gives a line as plain text.
  - `sysinfo_segments` splits `label value | label value` into label and
    value pieces.
- `pikitui.sidebar`: the sidebar lists and sub-tabs.
  - `GroupHeader` and `WorkspaceRow` are the sidebar items.
    `item_height`, `sidebar_scroll_offset` and `visible_items` decide which
    items are shown.
  - `list_scroll_offset` serves one-line-per-entry lists.
  - `project_label`, `ahead_behind_title` and `tab_title` give labels.
  - `status_label` gives the marker for a `FileStatus`.
- `pikitui.terminal`: highlights in the terminal pane.
  - `Selection.normalized` orders a selection's two ends.
  - `selection_cells` gives the cells to highlight for a selection.
  - `search_match_cells` gives the cells covered by search matches, marking
    the current one.
  - `search_match_info` gives the match counter.

## Example

```python
from pikitui.theme import parse_color, theme_from_toml, Rgb
from pikitui.keys import parse_key_event, key_to_bytes

assert parse_color("#ff0000") == Rgb(255, 0, 0)

theme = theme_from_toml('[border]\nactive_interact = "#00ff00"\n')
print(theme.border.active_interact, theme.border.inactive)

event = parse_key_event("ctrl-c")
print(key_to_bytes(event))  # b'\x03'
```

## Theme files

A theme file can set any subset of these sections:

- `border`
- `workspace_list`
- `file_list`
- `tabs`
- `subtabs`
- `status_bar`
- `footer`
- `diff`
- `dialog`
- `help`
- `general`
- `fuzzy_search`
- `selection`

Unknown keys inside a section are ignored. For example:

```toml
[file_list]
modified = "#aabbcc"

[selection]
bg = "LightBlue"
fg = "Black"
```

## What it does not do

The package has no command to run and no event loop. It does not draw to a
terminal or start a pseudo-terminal, and it does not talk to git. It also
lacks:

- screen layout geometry, such as splitting the screen into panes or
  centring popups;
- the status bar text;
- the log viewer's filtering and scrolling.

A program that uses it supplies these parts and does the drawing itself.
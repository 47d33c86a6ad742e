"""Contents and scrolling of the keyboard help overlay."""

from __future__ import annotations

from collections.abc import Callable

HELP_WIDTH = 55
HELP_HEIGHT = 62

GetBinding = Callable[[str, str], str]


def _row(keys: str, description: str) -> str:
    return f"    {keys:<13} {description}"


def help_lines(get_binding: GetBinding) -> list[str]:
    """The lines of the help overlay.

    ``get_binding(section, action)`` returns the key bound to an action.
    """

    def one(section: str, action: str, description: str) -> str:
        return _row(get_binding(section, action), description)

    def pair(section: str, first: str, second: str, description: str, sep: str = "/") -> str:
        keys = f"{get_binding(section, first)}{sep}{get_binding(section, second)}"
        return _row(keys, description)

    nav_keys = "/".join(
        get_binding("navigation", action) for action in ("up", "down", "left", "right")
    )

    return [
        "",
        "  Navigation mode (yellow border)",
        _row(nav_keys, "Move between panes"),
        one("navigation", "enter_pane", "Interact with pane"),
        one("navigation", "new_workspace", "New workspace"),
        one("navigation", "clone_workspace", "Clone workspace"),
        one("navigation", "edit_workspace", "Edit workspace"),
        one("navigation", "delete_workspace", "Delete workspace"),
        pair("navigation", "next_workspace", "prev_workspace", "Next/Prev workspace"),
        _row("1-9", "Go to workspace N"),
        pair("navigation", "next_tab", "prev_tab", "Next/Prev tab"),
        one("navigation", "new_tab", "New tab"),
        one("navigation", "close_tab", "Close tab"),
        one("navigation", "help", "Toggle help"),
        one("navigation", "about", "About"),
        one("navigation", "dashboard", "Dashboard"),
        one("navigation", "logs", "Logs"),
        one("navigation", "quit", "Quit"),
        "",
        "  Interaction mode (green border)",
        one("interaction", "exit_interaction", "Back to navigation"),
        "",
        "  Terminal pane (navigation mode)",
        pair("navigation", "scroll_up", "scroll_down", "Scroll up/down (3 lines)"),
        pair("navigation", "page_up", "page_down", "Scroll by page"),
        "    Mouse scroll  Scroll up/down",
        "",
        "  Terminal pane (interaction mode)",
        "    All keys sent to active tab",
        "",
        "  File list pane",
        pair("file_list", "up", "down", "Select file"),
        one("file_list", "diff", "Open diff"),
        "",
        "  Workspace list pane (interaction mode)",
        pair("workspace_list", "up", "down", "Select workspace"),
        one("workspace_list", "select", "Switch to workspace"),
        one("workspace_list", "delete", "Delete workspace"),
        one("interaction", "exit_interaction", "Back to navigation"),
        "",
        "  Diff view",
        pair("diff", "up", "down", "Scroll"),
        pair("diff", "page_up", "page_down", "Page down/up"),
        pair("diff", "scroll_top", "scroll_bottom", "Top/Bottom"),
        pair("diff", "next_file", "prev_file", "Next/Prev file"),
        one("diff", "exit", "Close diff"),
        "",
        f"  Fuzzy search ({get_binding('navigation', 'fuzzy_search')}"
        f" or {get_binding('navigation', 'fuzzy_search_alt')})",
        "    Type          Filter files",
        pair("fuzzy", "up", "down", "Select result"),
        one("fuzzy", "diff", "Open diff"),
        one("fuzzy", "editor", "Open in $EDITOR"),
        one("fuzzy", "inline_edit", "Inline editor"),
        one("fuzzy", "markdown", "Open markdown viewer"),
        one("fuzzy", "mdr", "Open in mdr (external)"),
        one("fuzzy", "exit", "Close"),
        "",
        "  File list (interaction mode)",
        one("file_list", "edit_external", "Open in $EDITOR"),
        one("file_list", "edit_inline", "Inline editor"),
        one("file_list", "stage", "Stage file (git add)"),
        one("file_list", "unstage", "Unstage file (git reset)"),
        "",
        "  Git operations",
        one("navigation", "commit", "Commit (opens dialog)"),
        one("navigation", "push", "Push"),
        "",
        "  Inline editor",
        one("editor", "save", "Save"),
        one("editor", "exit", "Close"),
        "",
        "  Pane resize",
        pair("navigation", "sidebar_shrink", "sidebar_grow", "Resize sidebar width", " / "),
        pair("navigation", "split_up", "split_down", "Resize workspace/file split", " / "),
        "    Mouse drag    Drag pane borders to resize",
        "",
        "  Clipboard",
        "    Mouse drag    Select text in terminal",
        one("interaction", "copy", "Copy visible terminal content"),
        one("interaction", "paste", "Paste from clipboard (terminal)"),
    ]


def _max_scroll(total_lines: int, inner_height: int) -> int:
    if total_lines < 0:
        raise ValueError("total lines must not be negative")
    if inner_height < 0:
        raise ValueError("inner height must not be negative")
    return max(total_lines - inner_height, 0)


def help_scroll(scroll: int, total_lines: int, inner_height: int) -> int:
    """The scroll position clamped so the last page stays full."""
    if scroll < 0:
        raise ValueError("scroll must not be negative")
    return min(scroll, _max_scroll(total_lines, inner_height))


def help_scroll_indicator(scroll: int, max_scroll: int, up: str, down: str) -> str:
    """The page indicator on the bottom border, empty when nothing scrolls."""
    if scroll < 0 or max_scroll < 0:
        raise ValueError("scroll positions must not be negative")
    if max_scroll == 0:
        return ""
    return f" [{scroll + 1}/{max_scroll + 1} ↑{up}/{down}↓] "
import pytest

from pikitui.sidebar import (
    FileStatus,
    GroupHeader,
    WorkspaceRow,
    ahead_behind_title,
    item_height,
    list_scroll_offset,
    project_label,
    sidebar_scroll_offset,
    status_label,
    tab_title,
    visible_items,
)

MIXED = [
    GroupHeader("backend", 2),
    WorkspaceRow(0),
    WorkspaceRow(1),
    GroupHeader("frontend", 2, collapsed=False),
    WorkspaceRow(2),
    WorkspaceRow(3),
]


def test_item_heights():
    assert item_height(GroupHeader("g", 1)) == 1
    assert item_height(WorkspaceRow(0)) == 3


def test_item_height_rejects_other_values():
    with pytest.raises(TypeError):
        item_height("workspace")


def test_group_header_text_arrow():
    assert GroupHeader("api", 3, collapsed=True).text.startswith(" ▸ ")
    assert GroupHeader("api", 3).text.startswith(" ▼ ")
    assert GroupHeader("api", 3).text.endswith("api (3)")


@pytest.mark.parametrize("selected", range(len(MIXED)))
def test_selected_row_is_visible_after_scrolling(selected):
    offset = sidebar_scroll_offset(MIXED, selected, 7)
    rows = [row for row, _ in visible_items(MIXED, offset, 7)]
    assert selected in rows
    assert sum(item_height(MIXED[r]) for r in rows) <= 7


@pytest.mark.parametrize("selected", range(6))
def test_all_workspaces_keep_selection_visible(selected):
    items = [WorkspaceRow(i) for i in range(6)]
    offset = sidebar_scroll_offset(items, selected, 9)
    rows = [row for row, _ in visible_items(items, offset, 9)]
    assert selected in rows


def test_no_scroll_when_everything_fits():
    assert sidebar_scroll_offset(MIXED, 2, 100) == 0


def test_zero_height_shows_nothing():
    assert sidebar_scroll_offset(MIXED, 4, 0) == 0
    assert visible_items(MIXED, 0, 0) == []


def test_visible_items_skip_only_what_does_not_fit():
    items = [WorkspaceRow(0), WorkspaceRow(1), GroupHeader("g", 1)]
    shown = visible_items(items, 0, 4)
    assert [row for row, _ in shown] == [0, 2]


def test_visible_items_start_at_offset():
    shown = visible_items(MIXED, 3, 100)
    assert [row for row, _ in shown] == [3, 4, 5]


@pytest.mark.parametrize("selected", range(20))
def test_list_scroll_keeps_selected_in_window(selected):
    offset = list_scroll_offset(selected, 5)
    assert offset <= selected < offset + 5


def test_list_scroll_zero_height():
    assert list_scroll_offset(12, 0) == 0


def test_list_scroll_rejects_negative():
    with pytest.raises(ValueError):
        list_scroll_offset(-1, 5)


def test_project_label_short_name():
    assert project_label("repo", 40) == "⌂ repo"


def test_project_label_long_name_is_cut():
    name = "a-very-long-repository-name"
    label = project_label(name, 16)
    assert label.startswith("⌂ a-very")
    assert label.endswith("…")
    assert len(label[2:-1]) == 16 - 7


def test_project_label_keeps_whole_characters():
    label = project_label("ééééééééé", 12)
    body = label[2:-1]
    assert set(body) <= {"é"}
    assert len(body.encode("utf-8")) <= 12 - 7


def test_ahead_behind_titles():
    assert ahead_behind_title(0, 0) is None
    assert ahead_behind_title(2, 0) == " ↑2 to push "
    assert ahead_behind_title(0, 4) == " ↓4 behind "
    assert ahead_behind_title(1, 1) == " ↑1 ↓1 "


def test_status_labels():
    assert status_label(FileStatus.STAGED_MODIFIED) == "SM"
    assert status_label(FileStatus.UNTRACKED) == "?"
    assert status_label(FileStatus.MODIFIED) == "M"


def test_tab_title():
    assert tab_title("Shell", True) == " Shell × "
    assert tab_title("Shell", False) == " Shell "
"""Tests for the focus state machine."""

import os

import pytest

from prawn import notes
from prawn.focus import Event, EventKind, FocusController, Mode


def press(controller, *kinds):
    for kind in kinds:
        controller.dispatch(Event(kind))


def type_text(controller, text):
    for ch in text:
        controller.dispatch(Event.char_input(ch))


@pytest.fixture
def controller(notes_dir):
    return FocusController(str(notes_dir))


class TestFilesMode:

    def test_initial_state(self, controller):
        assert controller.mode == Mode.FILES
        assert controller.status_message == "Ready"
        assert controller.index.names() == ["a.md", "b.md", "c.md"]
        assert controller.buffer.lines == [""]
        assert controller.current_note_name() == "-"

    def test_enter_opens_selected_note(self, controller, notes_dir):
        press(controller, EventKind.DOWN, EventKind.CONFIRM)
        assert controller.mode == Mode.EDITOR
        assert controller.buffer.lines == ["bravo"]
        assert controller.open_path == os.path.join(str(notes_dir), "b.md")
        assert controller.status_message == "Opened b.md"

    def test_enter_on_empty_directory_is_noop(self, tmp_path):
        controller = FocusController(str(tmp_path))
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.FILES
        assert controller.open_path is None

    def test_unreadable_note_loads_empty(self, controller, monkeypatch):
        def fail(path):
            raise PermissionError(13, "Permission denied", path)
        monkeypatch.setattr(notes, "read_note", fail)
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.EDITOR
        assert controller.buffer.lines == [""]
        assert controller.status_message == "could not read a.md"

    def test_tab_toggles_panes(self, controller):
        press(controller, EventKind.SWITCH_PANE)
        assert controller.mode == Mode.EDITOR
        press(controller, EventKind.SWITCH_PANE)
        assert controller.mode == Mode.FILES

    def test_navigation_saturates(self, controller):
        press(controller, EventKind.UP)
        assert controller.index.selected == 0
        press(controller, EventKind.DOWN, EventKind.DOWN, EventKind.DOWN, EventKind.DOWN)
        assert controller.index.selected == 2


class TestEditorMode:

    def test_typing_edits_buffer(self, controller):
        press(controller, EventKind.CONFIRM)
        type_text(controller, "> ")
        press(controller, EventKind.CONFIRM)
        assert controller.buffer.lines == ["> ", "alpha", "second line"]
        press(controller, EventKind.BACKSPACE)
        assert controller.buffer.lines == ["> alpha", "second line"]
        press(controller, EventKind.DOWN, EventKind.RIGHT, EventKind.LEFT, EventKind.LEFT)
        assert (controller.buffer.cursor_line, controller.buffer.cursor_col) == (1, 1)

    def test_save_writes_note_and_keeps_focus(self, controller, notes_dir):
        press(controller, EventKind.CONFIRM)
        type_text(controller, "# ")
        assert controller.buffer.modified is True
        press(controller, EventKind.SAVE)
        assert (notes_dir / "a.md").read_text(encoding="utf-8") == "# alpha\nsecond line"
        assert controller.mode == Mode.EDITOR
        assert controller.status_message == "Saved a.md"
        assert controller.buffer.modified is False

    def test_save_without_open_note(self, controller):
        press(controller, EventKind.SWITCH_PANE, EventKind.SAVE)
        assert controller.status_message == "No note open"

    def test_save_failure_reports_status(self, controller, monkeypatch):
        press(controller, EventKind.CONFIRM)
        monkeypatch.setattr(notes, "write_note", lambda path, text: False)
        press(controller, EventKind.SAVE)
        assert controller.status_message == "error saving a.md"

    def test_escape_is_ignored(self, controller):
        press(controller, EventKind.CONFIRM, EventKind.CANCEL)
        assert controller.mode == Mode.EDITOR

    def test_search_reachable_from_editor(self, controller):
        press(controller, EventKind.CONFIRM, EventKind.SEARCH)
        assert controller.mode == Mode.SEARCH


class TestNewNoteMode:

    def test_create_note(self, tmp_path):
        (tmp_path / "a.md").write_text("a", encoding="utf-8")
        controller = FocusController(str(tmp_path))
        press(controller, EventKind.CONFIRM)
        type_text(controller, "x")
        press(controller, EventKind.NEW_NOTE)
        assert controller.mode == Mode.EDITOR
        press(controller, EventKind.SWITCH_PANE, EventKind.NEW_NOTE)
        assert controller.mode == Mode.NEW_NOTE
        type_text(controller, "foo")
        press(controller, EventKind.CONFIRM)
        assert controller.index.names() == ["a.md", "foo.md"]
        assert controller.index.selected == 1
        assert controller.buffer.lines == [""]
        assert controller.mode == Mode.EDITOR
        assert controller.new_note_input == ""
        assert controller.status_message == "Created foo.md"
        assert (tmp_path / "foo.md").read_text(encoding="utf-8") == ""

    def test_new_note_selected_by_path(self, controller):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "0-inbox")
        press(controller, EventKind.CONFIRM)
        assert controller.index.current().name == "0-inbox.md"
        assert controller.index.selected == 0

    def test_save_after_create_writes_new_note(self, controller, notes_dir):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "fresh")
        press(controller, EventKind.CONFIRM)
        type_text(controller, "hi")
        press(controller, EventKind.SAVE)
        assert (notes_dir / "fresh.md").read_text(encoding="utf-8") == "hi"

    def test_backspace_edits_name(self, controller):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "abc")
        press(controller, EventKind.BACKSPACE)
        assert controller.new_note_input == "ab"

    def test_escape_discards_name(self, controller, notes_dir):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "draft")
        press(controller, EventKind.CANCEL)
        assert controller.mode == Mode.FILES
        assert controller.new_note_input == ""
        assert not (notes_dir / "draft.md").exists()

    def test_entering_new_note_clears_input(self, controller):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "draft")
        press(controller, EventKind.TOGGLE_HELP, EventKind.TOGGLE_HELP, EventKind.NEW_NOTE)
        assert controller.new_note_input == ""

    def test_empty_name_stays_in_prompt(self, controller):
        press(controller, EventKind.NEW_NOTE, EventKind.CONFIRM)
        assert controller.mode == Mode.NEW_NOTE
        assert controller.status_message == "note name is empty"

    def test_extension_alone_is_rejected(self, controller, notes_dir):
        press(controller, EventKind.DOWN, EventKind.NEW_NOTE)
        type_text(controller, ".md")
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.NEW_NOTE
        assert controller.status_message == "invalid note name: .md"
        assert controller.open_path is None
        assert controller.index.current().name == "b.md"
        assert not (notes_dir / ".md").exists()

    def test_unlisted_note_stays_in_prompt(self, controller, monkeypatch):
        monkeypatch.setattr(notes, "list_notes", lambda directory, extension: [])
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "ghost")
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.NEW_NOTE
        assert controller.open_path is None
        assert controller.status_message == "ghost.md is not listed as a note"

    def test_existing_name_opens_note(self, controller, notes_dir):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "a")
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.EDITOR
        assert controller.buffer.lines == ["alpha", "second line"]
        assert (notes_dir / "a.md").read_text(encoding="utf-8") == "alpha\nsecond line"

    def test_tab_is_ignored_in_prompt(self, controller):
        press(controller, EventKind.NEW_NOTE, EventKind.SWITCH_PANE)
        assert controller.mode == Mode.NEW_NOTE


class TestSearchMode:

    def test_opening_search_shows_every_note(self, controller):
        press(controller, EventKind.SEARCH)
        assert controller.mode == Mode.SEARCH
        assert controller.search.query == ""
        assert controller.search.results == [0, 1, 2]

    def test_live_filter_and_open(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "b")
        assert controller.search.results == [1]
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.EDITOR
        assert controller.index.selected == 1
        assert controller.buffer.lines == ["bravo"]

    def test_backspace_widens_results(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "bz")
        assert controller.search.results == []
        press(controller, EventKind.BACKSPACE)
        assert controller.search.results == [1]

    def test_enter_without_results_is_noop(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "zzz")
        press(controller, EventKind.CONFIRM)
        assert controller.mode == Mode.SEARCH
        assert controller.open_path is None

    def test_result_navigation(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, ".md")
        press(controller, EventKind.DOWN, EventKind.DOWN, EventKind.DOWN, EventKind.UP)
        assert controller.search.selected == 1
        press(controller, EventKind.CONFIRM)
        assert controller.index.current().name == "b.md"

    def test_escape_discards_query(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "c")
        press(controller, EventKind.CANCEL)
        assert controller.mode == Mode.FILES
        assert controller.search.query == ""
        assert controller.index.selected == 0


class TestGlobalEvents:

    def test_help_toggles_back_to_files(self, controller):
        press(controller, EventKind.CONFIRM, EventKind.TOGGLE_HELP)
        assert controller.mode == Mode.HELP
        press(controller, EventKind.TOGGLE_HELP)
        assert controller.mode == Mode.FILES

    def test_help_from_search_drops_query(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "b")
        press(controller, EventKind.TOGGLE_HELP)
        assert controller.mode == Mode.HELP
        assert controller.search.query == ""
        press(controller, EventKind.CANCEL)
        assert controller.mode == Mode.FILES

    def test_help_ignores_other_input(self, controller):
        press(controller, EventKind.TOGGLE_HELP, EventKind.DOWN, EventKind.CONFIRM)
        type_text(controller, "x")
        assert controller.mode == Mode.HELP
        assert controller.index.selected == 0

    @pytest.mark.parametrize("setup", [
        [],
        [EventKind.CONFIRM],
        [EventKind.NEW_NOTE],
        [EventKind.SEARCH],
        [EventKind.TOGGLE_HELP],
    ])
    def test_quit_preempts_every_mode(self, controller, setup):
        press(controller, *setup)
        mode = controller.mode
        press(controller, EventKind.QUIT)
        assert controller.running is False
        assert controller.mode == mode


class TestSnapshot:

    def test_editor_snapshot(self, controller):
        press(controller, EventKind.CONFIRM, EventKind.DOWN, EventKind.RIGHT)
        view = controller.snapshot(1)
        assert view.mode == Mode.EDITOR
        assert view.note_names == ["a.md", "b.md", "c.md"]
        assert view.open_note == "a.md"
        assert view.lines == ["second line"]
        assert view.scroll == 1
        assert view.cursor == (0, 1)
        assert view.input_text == ""

    def test_search_snapshot(self, controller):
        press(controller, EventKind.SEARCH)
        type_text(controller, "c")
        view = controller.snapshot(10)
        assert view.input_text == "c"
        assert view.result_names == ["c.md"]
        assert view.result_selected == 0

    def test_new_note_snapshot(self, controller):
        press(controller, EventKind.NEW_NOTE)
        type_text(controller, "idea")
        view = controller.snapshot(10)
        assert view.mode == Mode.NEW_NOTE
        assert view.input_text == "idea"
        assert view.result_names == []

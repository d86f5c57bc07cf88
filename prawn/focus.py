"""
Focus handling for the Prawn note editor.

The FocusController owns the editor state (note index, line buffer, search filter)
and routes each input event to the handler of the active mode:
files, editor, help, new-note or search.
"""
import enum
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from prawn import buffer, logger, notes, search

class Mode(enum.Enum):
    FILES = "files"
    EDITOR = "editor"
    HELP = "help"
    NEW_NOTE = "new note"
    SEARCH = "search"

class EventKind(enum.Enum):
    QUIT = "quit"
    TOGGLE_HELP = "toggle_help"
    SWITCH_PANE = "switch_pane"
    NEW_NOTE = "new_note"
    SEARCH = "search"
    SAVE = "save"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"
    CHAR = "char"

@dataclass(frozen=True)
class Event:
    """A key press, abstracted from its terminal binding."""
    kind: EventKind
    char: str = ""

    @classmethod
    def char_input(cls, ch: str) -> "Event":
        return cls(EventKind.CHAR, ch)

DIRECTIONS = {
    EventKind.UP: buffer.UP,
    EventKind.DOWN: buffer.DOWN,
    EventKind.LEFT: buffer.LEFT,
    EventKind.RIGHT: buffer.RIGHT,
}

@dataclass
class ViewState:
    """Read-only snapshot of everything the screen needs to draw one frame."""
    mode: Mode
    note_names: List[str]
    selected: int
    open_note: str
    lines: List[str]
    scroll: int
    cursor: Tuple[int, int]
    modified: bool
    input_text: str = ""
    result_names: List[str] = field(default_factory=list)
    result_selected: int = 0
    status: str = ""

class FocusController:
    """
    Holds the state of the editor and the active mode, and applies input events to it.
    Exactly one mode is active at a time; quit and help are handled before the mode.
    """
    def __init__(self, notes_dir: str, extension: str = notes.NOTE_EXTENSION):
        self.notes_dir = notes_dir
        self.extension = extension
        self.index = notes.FileIndex(notes_dir, extension)
        self.buffer = buffer.LineBuffer()
        self.search = search.SearchFilter()
        self.mode = Mode.FILES
        self.open_path: Optional[str] = None
        self.new_note_input = ""
        self.status_message = "Ready"
        self.running = True
        self.index.rescan()

    # ------------------------------------------------------------------
    # dispatch
    # ------------------------------------------------------------------
    def dispatch(self, event: Event):
        """Apply one input event. Unrecognized events are ignored."""
        if event.kind == EventKind.QUIT:
            logger.log("Editor exited.")
            self.running = False
            return
        if event.kind == EventKind.TOGGLE_HELP:
            if self.mode == Mode.HELP:
                self.enter_files()
            else:
                self.enter_help()
            return

        handler = {
            Mode.FILES: self.handle_files,
            Mode.EDITOR: self.handle_editor,
            Mode.HELP: self.handle_help,
            Mode.NEW_NOTE: self.handle_new_note,
            Mode.SEARCH: self.handle_search,
        }[self.mode]
        handler(event)

    # ------------------------------------------------------------------
    # transitions
    # ------------------------------------------------------------------
    def set_mode(self, mode: Mode):
        if mode != self.mode:
            logger.log(f"mode: {self.mode.value} -> {mode.value}")
        self.mode = mode

    def enter_files(self):
        self.new_note_input = ""
        self.search.query = ""
        self.set_mode(Mode.FILES)

    def enter_help(self):
        # Leaving help always lands on the file pane, so any pending input is dropped.
        self.new_note_input = ""
        self.search.query = ""
        self.set_mode(Mode.HELP)

    def enter_new_note(self):
        self.new_note_input = ""
        self.set_mode(Mode.NEW_NOTE)

    def enter_search(self):
        self.search.reset(self.index.notes)
        self.set_mode(Mode.SEARCH)

    def load_note(self, path: str):
        """Load the note at `path` into the buffer; unreadable notes load empty."""
        name = os.path.basename(path)
        try:
            content = notes.read_note(path)
        except OSError as e:
            logger.log(f"Error opening {path}: {e}")
            self.status_message = f"could not read {name}"
            content = ""
        else:
            self.status_message = f"Opened {name}"
            logger.log("file opened: " + path)
        self.buffer.load(content)
        self.open_path = path

    def open_selected(self) -> bool:
        """Load the selected note into the buffer and switch to the editor."""
        note = self.index.current()
        if note is None:
            return False
        self.load_note(note.path)
        self.set_mode(Mode.EDITOR)
        return True

    def save(self):
        """Write the buffer back to the open note."""
        if self.open_path is None:
            self.status_message = "No note open"
            return
        name = os.path.basename(self.open_path)
        if notes.write_note(self.open_path, self.buffer.serialize()):
            self.buffer.modified = False
            self.status_message = f"Saved {name}"
            logger.log(f"saved {self.open_path} ({len(self.buffer.lines)} lines)")
        else:
            self.status_message = f"error saving {name}"

    def create_note(self):
        """Create the note named in the new-note input and open it in the editor."""
        try:
            path, created = notes.create_note(self.notes_dir, self.new_note_input, self.extension)
        except ValueError as e:
            self.status_message = str(e)
            return
        except OSError as e:
            logger.log(f"Error creating note {self.new_note_input!r}: {e}")
            self.status_message = f"could not create note: {e.strerror or e}"
            return

        self.index.rescan()
        if not self.index.select_path(path):
            logger.log(f"created note {path} is not in the note list")
            self.status_message = f"{os.path.basename(path)} is not listed as a note"
            return
        if created:
            self.buffer.load("")
            self.open_path = path
            self.status_message = f"Created {os.path.basename(path)}"
        else:
            # A note with that name already exists: open it instead.
            self.load_note(path)
        self.new_note_input = ""
        self.set_mode(Mode.EDITOR)

    # ------------------------------------------------------------------
    # mode handlers
    # ------------------------------------------------------------------
    def handle_files(self, event: Event):
        kind = event.kind
        if kind == EventKind.UP:
            self.index.select_previous()
        elif kind == EventKind.DOWN:
            self.index.select_next()
        elif kind == EventKind.CONFIRM:
            self.open_selected()
        elif kind == EventKind.SWITCH_PANE:
            self.set_mode(Mode.EDITOR)
        elif kind == EventKind.NEW_NOTE:
            self.enter_new_note()
        elif kind == EventKind.SEARCH:
            self.enter_search()
        elif kind == EventKind.SAVE:
            self.save()

    def handle_editor(self, event: Event):
        kind = event.kind
        if kind in DIRECTIONS:
            self.buffer.move_cursor(DIRECTIONS[kind])
        elif kind == EventKind.CHAR:
            if event.char:
                self.buffer.insert_char(event.char)
        elif kind == EventKind.CONFIRM:
            self.buffer.split_line()
        elif kind == EventKind.BACKSPACE:
            self.buffer.backspace()
        elif kind == EventKind.SAVE:
            self.save()
        elif kind == EventKind.SWITCH_PANE:
            self.set_mode(Mode.FILES)
        elif kind == EventKind.SEARCH:
            self.enter_search()

    def handle_help(self, event: Event):
        if event.kind == EventKind.CANCEL:
            self.enter_files()

    def handle_new_note(self, event: Event):
        kind = event.kind
        if kind == EventKind.CHAR:
            self.new_note_input += event.char
        elif kind == EventKind.BACKSPACE:
            self.new_note_input = self.new_note_input[:-1]
        elif kind == EventKind.CONFIRM:
            self.create_note()
        elif kind == EventKind.CANCEL:
            self.enter_files()

    def handle_search(self, event: Event):
        kind = event.kind
        if kind == EventKind.CHAR:
            self.search.set_query(self.index.notes, self.search.query + event.char)
        elif kind == EventKind.BACKSPACE:
            self.search.set_query(self.index.notes, self.search.query[:-1])
        elif kind == EventKind.UP:
            self.search.select_previous()
        elif kind == EventKind.DOWN:
            self.search.select_next()
        elif kind == EventKind.CONFIRM:
            if not self.search.has_results:
                return
            self.index.select(self.search.confirm())
            self.search.query = ""
            self.open_selected()
        elif kind == EventKind.CANCEL:
            self.enter_files()

    # ------------------------------------------------------------------
    # presentation
    # ------------------------------------------------------------------
    def current_note_name(self) -> str:
        if self.open_path is None:
            return "-"
        return os.path.basename(self.open_path)

    def snapshot(self, height: int) -> ViewState:
        """
        Build the ViewState for an editor pane of `height` rows.
        Recomputes the buffer scroll so the cursor stays visible.
        """
        lines = self.buffer.visible_window(height)
        if self.mode == Mode.NEW_NOTE:
            input_text = self.new_note_input
        elif self.mode == Mode.SEARCH:
            input_text = self.search.query
        else:
            input_text = ""
        result_names = []
        if self.mode == Mode.SEARCH:
            result_names = [self.index.notes[i].name for i in self.search.results]
        return ViewState(
            mode=self.mode,
            note_names=self.index.names(),
            selected=self.index.selected,
            open_note=self.current_note_name(),
            lines=list(lines),
            scroll=self.buffer.scroll,
            cursor=self.buffer.cursor_in_window(),
            modified=self.buffer.modified,
            input_text=input_text,
            result_names=result_names,
            result_selected=self.search.selected,
            status=self.status_message,
        )

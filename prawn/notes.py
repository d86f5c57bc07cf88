"""
Note storage for the Prawn note editor.

This module defines the Note class representing a note file in the notes directory,
the FileIndex holding the sorted list of notes and the selection cursor of the file
pane, and the small helpers used to list, read, write and create note files.
"""
import os
from prawn import logger

NOTE_EXTENSION = ".md"

class Note:
    """A note file, identified by its path."""
    def __init__(self, path: str):
        self.path = path
        self.name = os.path.basename(path)

    def __eq__(self, other):
        return isinstance(other, Note) and self.path == other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f"Note({self.path!r})"

def list_notes(directory: str, extension: str = NOTE_EXTENSION) -> list:
    """
    List the note files directly inside `directory`, sorted by full path.
    A missing or unreadable directory yields an empty list.
    """
    try:
        entries_iter = os.scandir(directory)
    except OSError as e:
        logger.log(f"Error listing directory {directory}: {e}")
        return []

    notes = []
    with entries_iter:
        for entry in entries_iter:
            # A bare ".md" is a hidden file, not a note
            if not entry.name.endswith(extension) or entry.name == extension:
                continue
            try:
                if not entry.is_file():
                    continue
            except OSError:
                continue
            notes.append(Note(os.path.join(directory, entry.name)))
    notes.sort(key=lambda n: n.path)
    return notes

def read_note(path: str) -> str:
    """Return the text of a note. Undecodable bytes are replaced; OSError propagates."""
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()

def write_note(path: str, text: str) -> bool:
    """
    Write `text` to the note at `path`.
    Returns True on success, False on error.
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return True
    except OSError as e:
        logger.log(f"Error writing {path}: {e}")
        return False

def note_path(directory: str, name: str, extension: str = NOTE_EXTENSION) -> str:
    """
    Build the path of a note called `name`, appending the extension if absent.
    Raises ValueError for empty names or names that would leave the notes directory.
    """
    name = name.strip()
    if not name:
        raise ValueError("note name is empty")
    if os.sep in name or (os.altsep and os.altsep in name) or name in (".", "..", extension):
        raise ValueError(f"invalid note name: {name}")
    if not name.endswith(extension):
        name += extension
    return os.path.join(directory, name)

def create_note(directory: str, name: str, extension: str = NOTE_EXTENSION) -> tuple:
    """
    Create an empty note called `name` in `directory`.
    Returns (path, created); an existing file with that name is left untouched
    and reported with created=False.
    """
    path = note_path(directory, name, extension)
    try:
        with open(path, 'x', encoding='utf-8'):
            pass
    except FileExistsError:
        return path, False
    logger.log(f"Created note {path}")
    return path, True

class FileIndex:
    """Sorted catalog of the notes in one directory, with a selection cursor."""
    def __init__(self, directory: str, extension: str = NOTE_EXTENSION):
        self.directory = directory
        self.extension = extension
        self.notes = []
        self.selected = 0

    def __len__(self):
        return len(self.notes)

    def rescan(self):
        """Reload the note list from disk and clamp the selection to the new length."""
        self.notes = list_notes(self.directory, self.extension)
        self.clamp_selection()

    def clamp_selection(self):
        if not self.notes:
            self.selected = 0
        elif self.selected >= len(self.notes):
            self.selected = len(self.notes) - 1

    def select_next(self):
        if self.selected < len(self.notes) - 1:
            self.selected += 1

    def select_previous(self):
        if self.selected > 0:
            self.selected -= 1

    def select(self, index: int):
        """Select the note at `index`; out-of-range indices are ignored."""
        if 0 <= index < len(self.notes):
            self.selected = index

    def select_path(self, path: str) -> bool:
        """Select the note stored at `path`. Returns True if it is in the index."""
        target = os.path.abspath(path)
        for i, note in enumerate(self.notes):
            if os.path.abspath(note.path) == target:
                self.selected = i
                return True
        return False

    def current(self):
        """Return the selected Note, or None when the index is empty."""
        if not self.notes:
            return None
        return self.notes[self.selected]

    def names(self) -> list:
        return [note.name for note in self.notes]

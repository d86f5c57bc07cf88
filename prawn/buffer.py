"""
Buffer module for the Prawn note editor.

Defines the LineBuffer class holding the open note's text as a list of lines,
together with its cursor position, scroll offset and modification state.
"""

# Cursor directions accepted by LineBuffer.move_cursor
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"

class LineBuffer:
    """Represents the editable text of one note with a (row, col) cursor."""
    def __init__(self, text: str = ""):
        self.lines = [""]
        self.cursor_line = 0
        self.cursor_col = 0
        # Scroll offset (top line index visible in the editor pane)
        self.scroll = 0
        self.modified = False
        self.load(text)

    def load(self, text):
        """Replace the content with `text` and reset cursor and scroll."""
        # str.split always returns at least one item, so an empty document
        # becomes a single empty line. A trailing newline survives as a
        # trailing empty line and is written back on save.
        self.lines = (text or "").replace("\r\n", "\n").split("\n")
        self.cursor_line = 0
        self.cursor_col = 0
        self.scroll = 0
        self.modified = False

    def serialize(self) -> str:
        """Join the lines back into file content."""
        return "\n".join(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_line]

    def move_cursor(self, direction: str):
        """
        Move the cursor one step. Left/Right stay on the current line;
        Up/Down clamp the column to the destination line's length.
        """
        if direction == LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
        elif direction == RIGHT:
            if self.cursor_col < len(self.current_line):
                self.cursor_col += 1
        elif direction == UP:
            if self.cursor_line > 0:
                self.cursor_line -= 1
                self.cursor_col = min(self.cursor_col, len(self.current_line))
        elif direction == DOWN:
            if self.cursor_line < len(self.lines) - 1:
                self.cursor_line += 1
                self.cursor_col = min(self.cursor_col, len(self.current_line))
        else:
            raise ValueError(f"unknown cursor direction: {direction!r}")

    def insert_char(self, ch: str):
        """Insert a character at the cursor and advance past it."""
        line = self.current_line
        self.lines[self.cursor_line] = line[:self.cursor_col] + ch + line[self.cursor_col:]
        self.cursor_col += 1
        self.modified = True

    def split_line(self):
        """Split the current line at the cursor position, moving the remainder to a new line below."""
        line = self.current_line
        before = line[:self.cursor_col]
        after = line[self.cursor_col:]
        self.lines[self.cursor_line] = before
        self.lines.insert(self.cursor_line + 1, after)
        self.modified = True
        self.cursor_line += 1
        self.cursor_col = 0

    def backspace(self):
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cursor_col > 0:
            line = self.current_line
            self.lines[self.cursor_line] = line[:self.cursor_col - 1] + line[self.cursor_col:]
            self.cursor_col -= 1
            self.modified = True
        elif self.cursor_line > 0:
            # Merge with previous line
            prev_line = self.lines[self.cursor_line - 1]
            curr_line = self.lines.pop(self.cursor_line)
            self.cursor_line -= 1
            self.cursor_col = len(prev_line)
            self.lines[self.cursor_line] = prev_line + curr_line
            self.modified = True

    def adjust_scroll(self, height: int):
        """Scroll by the minimal amount that keeps the cursor line inside `height` rows."""
        if height <= 0:
            return
        if self.cursor_line < self.scroll:
            self.scroll = self.cursor_line
        if self.cursor_line >= self.scroll + height:
            self.scroll = self.cursor_line - height + 1
        if self.scroll > max(0, len(self.lines) - height):
            self.scroll = max(0, len(self.lines) - height)
        if self.scroll < 0:
            self.scroll = 0

    def visible_window(self, height: int) -> list:
        """Return the lines shown in a pane of `height` rows, scrolling first if needed."""
        if height <= 0:
            return []
        self.adjust_scroll(height)
        return self.lines[self.scroll:self.scroll + height]

    def cursor_in_window(self) -> tuple:
        """Cursor (row, col) relative to the top of the visible window."""
        return self.cursor_line - self.scroll, self.cursor_col

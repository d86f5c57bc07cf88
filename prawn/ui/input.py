"""
Input handling for the Prawn note editor.

Translates the keys read from curses (an int key code, or a str from get_wch)
into the abstract events understood by the FocusController.
"""
import curses

from prawn.focus import Event, EventKind

CTRL_F = 6
CTRL_G = 7
TAB = 9
CTRL_N = 14
CTRL_Q = 17
CTRL_S = 19
ESC = 27

ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (8, curses.KEY_BACKSPACE, 127)

KEY_EVENTS = {
    CTRL_Q: EventKind.QUIT,
    CTRL_G: EventKind.TOGGLE_HELP,
    curses.KEY_F1: EventKind.TOGGLE_HELP,
    TAB: EventKind.SWITCH_PANE,
    CTRL_N: EventKind.NEW_NOTE,
    CTRL_F: EventKind.SEARCH,
    CTRL_S: EventKind.SAVE,
    ESC: EventKind.CANCEL,
    curses.KEY_UP: EventKind.UP,
    curses.KEY_DOWN: EventKind.DOWN,
    curses.KEY_LEFT: EventKind.LEFT,
    curses.KEY_RIGHT: EventKind.RIGHT,
}
for _key in ENTER_KEYS:
    KEY_EVENTS[_key] = EventKind.CONFIRM
for _key in BACKSPACE_KEYS:
    KEY_EVENTS[_key] = EventKind.BACKSPACE

# Shown in the help pane
HELP_LINES = [
    "help!",
    "",
    "ctrl+q: quit (unsaved changes are lost)",
    "ctrl+g / F1: toggle this help",
    "tab: switch between notes and editor",
    "ctrl+n: new note",
    "ctrl+f: search notes by name",
    "ctrl+s: save the open note",
    "enter: open note / new line",
    "esc: cancel prompt, close help",
    "arrows: move",
]

def translate_key(key):
    """
    Map a key from curses to an Event, or None if the key is not bound.
    `key` is -1 when the poll interval passed without input.
    """
    if isinstance(key, str):
        if len(key) != 1:
            return None
        code = ord(key)
        if code < 32 or code == 127:
            key = code
        elif key.isprintable():
            return Event.char_input(key)
        else:
            return None

    if key in KEY_EVENTS:
        return Event(KEY_EVENTS[key])
    if 32 <= key <= 126:
        return Event.char_input(chr(key))
    return None

def read_event(stdscr):
    """Wait up to the window's timeout for a key and translate it."""
    try:
        key = stdscr.get_wch()
    except curses.error:
        # No input before the timeout
        return None
    return translate_key(key)

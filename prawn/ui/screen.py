"""
prawn/ui/screen.py

Implements all UI drawing for the Prawn note editor: the note list on the left,
the editor pane, the status bar, the help pane and the centered prompt boxes used
by the new-note and search modes. Everything here only reads a ViewState.
"""
import curses

from wcwidth import wcwidth, wcswidth

from prawn.focus import Mode
from prawn.logger import safe_addstr
from prawn.ui.input import HELP_LINES

NOTE_ICON = ""
CMD_ARROW = "󰘍"

MODE_ICONS = {
    Mode.FILES: "",
    Mode.EDITOR: "",
    Mode.HELP: "?",
    Mode.NEW_NOTE: "",
    Mode.SEARCH: "",
}

def fit(text: str, width: int) -> str:
    """Trim `text` to at most `width` terminal columns, then pad it to exactly `width`."""
    if width <= 0:
        return ""
    out = []
    used = 0
    for ch in text:
        w = wcwidth(ch)
        if w < 0:
            w = 1
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * (width - used)

def display_width(text: str) -> int:
    """Terminal columns taken by `text`; non-printable text counts one per character."""
    width = wcswidth(text)
    return width if width >= 0 else len(text)

def pane_layout(height: int, width: int, sidebar_width: int):
    """Return (editor_height, sidebar_width) for a screen of the given size."""
    editor_height = max(0, height - 1)
    if width < 80:
        sidebar_width = min(sidebar_width, 20)
    sidebar_width = min(sidebar_width, max(0, width - 10))
    return editor_height, sidebar_width

def gutter_width(view) -> int:
    """Columns taken by the line numbers of the window in `view`, plus one space."""
    return max(4, len(str(view.scroll + len(view.lines))) + 1)

def draw_note_list(stdscr, view, height, sidebar_width, scroll_offset):
    """
    Draw the note list. Returns the scroll offset used, so the caller can keep it
    between frames.
    """
    for y in range(height):
        safe_addstr(stdscr, y, 0, " " * sidebar_width, curses.color_pair(4))
    title = " Notes "
    attr = curses.color_pair(3) | curses.A_BOLD
    if view.mode == Mode.FILES:
        attr |= curses.A_REVERSE
    safe_addstr(stdscr, 0, 1, fit(title, sidebar_width - 2), attr)

    available = height - 1
    if available <= 0:
        return scroll_offset
    if view.selected < scroll_offset:
        scroll_offset = view.selected
    elif view.selected >= scroll_offset + available:
        scroll_offset = view.selected - available + 1

    if not view.note_names:
        safe_addstr(stdscr, 1, 1, fit("(no notes)", sidebar_width - 2), curses.color_pair(4))
        return scroll_offset

    y = 1
    for idx, name in enumerate(view.note_names[scroll_offset:], start=scroll_offset):
        if y >= height:
            break
        text = fit(f" {NOTE_ICON} {name}", sidebar_width - 2)
        if idx == view.selected:
            safe_addstr(stdscr, y, 1, text, curses.color_pair(1) | curses.A_BOLD)
        else:
            safe_addstr(stdscr, y, 1, text, curses.color_pair(4))
        y += 1
    return scroll_offset

def draw_editor(stdscr, view, height, x_offset, width):
    """Draw the visible window of the open note."""
    cursor_row = view.cursor[0]
    gutter = gutter_width(view)
    for i in range(height):
        if i < len(view.lines):
            color = curses.color_pair(6) if i == cursor_row else curses.color_pair(2)
            line_number = f"{view.scroll + i + 1:<{gutter}}"
            text = fit(line_number + view.lines[i], width)
        else:
            color = curses.color_pair(2)
            text = fit("~", width)
        safe_addstr(stdscr, i, x_offset, text, color)

def draw_help(stdscr, height, x_offset, width):
    for i in range(height):
        text = HELP_LINES[i] if i < len(HELP_LINES) else ""
        attr = curses.color_pair(3) | curses.A_BOLD if i == 0 else curses.color_pair(2)
        safe_addstr(stdscr, i, x_offset, fit(" " + text, width), attr)

def box_top(title: str, inner: int) -> str:
    """Top border of a box `inner` columns wide, with `title` centered in it."""
    title = f" {title} "
    title_start = max(0, (inner - display_width(title)) // 2)
    fill = max(0, inner - title_start - display_width(title))
    return "┌" + "─" * title_start + title + "─" * fill + "┐"

def draw_prompt(stdscr, screen_height, screen_width, title, text, results=None, selected=0):
    """
    Draw a centered dialog box with a one-line input and an optional result list.
    Returns the screen (y, x) of the input cursor.
    """
    rows = max(1, len(results)) if results is not None else 0
    box_width = min(screen_width, max(40, display_width(title) + 10, display_width(text) + 10))
    rows = min(rows, max(0, screen_height - 6))
    box_height = 3 + (rows + 1 if results is not None else 0)
    start_y = max(0, (screen_height - box_height) // 2)
    start_x = max(0, (screen_width - box_width) // 2)
    inner = box_width - 2
    attr = curses.color_pair(3) | curses.A_BOLD

    safe_addstr(stdscr, start_y, start_x, box_top(title, inner), attr)
    content = fit(f"{CMD_ARROW} {text}", inner - 2)
    safe_addstr(stdscr, start_y + 1, start_x, "│ " + content + " │", attr)

    y = start_y + 2
    if results is not None:
        safe_addstr(stdscr, y, start_x, "├" + "─" * inner + "┤", attr)
        y += 1
        # Keep the selected result inside the box
        first = max(0, selected - rows + 1) if rows else 0
        for idx in range(first, first + rows):
            name = results[idx] if results else "(no matches)"
            line_attr = curses.color_pair(1) | curses.A_BOLD if results and idx == selected else attr
            safe_addstr(stdscr, y, start_x, "│", attr)
            safe_addstr(stdscr, y, start_x + 1, fit(" " + name, inner), line_attr)
            safe_addstr(stdscr, y, start_x + box_width - 1, "│", attr)
            y += 1
    safe_addstr(stdscr, y, start_x, "└" + "─" * inner + "┘", attr)
    return start_y + 1, start_x + 4 + display_width(text)

def draw_status_bar(stdscr, view, height, width):
    """Mode, open note and status message on the bottom line."""
    dirty_mark = "*" if view.modified else ""
    icon = MODE_ICONS.get(view.mode, "")
    left = f" {icon} {view.mode.value.upper()} | {view.open_note}{dirty_mark} "
    right = f" {view.status} "
    filler = max(0, width - display_width(left) - display_width(right))
    safe_addstr(stdscr, height - 1, 0, fit(left + " " * filler + right, width - 1),
                curses.color_pair(5))

def display(stdscr, controller, state):
    """
    Re-draw the entire screen from the controller's current state.
    `state` is a dict kept between frames by the main loop (note list scroll offset,
    sidebar width).
    """
    height, width = stdscr.getmaxyx()
    editor_height, sidebar_width = pane_layout(height, width, state.get("sidebar_width", 30))
    view = controller.snapshot(editor_height)

    stdscr.erase()
    state["list_scroll"] = draw_note_list(
        stdscr, view, editor_height, sidebar_width, state.get("list_scroll", 0)
    )
    x_offset = sidebar_width + 1 if sidebar_width else 0
    text_width = max(0, width - x_offset)

    if view.mode == Mode.HELP:
        draw_help(stdscr, editor_height, x_offset, text_width)
    else:
        draw_editor(stdscr, view, editor_height, x_offset, text_width)
    draw_status_bar(stdscr, view, height, width)

    cursor = None
    if view.mode == Mode.EDITOR:
        row, col = view.cursor
        line = view.lines[row] if 0 <= row < len(view.lines) else ""
        cursor = (row, x_offset + gutter_width(view) + display_width(line[:col]))
    elif view.mode == Mode.NEW_NOTE:
        cursor = draw_prompt(stdscr, height, width, "new note", view.input_text)
    elif view.mode == Mode.SEARCH:
        cursor = draw_prompt(stdscr, height, width, "search", view.input_text,
                             view.result_names, view.result_selected)

    try:
        if cursor is None:
            curses.curs_set(0)
        else:
            curses.curs_set(1)
            stdscr.move(*cursor)
    except curses.error:
        pass
    stdscr.refresh()

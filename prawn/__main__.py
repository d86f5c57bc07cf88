"""
Main entry point for the Prawn note editor.
"""
import curses
import locale
import os
import sys

from prawn import config, focus, logger, themes
from prawn.ui import screen
from prawn.ui.input import read_event

def prepare_notes_dir(path: str) -> str:
    """Create the notes directory if it does not exist yet."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.log(f"Error creating notes directory {path}: {e}")
    return path

def main(stdscr, cfg: config.Config):
    curses.start_color()
    # Raw mode so ctrl+q / ctrl+s reach us instead of the terminal's flow control
    curses.raw()
    stdscr.keypad(True)
    stdscr.timeout(cfg.poll_interval_ms)

    theme = themes.apply_theme(cfg.theme)
    controller = focus.FocusController(cfg.notes_dir, cfg.extension)
    logger.log(f"Editor started in {cfg.notes_dir} ({len(controller.index)} notes, theme {theme})")

    state = {"sidebar_width": cfg.sidebar_width, "list_scroll": 0}
    while controller.running:
        screen.display(stdscr, controller, state)
        event = read_event(stdscr)
        if event is not None:
            controller.dispatch(event)

def run(argv=None):
    """
    Parse the command line, then start the curses wrapper with main().
    """
    cfg = config.resolve(argv)
    logger.set_log_file(cfg.log_file)
    prepare_notes_dir(cfg.notes_dir)

    locale.setlocale(locale.LC_ALL, '')
    # Esc is a prompt key here; don't wait a full second for escape sequences
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(main, cfg)
    return 0

if __name__ == "__main__":
    sys.exit(run())

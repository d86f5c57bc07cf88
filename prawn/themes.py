"""
themes.py

Holds the built-in Prawn themes as RGB colour definitions and turns the selected
one into curses colour pairs.

Colour pairs set up by apply_theme:
  1  selected entry in a list       4  note list / sidebar
  2  editor text                    5  status bar
  3  accent (titles, prompts)       6  current editor line
"""
import curses

from prawn import logger

DEFAULT_THEME = "boring"

def get_builtin_themes():
    """
    Returns a dict mapping built-in theme names to their color definitions.
    """
    return {
        "boring": {
            "bg": (40, 42, 54),
            "fg": (248, 248, 242),
            "sel": (68, 71, 90),
            "accent": (98, 114, 164),
            "sidebar": (52, 55, 70),
            "highlight": (52, 55, 70),
        },
        "prawn": {
            "bg": (30, 30, 30),
            "fg": (250, 240, 230),
            "sel": (80, 60, 50),
            "accent": (255, 165, 125),
            "sidebar": (50, 45, 40),
            "highlight": (50, 45, 40),
        },
        "nord": {
            "bg": (46, 52, 64),
            "fg": (216, 222, 233),
            "sel": (67, 76, 94),
            "accent": (136, 192, 208),
            "sidebar": (59, 66, 82),
            "highlight": (76, 86, 106),
        },
    }

def to_curses(rgb):
    """Scale an 0-255 RGB triple to the 0-1000 range curses expects."""
    return tuple(int(c / 255 * 1000) for c in rgb)

def apply_theme(theme_name: str) -> str:
    """
    Initialize the colour pairs for `theme_name`, falling back to the default
    theme for unknown names. Returns the name of the theme actually applied.
    """
    themes = get_builtin_themes()
    if theme_name not in themes:
        logger.log(f"unknown theme {theme_name!r}, using {DEFAULT_THEME}")
        theme_name = DEFAULT_THEME
    data = themes[theme_name]

    if curses.can_change_color() and curses.COLORS >= 256:
        slots = {"bg": 16, "fg": 17, "sel": 18, "accent": 19, "sidebar": 20, "highlight": 21}
        try:
            for key, slot in slots.items():
                curses.init_color(slot, *to_curses(data[key]))
        except curses.error:
            logger.log("curses.error defining theme colours")
        curses.init_pair(1, slots["fg"], slots["sel"])
        curses.init_pair(2, slots["fg"], slots["bg"])
        curses.init_pair(3, slots["accent"], slots["bg"])
        curses.init_pair(4, slots["fg"], slots["sidebar"])
        curses.init_pair(5, slots["bg"], slots["accent"])
        curses.init_pair(6, slots["fg"], slots["highlight"])
    else:
        # Fallback color pairs
        curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_CYAN)
        curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(3, curses.COLOR_CYAN, curses.COLOR_BLACK)
        curses.init_pair(4, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(5, curses.COLOR_BLACK, curses.COLOR_WHITE)
        curses.init_pair(6, curses.COLOR_WHITE, curses.COLOR_BLUE)
    return theme_name

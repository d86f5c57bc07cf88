"""
Configuration for the Prawn note editor.

Settings come from three places, later ones winning: the defaults below,
a `key=value` config file (~/.prawn/prawn.conf by default) and the command line.
"""
import argparse
import os
from dataclasses import dataclass, fields

from prawn import logger

CONFIG_DIR = os.path.expanduser("~/.prawn")
CONFIG_PATH = os.path.join(CONFIG_DIR, "prawn.conf")

@dataclass
class Config:
    notes_dir: str = "./notes"
    extension: str = ".md"
    log_file: str = os.path.join(CONFIG_DIR, "prawn.log")
    poll_interval_ms: int = 200
    theme: str = "boring"
    sidebar_width: int = 30

def _coerce(current, raw: str):
    if isinstance(current, int):
        return int(raw)
    return raw

def apply_lines(config: Config, lines) -> Config:
    """
    Apply `key=value` lines to `config`. Blank lines and `#` comments are skipped;
    unknown keys and malformed values are logged and ignored.
    """
    known = {f.name for f in fields(Config)}
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            logger.log(f"config line {lineno} ignored: {line}")
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if key not in known:
            logger.log(f"unknown config key: {key}")
            continue
        try:
            setattr(config, key, _coerce(getattr(config, key), value))
        except ValueError:
            logger.log(f"bad value for {key}: {value}")
    return config

def load_config(path: str = CONFIG_PATH) -> Config:
    """Read the config file at `path`; a missing file gives the defaults."""
    config = Config()
    if not os.path.isfile(path):
        return config
    try:
        with open(path, 'r', encoding='utf-8') as f:
            apply_lines(config, f)
    except OSError as e:
        logger.log(f"Error reading config {path}: {e}")
    return config

def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="prawn",
        description="Terminal note editor for a directory of Markdown files",
    )
    parser.add_argument(
        "notes_dir",
        nargs="?",
        help="Directory containing the notes (default: ./notes)",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_PATH,
        help=f"Path to the config file (default: {CONFIG_PATH})",
    )
    parser.add_argument("--extension", help="Note file extension (default: .md)")
    parser.add_argument("--log-file", help="Where to write the debug log")
    parser.add_argument("--theme", help="Colour theme name")
    return parser.parse_args(argv)

def resolve(argv=None) -> Config:
    """Build the effective Config from the config file and the command line."""
    args = parse_arguments(argv)
    config = load_config(args.config)
    if args.notes_dir:
        config.notes_dir = args.notes_dir
    if args.extension:
        config.extension = args.extension
    if args.log_file:
        config.log_file = args.log_file
    if args.theme:
        config.theme = args.theme
    if not config.extension.startswith("."):
        config.extension = "." + config.extension
    config.notes_dir = os.path.expanduser(config.notes_dir)
    config.log_file = os.path.expanduser(config.log_file)
    return config

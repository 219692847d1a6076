# logger.py
import logging
import sys
import os

import colorlog

from .. import constants

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def _console_formatter(use_colors: bool) -> logging.Formatter:
    if not use_colors:
        return logging.Formatter('[%(levelname).4s] %(name)s: %(message)s')
    return colorlog.ColoredFormatter(
        '%(log_color)s[%(levelname).4s]%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s',
        log_colors=LOG_COLORS,
        reset=True,
        style='%'
    )


def _attach_log_file(root: logging.Logger, log_file: str):
    """Mirror discovery logs into a timestamped file; a bad path is only reported."""
    try:
        handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    except OSError as e:
        logging.error(f"Cannot open log file '{log_file}': {e}")
        return
    handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname).4s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root.addHandler(handler)
    logging.info(f"Writing log to '{log_file}'")


def setup_logger(debug: bool = False, module_levels: dict | None = None, log_file: str | None = None):
    """
    Route buildmatrix diagnostics to stderr.

    stdout stays free for the `key=value` matrix outputs. Colors are used on
    a terminal unless NO_COLOR is set. When handlers already exist (a second
    call, or a test runner's capture) only the levels are updated.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if not root.handlers:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(_console_formatter(sys.stderr.isatty() and not os.environ.get("NO_COLOR")))
        root.addHandler(console)
        if log_file:
            _attach_log_file(root, log_file)

    _apply_module_levels(module_levels)


def parse_module_levels(spec: str | None) -> dict | None:
    """Parse 'name=LEVEL,name=LEVEL' into a mapping, ignoring malformed pairs."""
    if not spec:
        return None
    module_levels = {}
    for pair in spec.split(','):
        pair = pair.strip()
        if not pair or '=' not in pair:
            continue
        name, lvl = pair.split('=', 1)
        module_levels[name.strip()] = lvl.strip().upper()
    return module_levels


def _apply_module_levels(module_levels: dict | None):
    """Set per-logger levels; falls back to BUILDMATRIX_LOG_LEVELS (e.g. "res=DEBUG,man=INFO")."""
    if module_levels is None:
        module_levels = parse_module_levels(os.environ.get(constants.LOG_LEVELS_ENV))

    for name, lvl_str in (module_levels or {}).items():
        lvl = logging.getLevelName(lvl_str.upper())
        if isinstance(lvl, int):
            logging.getLogger(normalize_module_name(name)).setLevel(lvl)


def normalize_module_name(name: str) -> str:
    """
    Turn a short logger name into a full one: aliases from LOG_ALIAS_MAP are
    expanded, a trailing '.*' is dropped, and names starting with one of the
    package's subpackages get the 'buildmatrix.' prefix.
    """
    if name in constants.LOG_ALIAS_MAP:
        return constants.LOG_ALIAS_MAP[name]
    name = name.removesuffix('.*')
    head = name.split('.', 1)[0]
    if head in constants.KNOWN_TOP_MODULES:
        return f'buildmatrix.{name}'
    return name

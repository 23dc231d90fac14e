"""Logging setup for SquatScan: colored stderr output and per-module levels."""
import logging
import sys
import os
from typing import Optional, TextIO, Union

import colorlog

from .. import constants

LOG_FORMAT = '[%(levelname).4s] %(name)s: %(message)s'
COLOR_LOG_FORMAT = '%(log_color)s[%(levelname).4s]%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s'
LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(level: Union[str, int] = "INFO", module_levels: Optional[dict] = None,
                 stream: Optional[TextIO] = None) -> None:
    """
    Configures the root logger for the SquatScan application.

    Log records go to ``stream`` (stderr by default) so that scan output on
    stdout stays machine readable.

    Args:
        level: Root level name or number; unknown names fall back to INFO
        module_levels: Dictionary mapping module names to log levels
        stream: Destination stream
    """
    root = logging.getLogger()
    root.setLevel(_to_level(level, logging.INFO))

    if root.handlers:
        _apply_module_levels(module_levels)
        return

    stream = stream or sys.stderr
    # Respect NO_COLOR env var (https://no-color.org/)
    use_colors = hasattr(stream, 'isatty') and stream.isatty() and not os.environ.get("NO_COLOR")

    handler = logging.StreamHandler(stream)
    handler.setLevel(logging.NOTSET)
    if use_colors:
        handler.setFormatter(colorlog.ColoredFormatter(COLOR_LOG_FORMAT, log_colors=LOG_COLORS, reset=True))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _apply_module_levels(module_levels)


def _to_level(value: Union[str, int], default: Optional[int] = None) -> Optional[int]:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def _apply_module_levels(module_levels: Optional[dict]) -> None:
    """Apply per-module logger levels from mapping or env var SQUATSCAN_LOG_LEVELS.

    module_levels format: {"squatscan.core.engine": "DEBUG", "squatscan.scanner": "INFO"}
    Env var example: SQUATSCAN_LOG_LEVELS="engine=DEBUG,resolver=INFO"
    """
    if module_levels is None:
        env = os.environ.get("SQUATSCAN_LOG_LEVELS")
        if env:
            module_levels = parse_module_levels(env)

    if not module_levels:
        return

    for name, value in module_levels.items():
        lvl = _to_level(value)
        if lvl is None:
            continue
        logging.getLogger(_normalize_module_name(name)).setLevel(lvl)


def parse_module_levels(text: str) -> dict:
    """Parse ``name=LEVEL,name=LEVEL`` into a mapping, skipping malformed pairs."""
    module_levels = {}
    for pair in text.split(','):
        pair = pair.strip()
        if not pair or '=' not in pair:
            continue
        name, lvl = pair.split('=', 1)
        module_levels[name.strip()] = lvl.strip().upper()
    return module_levels


def _normalize_module_name(name: str) -> str:
    """Normalize provided module name with alias and auto-prefix.

    - If name is an alias, expand to full module path.
    - If name ends with '.*', treat it as base logger (strip the wildcard).
    - If name does not start with 'squatscan.' and begins with a known top module, prefix 'squatscan.'.
    """
    if name in constants.LOG_ALIAS_MAP:
        return constants.LOG_ALIAS_MAP[name]
    if name.endswith('.*'):
        name = name[:-2]
    if not name.startswith('squatscan.'):
        first = name.split('.', 1)[0]
        if first in constants.KNOWN_TOP_MODULES:
            name = f'squatscan.{name}'
    return name


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

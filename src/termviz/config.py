"""Configuration: background mode and log level from environment."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.WARNING
_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_white_background() -> bool:
    """Return True if the terminal has a white background (WHITEBG env var set).

    Only the presence of the variable matters, not its value. Callers resolve
    this once and pass it to plot_colours(); the library never caches it.

    Returns:
        True if WHITEBG is set.
    """
    return 'WHITEBG' in os.environ


def get_log_level() -> int:
    """Return log level from TERMVIZ_LOG env var, or WARNING.

    Returns:
        A logging level constant.
    """
    name = os.environ.get('TERMVIZ_LOG', '').strip().upper()
    if name in _LEVEL_NAMES:
        return int(getattr(logging, name))
    return DEFAULT_LOG_LEVEL


def configure_logging(verbose: bool = False) -> None:
    """Configure logging to stderr (level from verbose flag or TERMVIZ_LOG).

    Log records go to stderr so they never interleave with sixel data on stdout.
    """
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )

# log_setup.py
from __future__ import annotations

import logging
import sys

TRACE = 5
SILENT = logging.CRITICAL + 10

logging.addLevelName(TRACE, "TRACE")

_VERBOSE_LEVELS = (logging.INFO, logging.DEBUG, TRACE)
_QUIET_LEVELS = (logging.INFO, logging.WARNING, logging.ERROR, SILENT)


def level_for(verbose: int = 0, quiet: int = 0) -> int:
    """
    Map repeated -v / -q counts to a logging level.

    -v debug, -vv trace; -q warning, -qq error, -qqq nothing at all.
    """
    if verbose:
        return _VERBOSE_LEVELS[min(verbose, len(_VERBOSE_LEVELS) - 1)]
    return _QUIET_LEVELS[min(quiet, len(_QUIET_LEVELS) - 1)]


def configure_logging(level: int) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handler.setLevel(level)
    root_logger.addHandler(handler)

"""
Process-wide diagnostics setup.

install() wires rich tracebacks and a rich log handler for the
``voltcheck`` logger. It runs at most once per process; later calls do
nothing.
"""

from __future__ import annotations

import logging
import threading

from rich.logging import RichHandler
from rich.traceback import install as install_traceback

LOGGER_NAME = "voltcheck"

_lock = threading.Lock()
_installed = False


def install(verbose: bool = False) -> bool:
    """
    Install the diagnostics hooks once.

    Args:
        verbose: Log DEBUG records (fallbacks taken, rejected inputs)
            instead of warnings and above only

    Returns:
        True if this call installed the hooks, False if already installed.
    """
    global _installed
    with _lock:
        if _installed:
            return False

        install_traceback(show_locals=False)

        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger = logging.getLogger(LOGGER_NAME)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

        _installed = True
        return True


def is_installed() -> bool:
    return _installed

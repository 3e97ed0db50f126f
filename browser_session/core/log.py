"""
Logging setup: stdlib loggers rendered through rich.
"""
# @file purpose: Provide get_logger/configure_logging for browser-session.

from __future__ import annotations

import logging
import threading

from rich.console import Console
from rich.logging import RichHandler

from .settings import settings

_ROOT = "browser_session"
_lock = threading.Lock()
_configured = False


def configure_logging(level: str | None = None) -> None:
    """Install a RichHandler on the package root logger (idempotent)."""
    global _configured
    with _lock:
        root = logging.getLogger(_ROOT)
        root.setLevel((level or settings.log_level).upper())
        if _configured:
            return
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.propagate = False
        _configured = True


def get_logger(name: str) -> logging.Logger:
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)

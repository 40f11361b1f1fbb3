from __future__ import annotations
"""Rich-backed logger helpers.

The library only ever *emits* through the ``"optimistic"`` logger; installing
the Rich handler is left to :func:`setup`, which the CLI calls.
"""
import os
from enum import Enum
from logging import DEBUG, ERROR, INFO, WARNING, Logger, basicConfig, getLogger

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["log", "get", "setup", "level_from_env", "console", "LogLevel"]

ENV_VAR = "OPTIMISTIC_LOG_LEVEL"

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}


class LogLevel(str, Enum):  # noqa: D101 – CLI choices, mirrors _LEVEL_MAP
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


console = Console()

log: Logger = getLogger("optimistic")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str, unknown → INFO)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("optimistic")
    lg.setLevel(lvl)
    return lg


def level_from_env(default: str = "warning") -> str:
    return os.environ.get(ENV_VAR, default).lower()


def setup(level: str | None = None) -> Logger:  # noqa: D401
    """Install a RichHandler on the root logger and return the package logger."""
    basicConfig(
        level=WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, rich_tracebacks=True, markup=True)],
    )
    return get(level or level_from_env())

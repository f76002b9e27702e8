"""Turn bondkit's loguru records on for hosts and the CLI."""

from __future__ import annotations

import sys
from typing import Any, Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from bondkit.config import get_settings

LogProfile = Literal["default", "cli"]

_active_profile: LogProfile | None = None


def _stderr_sink() -> tuple[Any, str]:
    return sys.stderr, "{time:HH:mm:ss.SSS} {level: <7} {name}:{line} {message}"


def _rich_sink() -> tuple[Any, str]:
    handler = RichHandler(console=get_console(), show_time=False, show_path=False, markup=False)
    return handler, "{message}"


_SINKS = {"default": _stderr_sink, "cli": _rich_sink}


def configure_logging(*, profile: LogProfile = "default") -> None:
    """Replace loguru's sinks with the one for `profile` and enable bondkit records.

    Importing bondkit disables its records so that a library never writes to a
    host's stderr unasked. Repeated calls with the same profile do nothing.
    """

    global _active_profile
    if _active_profile == profile:
        return
    sink, fmt = _SINKS[profile]()
    logger.remove()
    logger.add(sink, level=get_settings().log_level.upper(), format=fmt, backtrace=False, diagnose=False)
    logger.enable("bondkit")
    _active_profile = profile

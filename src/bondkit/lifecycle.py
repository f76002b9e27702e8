"""One-shot load state of the bondkit package."""

from __future__ import annotations

import threading

from loguru import logger

from bondkit.errors import NotLoadedError

_LOADED = threading.Event()
_LOCK = threading.Lock()


def mark_loaded() -> None:
    """Move from uninitialized to ready. Later calls are no-ops."""

    with _LOCK:
        if _LOADED.is_set():
            return
        _LOADED.set()
    logger.debug("lifecycle.ready")


def is_loaded() -> bool:
    return _LOADED.is_set()


def require_loaded(function_name: str) -> None:
    """Raise NotLoadedError unless bondkit finished importing."""

    if not _LOADED.is_set():
        raise NotLoadedError(function_name)

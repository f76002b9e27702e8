"""Host-side bookkeeping for one rendered `JsLink`.

Hosts receive the link callback through ``LINK_CALLBACK_KEY`` and are expected
to run each client request as its own unit of work and to notify the link
once when its defining cell is invalidated. `LinkRegistration` implements that
obligation on asyncio so hosts do not have to reinvent it.
"""

from __future__ import annotations

import asyncio
import inspect
import threading
from typing import Any

from loguru import logger

from bondkit.envelopes import JsLink
from bondkit.errors import LinkCancelledError


class LinkRegistration:
    """Runs link invocations concurrently and tears the link down exactly once."""

    def __init__(self, link: JsLink, *, name: str | None = None) -> None:
        self._link = link
        self._name = name or getattr(link.callback, "__qualname__", "link")
        self._tasks: set[asyncio.Task[Any]] = set()
        self._lock = threading.Lock()
        self._cancelled = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def in_flight(self) -> int:
        with self._lock:
            tasks = list(self._tasks)
        return sum(1 for task in tasks if not task.done())

    async def invoke(self, payload: Any) -> Any:
        """Run the callback for one client request.

        Raises:
            LinkCancelledError: if the link was torn down before or during the call.
        """

        with self._lock:
            if self._cancelled:
                raise LinkCancelledError(f"link {self._name} was cancelled")
            task = asyncio.create_task(self._run(payload), name=f"bondkit-link:{self._name}")
            self._tasks.add(task)
        task.add_done_callback(self._forget)
        try:
            return await task
        except asyncio.CancelledError:
            if self._cancelled:
                raise LinkCancelledError(f"link {self._name} was cancelled while running") from None
            raise

    def cancel(self) -> bool:
        """Tear the link down without waiting for running invocations.

        Safe to call from any thread. Returns False when the link was already
        torn down; `on_cancellation` runs only on the first call.
        """

        with self._lock:
            if self._cancelled:
                return False
            self._cancelled = True
            pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.get_loop().call_soon_threadsafe(task.cancel)
        logger.debug("link.cancelled name={} in_flight={}", self._name, len(pending))
        if self._link.on_cancellation is not None:
            self._link.on_cancellation()
        return True

    def _forget(self, task: asyncio.Task[Any]) -> None:
        with self._lock:
            self._tasks.discard(task)

    async def _run(self, payload: Any) -> Any:
        callback = self._link.callback
        if inspect.iscoroutinefunction(callback):
            return await callback(payload)
        result = await asyncio.to_thread(callback, payload)
        if inspect.isawaitable(result):
            result = await result
        return result

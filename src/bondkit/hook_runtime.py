"""Fault-isolated execution of bondkit plugin hooks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pluggy
from loguru import logger

from bondkit.hookspecs import BondkitHookSpecs

HOOK_NAMES = tuple(sorted(name for name in vars(BondkitHookSpecs) if name.startswith("bondkit_")))


class HookRuntime:
    """Calls plugin implementations one at a time, newest registration first.

    A failing implementation is logged, reported to ``bondkit_on_error``
    observers and left out of the results. One broken widget pack therefore
    never breaks widgets from other packs.
    """

    def __init__(self, plugin_manager: pluggy.PluginManager) -> None:
        self._plugin_manager = plugin_manager

    def call_first(self, hook_name: str, **kwargs: Any) -> Any:
        """Return the first non-None result, or None."""

        return next((value for _, value in self._results(hook_name, kwargs) if value is not None), None)

    def call_many(self, hook_name: str, **kwargs: Any) -> list[tuple[str, Any]]:
        """Return ``(plugin_name, value)`` for every implementation that did not fail."""

        return list(self._results(hook_name, kwargs))

    def notify_error(self, *, stage: str, error: Exception) -> None:
        logger.opt(exception=error).warning("hook.failed stage={}", stage)
        observed = {"stage": stage, "error": error}
        for impl in self._implementations("bondkit_on_error"):
            try:
                impl.function(**_select(impl, observed))
            except Exception:
                # An observer failing must not recurse into notify_error.
                logger.opt(exception=True).warning("hook.observer_failed stage={} plugin={}", stage, _plugin(impl))

    def hook_report(self) -> dict[str, list[str]]:
        """Map each implemented hook to its plugins, in call order."""

        report = {name: [_plugin(impl) for impl in self._implementations(name)] for name in HOOK_NAMES}
        return {name: plugins for name, plugins in report.items() if plugins}

    def _results(self, hook_name: str, kwargs: dict[str, Any]) -> Iterator[tuple[str, Any]]:
        for impl in self._implementations(hook_name):
            try:
                value = impl.function(**_select(impl, kwargs))
            except Exception as error:
                self.notify_error(stage=f"{hook_name}:{_plugin(impl)}", error=error)
                continue
            yield _plugin(impl), value

    def _implementations(self, hook_name: str) -> list[Any]:
        caller = getattr(self._plugin_manager.hook, hook_name, None)
        if caller is None:
            return []
        # pluggy lists implementations oldest first.
        return caller.get_hookimpls()[::-1]


def _select(impl: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
    return {name: kwargs[name] for name in impl.argnames if name in kwargs}


def _plugin(impl: Any) -> str:
    return impl.plugin_name or "<unknown>"

"""Process-wide plugin manager for widget packs and host runtimes."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cache
from typing import Any

import pluggy
from loguru import logger

from bondkit.config import get_settings
from bondkit.hook_runtime import HookRuntime
from bondkit.hookspecs import BONDKIT_HOOK_NAMESPACE, BondkitHookSpecs
from bondkit.registry import BOND_HOOK_NAMES, Override, OverrideRegistry, overrides


class BondkitPlugins:
    """Loads plugins and feeds their contributions into the override registry."""

    def __init__(self, registry: OverrideRegistry) -> None:
        self._registry = registry
        self._plugin_manager = pluggy.PluginManager(BONDKIT_HOOK_NAMESPACE)
        self._plugin_manager.add_hookspecs(BondkitHookSpecs)
        self._hook_runtime = HookRuntime(self._plugin_manager)

    @property
    def plugin_manager(self) -> pluggy.PluginManager:
        return self._plugin_manager

    def load_entrypoints(self) -> int:
        """Load plugins from the ``bondkit`` entry point group."""

        try:
            count = self._plugin_manager.load_setuptools_entrypoints(BONDKIT_HOOK_NAMESPACE)
        except Exception:
            logger.opt(exception=True).warning("plugins.entrypoints_failed group={}", BONDKIT_HOOK_NAMESPACE)
            count = 0
        self.refresh_overrides()
        logger.debug("plugins.entrypoints_loaded count={}", count)
        return count

    def register(self, plugin: object, *, name: str | None = None) -> str | None:
        """Register one plugin object and merge its overrides."""

        plugin_name = self._plugin_manager.register(plugin, name=name)
        self.refresh_overrides()
        logger.debug("plugins.registered plugin={}", plugin_name)
        return plugin_name

    def unregister(self, plugin: object) -> None:
        self._plugin_manager.unregister(plugin)
        self.refresh_overrides()

    def refresh_overrides(self) -> None:
        """Collect ``bondkit_bond_overrides`` from every plugin into the registry.

        Later-registered plugins take precedence over earlier ones for the same type.
        """

        merged: dict[str, dict[type, Override]] = {name: {} for name in BOND_HOOK_NAMES}
        # call_many yields newest first; apply oldest first so newer plugins overwrite.
        for plugin_name, contribution in reversed(self._hook_runtime.call_many("bondkit_bond_overrides")):
            if contribution is None:
                continue
            if not isinstance(contribution, Mapping):
                logger.warning("plugins.bad_overrides plugin={} type={}", plugin_name, type(contribution).__name__)
                continue
            for cls, hooks in contribution.items():
                if not isinstance(hooks, Mapping):
                    logger.warning("plugins.bad_override plugin={} type={!r}", plugin_name, cls)
                    continue
                for hook_name, func in hooks.items():
                    if hook_name not in merged or not isinstance(cls, type) or not callable(func):
                        logger.warning("plugins.bad_override plugin={} hook={} type={!r}", plugin_name, hook_name, cls)
                        continue
                    merged[hook_name][cls] = func
        self._registry.replace_contributed(merged)

    def host_attached(self) -> bool:
        return bool(self._hook_runtime.call_first("bondkit_host_attached"))

    def register_cli_commands(self, app: Any) -> None:
        """Ask plugins to register CLI commands."""

        self._hook_runtime.call_many("bondkit_register_cli_commands", app=app)

    def hook_report(self) -> dict[str, list[str]]:
        """Return hook implementation summary for diagnostics."""

        return self._hook_runtime.hook_report()


@cache
def get_plugins() -> BondkitPlugins:
    """Return the process-wide plugin manager, loading entry points on first use."""

    plugins = BondkitPlugins(overrides)
    if get_settings().load_entrypoints:
        plugins.load_entrypoints()
    return plugins

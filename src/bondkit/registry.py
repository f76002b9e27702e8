"""Override table for bond hooks, keyed by widget runtime type."""

from __future__ import annotations

import inspect
import threading
from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

BOND_HOOK_NAMES = ("initial_value", "transform_value", "possible_values", "validate_value")
DUCK_PREFIX = "bond_"

type Override = Callable[..., Any]


class OverrideRegistry:
    """Per-type overrides from direct registration and from plugins.

    Lookup walks the widget's MRO, most specific class first. For one class a
    direct registration wins over a plugin contribution.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._direct: dict[str, dict[type, Override]] = {name: {} for name in BOND_HOOK_NAMES}
        self._contributed: dict[str, dict[type, Override]] = {name: {} for name in BOND_HOOK_NAMES}

    def register(self, hook_name: str, cls: type, func: Override) -> None:
        _check_hook_name(hook_name)
        if not isinstance(cls, type):
            raise TypeError(f"overrides are registered per type, got {cls!r}")
        if not callable(func):
            raise TypeError(f"override for {hook_name} on {cls.__qualname__} must be callable")
        with self._lock:
            self._direct[hook_name][cls] = func
        logger.debug("registry.register hook={} type={}", hook_name, cls.__qualname__)

    def unregister(self, hook_name: str, cls: type) -> None:
        _check_hook_name(hook_name)
        with self._lock:
            self._direct[hook_name].pop(cls, None)

    def replace_contributed(self, overrides: Mapping[str, Mapping[type, Override]]) -> None:
        """Swap in the full set of plugin-contributed overrides."""

        table: dict[str, dict[type, Override]] = {name: {} for name in BOND_HOOK_NAMES}
        for hook_name, by_type in overrides.items():
            _check_hook_name(hook_name)
            table[hook_name].update(by_type)
        with self._lock:
            self._contributed = table

    def dispatch(self, hook_name: str, cls: type) -> Override | None:
        """Return the registered override for `cls`, or None."""

        with self._lock:
            direct = self._direct[hook_name]
            contributed = self._contributed[hook_name]
            for klass in cls.__mro__:
                if klass in direct:
                    return direct[klass]
                if klass in contributed:
                    return contributed[klass]
        return None

    def resolve(self, hook_name: str, widget: Any) -> Override | None:
        """Return a callable taking ``(widget, *args)``, or None for the fallback."""

        registered = self.dispatch(hook_name, type(widget))
        if registered is not None:
            return registered
        # Looked up on the type, like a real method: instance attributes and
        # methods of a widget that is itself a class do not count.
        attribute = inspect.getattr_static(type(widget), f"{DUCK_PREFIX}{hook_name}", None)
        if attribute is None:
            return None
        method = attribute.__get__(widget, type(widget)) if hasattr(attribute, "__get__") else attribute
        if callable(method):
            return lambda _widget, *args: method(*args)
        return None

    def clear(self) -> None:
        with self._lock:
            for table in (self._direct, self._contributed):
                for by_type in table.values():
                    by_type.clear()


def _check_hook_name(hook_name: str) -> None:
    if hook_name not in BOND_HOOK_NAMES:
        raise ValueError(f"unknown bond hook {hook_name!r}; expected one of {', '.join(BOND_HOOK_NAMES)}")


overrides = OverrideRegistry()

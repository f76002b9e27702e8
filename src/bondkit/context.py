"""Render context passed by the host into every widget display call."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

SUPPORTED_FEATURES_KEY = "supported_integration_features"
IS_INSIDE_HOST_KEY = "is_inside_host"
PUBLISH_CALLBACK_KEY = "publish_to_js"
LINK_CALLBACK_KEY = "with_js_link"


class RenderContext(Mapping[str, Any]):
    """Read-only bag of named attributes for one render.

    The host owns and populates it. Widgets only read from it, usually through
    `bondkit.supports` and the envelope `render` methods.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged = dict(values or {})
        merged.update(kwargs)
        self._values = MappingProxyType(merged)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RenderContext({dict(self._values)!r})"

    def with_values(self, **kwargs: Any) -> RenderContext:
        """Derive a new context with extra or replaced keys."""

        return RenderContext(self._values, **kwargs)


def context_value(context: Any, key: str, default: Any = None) -> Any:
    """Read a key from mapping-like or attribute-based contexts."""

    if context is None:
        return default
    if isinstance(context, Mapping):
        return context.get(key, default)
    return getattr(context, key, default)

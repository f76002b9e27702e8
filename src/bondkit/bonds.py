"""Bond hooks: the overridable extension points of a widget.

In a notebook that binds a variable to a widget, the host calls these
functions on the widget value. Widget authors override them in one of three
ways, checked in this order:

1. register a function for the widget type::

       @bonds.transform_value.register(MyVectorSlider)
       def _(slider, value_from_js):
           return slider.values[value_from_js]

2. let a plugin contribute overrides through ``bondkit_bond_overrides``;
3. define a ``bond_<hook>`` method on the widget class, e.g.
   ``def bond_transform_value(self, value_from_js): ...``.

A widget with no override behaves as if the hook did not exist, except for
`validate_value`, which rejects everything.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from bondkit.features import FEATURE_ATTRIBUTE, Feature
from bondkit.plugins import get_plugins
from bondkit.registry import Override, overrides
from bondkit.types import MISSING, NotGiven, RawValue


class BondHook:
    """One bond hook: a fallback plus per-type overrides."""

    def __init__(self, feature: Feature, fallback: Callable[..., Any], doc: str) -> None:
        self.feature = feature
        self.fallback = fallback
        self.__name__ = str(feature)
        self.__qualname__ = str(feature)
        self.__doc__ = doc
        setattr(self, FEATURE_ATTRIBUTE, feature)

    def __repr__(self) -> str:
        return f"<bond hook {self.__name__}>"

    def __call__(self, widget: Any, *args: Any) -> Any:
        get_plugins()
        override = overrides.resolve(self.__name__, widget)
        if override is None:
            return self.fallback(widget, *args)
        return override(widget, *args)

    def register(self, cls: type, func: Override | None = None) -> Any:
        """Register `func` for `cls`; usable as a decorator when `func` is omitted."""

        if func is not None:
            overrides.register(self.__name__, cls, func)
            return func

        def decorator(inner: Override) -> Override:
            overrides.register(self.__name__, cls, inner)
            return inner

        return decorator

    def unregister(self, cls: type) -> None:
        overrides.unregister(self.__name__, cls)

    def dispatch(self, cls: type) -> Override | None:
        """Return the override registered for `cls` (directly or via a plugin), if any."""

        get_plugins()
        return overrides.dispatch(self.__name__, cls)


def _initial_value_fallback(widget: Any) -> Any:
    return MISSING


def _transform_value_fallback(widget: Any, value_from_js: RawValue) -> Any:
    return value_from_js


def _possible_values_fallback(widget: Any) -> Any:
    return NotGiven


def _validate_value_fallback(widget: Any, value_from_js: RawValue) -> bool:
    return False


initial_value = BondHook(
    Feature.INITIAL_VALUE,
    _initial_value_fallback,
    """The value of a bound variable before the first value arrives from the client.

    Used while the widget has not yet been rendered, and when the notebook
    runs as a plain script without a host. Defaults to `MISSING`.

    If the widget also overrides `transform_value`, the returned value must
    already be transformed.
    """,
)

transform_value = BondHook(
    Feature.TRANSFORM_VALUE,
    _transform_value_fallback,
    """Turn a value received from the client into the value bound in the notebook.

    `value_from_js` is already decoded into numbers, strings, booleans, None,
    lists and string-keyed dicts. Defaults to returning it unchanged. Overrides
    must be deterministic and free of side effects; the host may call them
    more than once for the same input.
    """,
)

possible_values = BondHook(
    Feature.POSSIBLE_VALUES,
    _possible_values_fallback,
    """All values the client could send, for precomputing notebook states.

    Return a sized iterable of raw (pre-transform) values, or
    `InfinitePossibilities` when the set cannot be listed. Defaults to `NotGiven`.
    """,
)


class _ValidateHook(BondHook):
    def __call__(self, widget: Any, *args: Any) -> bool:
        result = super().__call__(widget, *args)
        if isinstance(result, bool):
            return result
        # numpy.bool_ and other array-library booleans
        if getattr(getattr(result, "dtype", None), "kind", None) == "b" and getattr(result, "ndim", 0) == 0:
            return bool(result)
        raise TypeError(
            f"validate_value for {type(widget).__qualname__} must return a bool, got {type(result).__name__}"
        )


validate_value = _ValidateHook(
    Feature.VALIDATE_VALUE,
    _validate_value_fallback,
    """Decide whether a value from the client may be applied.

    Called with the raw value, before `transform_value`. Returning False
    means the value is invalid or unsafe and the host must ignore it. This
    protects hosts that accept requests from untrusted clients, so the
    fallback rejects everything. Overrides return a bool; zero-dimensional
    boolean scalars such as `numpy.bool_` are accepted and converted.

    Overrides must check the type of `value_from_js` before comparing it,
    since a forged request can send any shape::

        @bonds.validate_value.register(MySlider)
        def _(slider, value_from_js):
            return isinstance(value_from_js, (int, float)) and not isinstance(value_from_js, bool) \\
                and slider.start <= value_from_js <= slider.stop
    """,
)


__all__ = [
    "BondHook",
    "initial_value",
    "possible_values",
    "transform_value",
    "validate_value",
]

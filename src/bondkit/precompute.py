"""Enumerate bond values for offline precomputation of notebook states."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from typing import Any

from loguru import logger

from bondkit.bonds import possible_values
from bondkit.types import Unenumerable


@dataclass(frozen=True)
class Enumeration:
    """Result of asking a widget for its possible values.

    `values` is None when the widget cannot be enumerated; `reason` then says why.
    """

    values: tuple[Any, ...] | None
    reason: Unenumerable | str | None = None

    @property
    def enumerable(self) -> bool:
        return self.values is not None


def enumerate_values(widget: Any, *, limit: int | None = None) -> Enumeration:
    """Collect the raw values `widget` may send, if it can list them.

    `NotGiven` and `InfinitePossibilities` both mean "do not enumerate", but
    the reason is kept for diagnostics. A result without a known length is
    treated as not enumerable, as is one longer than `limit`. Strings, bytes
    and mappings are single values, never a list of possibilities.
    """

    possible = possible_values(widget)
    if isinstance(possible, Unenumerable):
        return Enumeration(None, possible)
    if isinstance(possible, (str, bytes, bytearray, Mapping)):
        logger.warning("precompute.scalar widget={} type={}", type(widget).__qualname__, type(possible).__name__)
        return Enumeration(None, f"possible_values returned a single {type(possible).__name__}, not a collection")
    if not isinstance(possible, Iterable) or not isinstance(possible, Sized):
        logger.warning("precompute.unsized widget={} type={}", type(widget).__qualname__, type(possible).__name__)
        return Enumeration(None, "possible_values did not return a sized iterable")
    size = len(possible)
    if limit is not None and size > limit:
        return Enumeration(None, f"{size} possible values exceed the limit of {limit}")
    return Enumeration(tuple(possible))

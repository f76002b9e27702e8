"""Value shapes and sentinels shared by the hook contract."""

from __future__ import annotations

from enum import Enum

type RawValue = int | float | str | bool | None | list[RawValue] | dict[str, RawValue]


class Missing(Enum):
    """Placeholder for a bond that has no value yet."""

    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


class Unenumerable(Enum):
    """Reasons a bond's possible values cannot be listed."""

    NOT_GIVEN = "not_given"
    INFINITE_POSSIBILITIES = "infinite_possibilities"

    def __repr__(self) -> str:
        return "NotGiven" if self is Unenumerable.NOT_GIVEN else "InfinitePossibilities"


MISSING = Missing.MISSING
NotGiven = Unenumerable.NOT_GIVEN
InfinitePossibilities = Unenumerable.INFINITE_POSSIBILITIES

"""Hook identifiers advertised by hosts and queried by widgets."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

_SINCE: dict[str, str | None] = {
    "initial_value": "0.17.1",
    "transform_value": "0.17.1",
    "possible_values": "0.17.3",
    "validate_value": None,
    "published_to_js": None,
    "with_js_link": None,
}


class Feature(StrEnum):
    """One named extension point of the widget contract.

    Values are plain strings so that a host may advertise them over any
    transport and they stay stable across processes.
    """

    INITIAL_VALUE = "initial_value"
    TRANSFORM_VALUE = "transform_value"
    POSSIBLE_VALUES = "possible_values"
    VALIDATE_VALUE = "validate_value"
    PUBLISHED_TO_JS = "published_to_js"
    WITH_JS_LINK = "with_js_link"

    @property
    def since(self) -> str | None:
        """Host version that introduced this feature, when one is recorded."""
        return _SINCE[self.value]


FEATURE_ATTRIBUTE = "__bond_feature__"


def mark_feature(feature: Feature) -> Any:
    """Tag a function or class with the feature it stands for."""

    def decorator(target: Any) -> Any:
        setattr(target, FEATURE_ATTRIBUTE, feature)
        return target

    return decorator


def identify_feature(candidate: Any) -> str | None:
    """Resolve a feature, a feature name, or a tagged object to its identifier.

    Returns None for anything that does not name a feature.
    """

    if isinstance(candidate, str):
        return str(candidate)
    tagged = getattr(candidate, FEATURE_ATTRIBUTE, None)
    if isinstance(tagged, Feature):
        return str(tagged)
    return None


def feature_of(candidate: Any) -> str:
    """Like `identify_feature`, but raise TypeError for unrecognised objects."""

    identifier = identify_feature(candidate)
    if identifier is None:
        raise TypeError(f"{candidate!r} does not identify a bondkit feature")
    return identifier

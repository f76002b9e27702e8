"""bondkit - the hook contract between notebook widgets and the host that renders them.

bondkit performs no transport or rendering: hosts implement the behavior,
widgets declare what they need through the hooks and queries below.
"""

from loguru import logger

logger.disable("bondkit")

from bondkit import bonds  # noqa: E402
from bondkit.bonds import initial_value, possible_values, transform_value, validate_value
from bondkit.context import (
    IS_INSIDE_HOST_KEY,
    LINK_CALLBACK_KEY,
    PUBLISH_CALLBACK_KEY,
    SUPPORTED_FEATURES_KEY,
    RenderContext,
)
from bondkit.display import rendering_inside_host, running_inside_host, supports
from bondkit.envelopes import JsLink, PublishedToJs, publish_to_js, with_js_link
from bondkit.errors import (
    BondkitError,
    LinkCancelledError,
    NotLoadedError,
    PreconditionError,
    UnsupportedFeatureError,
)
from bondkit.features import Feature
from bondkit.hookspecs import hookimpl
from bondkit.lifecycle import mark_loaded
from bondkit.types import MISSING, InfinitePossibilities, NotGiven, RawValue, Unenumerable

__version__ = "0.1.0"
version_info = tuple(int(part) for part in __version__.split("."))

__all__ = [
    "IS_INSIDE_HOST_KEY",
    "LINK_CALLBACK_KEY",
    "MISSING",
    "PUBLISH_CALLBACK_KEY",
    "SUPPORTED_FEATURES_KEY",
    "BondkitError",
    "Feature",
    "InfinitePossibilities",
    "JsLink",
    "LinkCancelledError",
    "NotGiven",
    "NotLoadedError",
    "PreconditionError",
    "PublishedToJs",
    "RawValue",
    "RenderContext",
    "Unenumerable",
    "UnsupportedFeatureError",
    "bonds",
    "hookimpl",
    "initial_value",
    "possible_values",
    "publish_to_js",
    "rendering_inside_host",
    "running_inside_host",
    "supports",
    "transform_value",
    "validate_value",
    "with_js_link",
]

mark_loaded()

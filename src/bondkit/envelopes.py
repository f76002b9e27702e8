"""Envelope markers whose rendering is delegated to the host."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger

from bondkit.context import LINK_CALLBACK_KEY, PUBLISH_CALLBACK_KEY, context_value
from bondkit.errors import UnsupportedFeatureError
from bondkit.features import Feature, mark_feature


@mark_feature(Feature.PUBLISHED_TO_JS)
@dataclass(frozen=True, eq=False)
class PublishedToJs:
    """A value to be sent to the client efficiently.

    The host decides the wire encoding; numeric arrays are usually sent as
    typed binary arrays (see `bondkit.wire`). Hosts should send identical
    payloads at most once, and mutating the value after publishing must not
    change what was already sent.
    """

    value: Any

    def render(self, context: Any) -> Any:
        publish = context_value(context, PUBLISH_CALLBACK_KEY)
        if publish is None:
            raise UnsupportedFeatureError(Feature.PUBLISHED_TO_JS)
        logger.debug("envelope.publish type={}", type(self.value).__name__)
        return publish(context, self.value)


@mark_feature(Feature.WITH_JS_LINK)
@dataclass(frozen=True, eq=False)
class JsLink:
    """A host-side function the client can call, with an optional teardown callback.

    Each client request runs as its own unit of concurrent work. When the
    cell that created the link is re-evaluated, the host calls
    `on_cancellation` once, possibly while `callback` is still running.
    Both must tolerate that interleaving.
    """

    callback: Callable[[Any], Any]
    on_cancellation: Callable[[], Any] | None = None

    def __post_init__(self) -> None:
        if not callable(self.callback):
            raise TypeError(f"link callback must be callable, got {type(self.callback).__name__}")
        if self.on_cancellation is not None and not callable(self.on_cancellation):
            raise TypeError(f"on_cancellation must be callable, got {type(self.on_cancellation).__name__}")

    def render(self, context: Any) -> Any:
        register_link = context_value(context, LINK_CALLBACK_KEY)
        if register_link is None:
            raise UnsupportedFeatureError(Feature.WITH_JS_LINK)
        logger.debug("envelope.link callback={}", getattr(self.callback, "__qualname__", repr(self.callback)))
        return register_link(context, self.callback, self.on_cancellation)


@mark_feature(Feature.PUBLISHED_TO_JS)
def publish_to_js(value: Any) -> PublishedToJs:
    """Wrap `value` so the host publishes it to the client when rendered."""

    return PublishedToJs(value)


@mark_feature(Feature.WITH_JS_LINK)
def with_js_link(callback: Callable[[Any], Any], on_cancellation: Callable[[], Any] | None = None) -> JsLink:
    """Wrap `callback` so the client can call it once the envelope is rendered."""

    return JsLink(callback, on_cancellation)


def render(envelope: PublishedToJs | JsLink, context: Any) -> Any:
    """Render an envelope through the host callbacks in `context`."""

    return envelope.render(context)

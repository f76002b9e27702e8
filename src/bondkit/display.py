"""Capability negotiation between a widget and the host rendering it.

These queries belong inside a widget's display routine, where the host
hands over its render context::

    def render(self, context):
        if not bondkit.supports(context, bondkit.bonds.transform_value):
            raise RuntimeError("This widget does not work in the current host.")
        ...

Calling them while bondkit itself is still being imported (for example from
a plugin module loaded at import time) raises `NotLoadedError`.
"""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from bondkit.config import get_settings
from bondkit.context import IS_INSIDE_HOST_KEY, SUPPORTED_FEATURES_KEY, context_value
from bondkit.features import identify_feature
from bondkit.lifecycle import require_loaded
from bondkit.plugins import get_plugins


def supports(context: Any, feature: Any) -> bool:
    """Check whether the host behind `context` supports `feature`.

    `feature` may be a `Feature`, its string name, or a tagged object such as
    `bondkit.bonds.initial_value` or `bondkit.publish_to_js`. The host may
    advertise any of these forms too. Anything else is simply not a member.
    """

    require_loaded("supports")
    identifier = identify_feature(feature)
    if identifier is None:
        return False
    advertised = context_value(context, SUPPORTED_FEATURES_KEY, ()) or ()
    return any(identify_feature(item) == identifier for item in advertised)


def running_inside_host() -> bool:
    """Is a host runtime attached to this process?"""

    require_loaded("running_inside_host")
    settings = get_settings()
    if settings.inside_host or settings.host_module in sys.modules:
        return True
    attached = get_plugins().host_attached()
    logger.debug("display.host_check attached={}", attached)
    return attached


def rendering_inside_host(context: Any) -> bool:
    """Is this particular render happening inside the host?"""

    require_loaded("rendering_inside_host")
    return bool(context_value(context, IS_INSIDE_HOST_KEY, False))

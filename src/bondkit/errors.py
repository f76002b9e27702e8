"""Exception types for bondkit."""

from __future__ import annotations

from typing import Any


class BondkitError(Exception):
    """Base exception for bondkit."""


class ConfigurationError(BondkitError):
    """Raised when settings are invalid."""


class PreconditionError(BondkitError):
    """Base exception for contract misuse that is fatal to the current render."""


class NotLoadedError(PreconditionError):
    """Raised when a capability query runs before bondkit finished importing."""

    def __init__(self, function_name: str) -> None:
        self.function_name = function_name
        super().__init__(
            f"`{function_name}` can only be called inside a function, **after** bondkit has been imported. "
            "You can not call the function at module level."
        )


class UnsupportedFeatureError(PreconditionError):
    """Raised when an envelope is rendered through a context without the host callback."""

    def __init__(self, feature: Any, *, detail: str = "") -> None:
        self.feature = feature
        message = (
            f"The current host does not support `{feature}`. "
            f"Use `bondkit.supports(context, {feature!r})` inside your display routine "
            "to check for support before rendering."
        )
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class LinkCancelledError(BondkitError):
    """Raised when a torn-down link registration is invoked."""

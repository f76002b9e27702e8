"""Pluggy hook namespace and plugin hook specifications."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pluggy

BONDKIT_HOOK_NAMESPACE = "bondkit"
hookspec = pluggy.HookspecMarker(BONDKIT_HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(BONDKIT_HOOK_NAMESPACE)


class BondkitHookSpecs:
    """Hook contract for widget packs and host runtimes."""

    @hookspec
    def bondkit_bond_overrides(self) -> Mapping[type, Mapping[str, Callable[..., Any]]] | None:
        """Contribute bond hook overrides for widget types.

        Returns:
            Mapping of widget type to a mapping of hook name
            (``"initial_value"``, ``"transform_value"``, ``"possible_values"``,
            ``"validate_value"``) to the override function.
        """

    @hookspec(firstresult=True)
    def bondkit_host_attached(self) -> bool | None:
        """Report whether a host runtime is attached to this process."""

    @hookspec
    def bondkit_register_cli_commands(self, app: Any) -> None:
        """Register CLI commands onto the root Typer application."""

    @hookspec
    def bondkit_on_error(self, stage: str, error: Exception) -> None:
        """Observe plugin failures from any stage."""

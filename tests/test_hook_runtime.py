from __future__ import annotations

import pluggy

from bondkit.hook_runtime import HookRuntime
from bondkit.hookspecs import BONDKIT_HOOK_NAMESPACE, BondkitHookSpecs, hookimpl
from fixtures_plugins.widget_pack import BrokenPack, ChoicePack, ErrorObserver, HostRuntime


def _runtime(*plugins: tuple[str, object]) -> HookRuntime:
    manager = pluggy.PluginManager(BONDKIT_HOOK_NAMESPACE)
    manager.add_hookspecs(BondkitHookSpecs)
    for name, plugin in plugins:
        manager.register(plugin, name=name)
    return HookRuntime(manager)


def test_call_many_skips_failures_and_reports_them() -> None:
    observer = ErrorObserver()
    runtime = _runtime(("observer", observer), ("choices", ChoicePack()), ("broken", BrokenPack()))

    results = runtime.call_many("bondkit_bond_overrides")

    assert [name for name, _ in results] == ["choices"]
    assert observer.stages == ["bondkit_bond_overrides:broken"]


def test_call_first_prefers_latest_registration() -> None:
    runtime = _runtime(("old", HostRuntime(attached=True)), ("new", HostRuntime(attached=False)))

    assert runtime.call_first("bondkit_host_attached") is False
    assert _runtime().call_first("bondkit_host_attached") is None


def test_failing_error_observer_does_not_propagate() -> None:
    class ExplodingObserver:
        @hookimpl
        def bondkit_on_error(self, stage: str, error: Exception) -> None:
            raise RuntimeError(stage)

    runtime = _runtime(("exploding", ExplodingObserver()), ("broken", BrokenPack()))

    assert runtime.call_many("bondkit_bond_overrides") == []


def test_hook_report_only_lists_implemented_hooks() -> None:
    runtime = _runtime(("host", HostRuntime()), ("choices", ChoicePack()))

    assert runtime.hook_report() == {
        "bondkit_bond_overrides": ["choices"],
        "bondkit_host_attached": ["host"],
    }

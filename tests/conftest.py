from __future__ import annotations

from collections.abc import Iterator

import pytest

from bondkit.config import get_settings
from bondkit.plugins import get_plugins
from bondkit.registry import overrides


@pytest.fixture(autouse=True)
def _isolate_bondkit(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("BONDKIT_LOAD_ENTRYPOINTS", "false")
    monkeypatch.delenv("BONDKIT_INSIDE_HOST", raising=False)
    monkeypatch.delenv("BONDKIT_HOST_MODULE", raising=False)
    get_settings.cache_clear()
    get_plugins.cache_clear()
    overrides.clear()
    yield
    overrides.clear()
    get_plugins.cache_clear()
    get_settings.cache_clear()

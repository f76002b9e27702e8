from __future__ import annotations

import pytest

from bondkit.config import get_settings
from bondkit.errors import ConfigurationError
from bondkit.features import Feature, feature_of
from bondkit.types import MISSING, InfinitePossibilities, NotGiven, Unenumerable


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.host_module == "bondkit_host"
    assert settings.inside_host is False
    assert settings.load_entrypoints is False
    assert settings.log_level == "WARNING"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BONDKIT_HOST_MODULE", "  my_notebook_runner ")
    get_settings.cache_clear()

    assert get_settings().host_module == "my_notebook_runner"


def test_blank_host_module_is_a_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BONDKIT_HOST_MODULE", "   ")
    get_settings.cache_clear()

    with pytest.raises(ConfigurationError, match="host_module"):
        get_settings()


def test_feature_identifiers_are_stable_strings() -> None:
    assert [str(feature) for feature in Feature] == [
        "initial_value",
        "transform_value",
        "possible_values",
        "validate_value",
        "published_to_js",
        "with_js_link",
    ]
    assert Feature("transform_value") is Feature.TRANSFORM_VALUE
    assert Feature.INITIAL_VALUE.since == "0.17.1"
    assert Feature.POSSIBLE_VALUES.since == "0.17.3"
    assert feature_of("validate_value") == "validate_value"


def test_sentinels_are_distinct_markers() -> None:
    assert NotGiven is Unenumerable.NOT_GIVEN
    assert InfinitePossibilities is Unenumerable.INFINITE_POSSIBILITIES
    assert repr(NotGiven) == "NotGiven"
    assert repr(MISSING) == "MISSING"
    assert not MISSING

from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

import bondkit
from bondkit.cli import create_cli_app
from bondkit.hookspecs import hookimpl
from bondkit.plugins import get_plugins
from fixtures_plugins.widget_pack import HostRuntime


@pytest.fixture(autouse=True)
def _wide_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "120")


class GreetCommandPack:
    @hookimpl
    def bondkit_register_cli_commands(self, app: typer.Typer) -> None:
        @app.command("greet")
        def greet() -> None:
            typer.echo("hello from plugin")


def test_version_command() -> None:
    result = CliRunner().invoke(create_cli_app(), ["version"])

    assert result.exit_code == 0
    assert bondkit.__version__ in result.stdout


def test_features_command_lists_every_feature() -> None:
    result = CliRunner().invoke(create_cli_app(), ["features"])

    assert result.exit_code == 0
    for feature in bondkit.Feature:
        assert str(feature) in result.stdout


def test_hooks_command_without_plugins() -> None:
    result = CliRunner().invoke(create_cli_app(), ["hooks"])

    assert result.exit_code == 0
    assert "(no hook implementations)" in result.stdout


def test_check_command_exit_code_follows_host() -> None:
    runner = CliRunner()

    detached = runner.invoke(create_cli_app(), ["check"])
    get_plugins().register(HostRuntime(), name="host")
    attached = runner.invoke(create_cli_app(), ["check"])

    assert detached.exit_code == 1
    assert "host attached: no" in detached.stdout
    assert attached.exit_code == 0
    assert "host attached: yes" in attached.stdout


def test_plugins_register_cli_commands() -> None:
    get_plugins().register(GreetCommandPack(), name="greet")

    result = CliRunner().invoke(create_cli_app(), ["greet"])

    assert result.exit_code == 0
    assert "hello from plugin" in result.stdout


def test_hooks_command_reports_plugins() -> None:
    get_plugins().register(HostRuntime(), name="host")

    result = CliRunner().invoke(create_cli_app(), ["hooks"])

    assert "bondkit_host_attached: host" in result.stdout

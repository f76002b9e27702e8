"""bondkit command line interface."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

import bondkit
from bondkit.display import running_inside_host
from bondkit.features import Feature
from bondkit.logging_utils import configure_logging
from bondkit.plugins import get_plugins


def version() -> None:
    """Show the bondkit version."""

    typer.echo(bondkit.__version__)


def features() -> None:
    """List the features a host can advertise."""

    table = Table("feature", "since host version")
    for feature in Feature:
        table.add_row(str(feature), feature.since or "-")
    Console().print(table)


def hooks() -> None:
    """Show plugin hook implementations."""

    report = get_plugins().hook_report()
    if not report:
        typer.echo("(no hook implementations)")
        return
    for hook_name, plugin_names in report.items():
        typer.echo(f"{hook_name}: {', '.join(plugin_names)}")


def check() -> None:
    """Report whether a host runtime is attached; exit code 1 when it is not."""

    attached = running_inside_host()
    typer.echo(f"host attached: {'yes' if attached else 'no'}")
    if not attached:
        raise typer.Exit(code=1)


def create_cli_app() -> typer.Typer:
    app = typer.Typer(name="bondkit", help="Widget hook contract for notebook hosts", add_completion=False)
    app.command("version")(version)
    app.command("features")(features)
    app.command("hooks")(hooks)
    app.command("check")(check)
    get_plugins().register_cli_commands(app)
    return app


def main() -> None:
    configure_logging(profile="cli")
    create_cli_app()()

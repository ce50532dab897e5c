"""Config command for the mdexporter CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ._common import ExporterCliError


@click.command(name="config")
@click.option(
    "--path",
    "show_path",
    is_flag=True,
    help="Print the configuration file location instead of editing it.",
)
@click.pass_context
def config(ctx: click.Context, show_path: bool) -> None:
    """Create the configuration file if needed and open it in the editor."""

    config_path: Path = ctx.obj.get("config_path") or config_module.DEFAULT_CONFIG_PATH

    if show_path:
        click.echo(str(config_path))
        return

    if config_module.bootstrap_config_file(config_path):
        click.echo(f"Created configuration at {config_path}")

    try:
        click.edit(filename=str(config_path))
    except click.ClickException as exc:
        raise ExporterCliError(f"Failed to launch editor: {exc.message}") from exc

    click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)

"""Links command for the mdexporter CLI."""

from __future__ import annotations

import click
import yaml

from ..services.export import collect_links
from ..vault import VaultError
from ._common import ExporterCliError, get_app, lookup_note


@click.command(name="links")
@click.argument("note")
@click.pass_context
def links(ctx: click.Context, note: str) -> None:
    """Show the images and notes NOTE references, without exporting."""

    app = get_app(ctx)
    note_file = lookup_note(app, note)

    try:
        link_set = collect_links(app.vault, note_file)
    except VaultError as exc:
        raise ExporterCliError(str(exc)) from exc

    payload = {
        "note": note_file.path,
        "images": list(link_set.images),
        "notes": list(link_set.md_files),
    }
    click.echo(
        yaml.safe_dump(
            payload,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        ).rstrip()
    )


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(links)

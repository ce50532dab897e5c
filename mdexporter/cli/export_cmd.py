"""Export command for the mdexporter CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..prompts import ClickPrompt
from ..services.export import ExportError
from ..services.export import export_note as run_export
from ._common import ExporterCliError, get_app, lookup_note


@click.command(name="export")
@click.argument("note")
@click.option(
    "--rename/--keep-names",
    "rename_images",
    default=None,
    help="Rename images to image01, image02, ... (asked when omitted).",
)
@click.option(
    "--style/--no-style",
    "insert_style",
    default=None,
    help="Insert an image size style directive (asked when omitted).",
)
@click.option(
    "--line-breaks/--no-line-breaks",
    "insert_line_breaks",
    default=None,
    help="End prose lines with two spaces (asked when omitted).",
)
@click.option(
    "-y",
    "--yes",
    "assume_defaults",
    is_flag=True,
    help="Do not ask; use defaults for options not given.",
)
@click.option(
    "-d",
    "--dest",
    "destination",
    type=click.Path(path_type=Path, file_okay=False),
    required=False,
    help="Export root directory (defaults to the configured export_dir).",
)
@click.pass_context
def export(
    ctx: click.Context,
    note: str,
    rename_images: bool | None,
    insert_style: bool | None,
    insert_line_breaks: bool | None,
    assume_defaults: bool,
    destination: Path | None,
) -> None:
    """Export NOTE with its linked notes and images.

    NOTE is a vault path, a file path inside the vault, or a note name.
    """

    app = get_app(ctx)

    if destination is not None and destination.exists() and destination.is_file():
        raise ExporterCliError("Destination must be a directory path.")

    note_file = lookup_note(app, note)

    prompt = ClickPrompt(
        rename_images=rename_images,
        insert_style=insert_style,
        insert_line_breaks=insert_line_breaks,
        assume_defaults=assume_defaults,
    )

    try:
        count = run_export(
            app.config,
            app.vault,
            note_file,
            prompt=prompt,
            notify=click.echo,
            destination_root=destination,
        )
    except ExportError as exc:
        raise ExporterCliError(str(exc)) from exc

    root = destination or app.config.export_root
    click.echo(f"Exported {count} notes to {root / note_file.basename}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(export)

"""Info command for the mdexporter CLI."""

from __future__ import annotations

from typing import Sequence

import click

from ..config import ExporterConfig
from ..plugins import RESOLVE_IMAGE, RESOLVE_NOTE, ResolverContribution
from ..services.export import ExportError
from ..services.export import get_resolver_chains
from ._common import ExporterCliError, get_app


@click.command(name="info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display vault information and the effective configuration."""

    app = get_app(ctx)
    config: ExporterConfig = app.config

    try:
        chains = get_resolver_chains(config)
    except ExportError as exc:
        raise ExporterCliError(str(exc)) from exc

    files = app.vault.list_all()
    notes = sum(1 for f in files if f.extension.lower() == "md")

    click.echo("mdexporter vault info:\n")
    click.echo(f"  Vault         : {config.vault_dir}")
    click.echo(f"  Notes         : {notes}")
    click.echo(f"  Other files   : {len(files) - notes}")
    click.echo(f"  Export root   : {config.export_root}")
    click.echo(f"  Image lookup  : {_chain_names(chains[RESOLVE_IMAGE])}")
    click.echo(f"  Note lookup   : {_chain_names(chains[RESOLVE_NOTE])}")
    click.echo("\nConfiguration:\n")
    click.echo(_format_config(config))


def _chain_names(chain: Sequence[ResolverContribution]) -> str:
    return " -> ".join(item.name for item in chain) or "(none)"


def _format_config(config: ExporterConfig) -> str:
    def quote(value: str | None) -> str:
        if value is None:
            return '""'
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'

    lines = [
        "[mdexporter]",
        f"vault_dir = {quote(str(config.vault_dir))}",
        f"export_dir = {quote(config.export_dir)}",
        f"image_dir = {quote(config.image_dir)}",
        f"link_style = {quote(config.link_style)}",
        f"compatibility_formatting = {'true' if config.compatibility_formatting else 'false'}",
    ]
    return "\n".join(lines)


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(info)

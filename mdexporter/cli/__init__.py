"""mdexporter CLI package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from ..logging_config import setup_logging
from . import config_cmd, export_cmd, info, links
from ._common import CONTEXT_SETTINGS, ExporterCliError

__all__ = ["cli", "main", "ExporterCliError"]


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path_opt",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration TOML file.",
)
@click.option(
    "--vault",
    "vault_opt",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Vault directory (overrides the configured one).",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path_opt: Path | None,
    vault_opt: Path | None,
    verbose: int,
) -> None:
    """Export markdown notes together with linked notes and images."""

    ctx.ensure_object(dict)
    invoked = ctx.invoked_subcommand

    if invoked is None:
        click.echo(ctx.command.get_help(ctx))
        ctx.exit(0)

    setup_logging(verbose)
    ctx.obj["config_path"] = config_path_opt
    ctx.obj["vault_dir"] = vault_opt


for register_command in (
    export_cmd.register,
    links.register,
    config_cmd.register,
    info.register,
):
    register_command(cli)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="md-export", standalone_mode=False) or 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return int(exc.code or 0)

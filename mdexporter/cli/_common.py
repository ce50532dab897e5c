"""Shared helpers for mdexporter CLI commands."""

from __future__ import annotations

from typing import Any

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError, MissingConfigError
from ..services.export import find_note
from ..vault import VaultError, VaultFile

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}

MISSING_CONFIG_HINT = "Configuration not found. Run 'md-export config' once or pass --vault."


class ExporterCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Bootstrap the application once per invocation and cache it on ``ctx.obj``."""

    if "app" not in ctx.obj:
        try:
            ctx.obj["app"] = bootstrap(
                ctx.obj.get("config_path"), vault_dir=ctx.obj.get("vault_dir")
            )
        except MissingConfigError as exc:
            raise ExporterCliError(MISSING_CONFIG_HINT) from exc
        except (ConfigError, VaultError) as exc:
            raise ExporterCliError(str(exc)) from exc
    return ctx.obj["app"]


def lookup_note(app: AppContext, reference: str) -> VaultFile:
    """Find the note named on the command line or fail with a CLI error."""

    try:
        return find_note(app.vault, reference)
    except VaultError as exc:
        raise ExporterCliError(str(exc)) from exc

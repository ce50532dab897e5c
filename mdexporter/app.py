"""Application bootstrap and context container for mdexporter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import ExporterConfig, MissingConfigError, default_config, load_config
from .vault import Vault


@dataclass(slots=True)
class AppContext:
    """Aggregates core services for the CLI lifecycle."""

    config: ExporterConfig
    vault: Vault


def open_vault(config: ExporterConfig) -> Vault:
    """Return the vault for ``config``, hiding the export root when it lives inside."""

    return Vault(config.vault_dir).hiding(config.export_root)


def bootstrap(config_path: Path | None, *, vault_dir: Path | None = None) -> AppContext:
    """Load configuration and open the vault.

    A missing configuration file is tolerated when ``vault_dir`` is given; the
    defaults are used for every other setting.
    """

    # Defer error mapping to the CLI, which knows how to present messages.
    try:
        config = load_config(config_path)
    except MissingConfigError:
        if vault_dir is None:
            raise
        config = default_config(vault_dir)
    else:
        if vault_dir is not None:
            config.vault_dir = vault_dir.expanduser().resolve()

    vault = open_vault(config)
    vault.ensure_exists()
    return AppContext(config=config, vault=vault)

from __future__ import annotations

from pathlib import Path

import pytest
from mdexporter.app import bootstrap, open_vault
from mdexporter.config import MissingConfigError, default_config
from mdexporter.vault import VaultError


def test_open_vault_hides_export_root_inside_vault(make_vault) -> None:
    root = make_vault({"Title.md": "x\n", "export/Title/Title.md": "old\n"})

    vault = open_vault(default_config(root))

    assert [f.path for f in vault.list_all()] == ["Title.md"]
    assert vault.resolve("export/Title/Title.md") is None


def test_open_vault_keeps_everything_when_export_root_is_outside(make_vault, tmp_path: Path) -> None:
    root = make_vault({"Title.md": "x\n", "export/keep.md": "y\n"})
    config = default_config(root)
    config.export_dir = str(tmp_path / "out")

    vault = open_vault(config)

    assert [f.path for f in vault.list_all()] == ["Title.md", "export/keep.md"]


def test_bootstrap_without_config_needs_vault(tmp_path: Path, make_vault) -> None:
    missing = tmp_path / "missing.toml"
    root = make_vault({"Title.md": "x\n"})

    with pytest.raises(MissingConfigError):
        bootstrap(missing)

    app = bootstrap(missing, vault_dir=root)
    assert app.config.vault_dir == root.resolve()
    assert app.config.source_path is None


def test_bootstrap_vault_overrides_config(tmp_path: Path, make_vault) -> None:
    root = make_vault({"Title.md": "x\n"})
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[mdexporter]\nvault_dir = "/nonexistent/vault"\nimage_dir = "pics"\n',
        encoding="utf-8",
    )

    app = bootstrap(config_path, vault_dir=root)

    assert app.config.vault_dir == root.resolve()
    assert app.config.image_dir == "pics"
    assert app.config.source_path == config_path


def test_bootstrap_rejects_missing_vault_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('[mdexporter]\nvault_dir = "absent"\n', encoding="utf-8")

    with pytest.raises(VaultError, match="Vault directory not found"):
        bootstrap(config_path)

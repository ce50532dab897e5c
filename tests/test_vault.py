"""Tests for the filesystem-backed vault."""

from __future__ import annotations

from pathlib import Path

import pytest
from mdexporter.vault import Vault, VaultError, normalize_vault_path


def test_resolve_returns_file_metadata(make_vault) -> None:
    root = make_vault({"sub/pic.png": b"data"})
    vault = Vault(root)

    found = vault.resolve("sub/pic.png")

    assert found is not None
    assert found.path == "sub/pic.png"
    assert found.name == "pic.png"
    assert found.basename == "pic"
    assert found.extension == "png"
    assert found.parent == "sub"
    assert found.location == root / "sub" / "pic.png"


def test_resolve_normalizes_and_rejects_escapes(make_vault) -> None:
    root = make_vault({"pic.png": b"data", "notes/Note.md": "x"})
    vault = Vault(root)

    assert vault.resolve("./notes/../pic.png").path == "pic.png"
    assert vault.resolve("/notes/Note.md").path == "notes/Note.md"
    assert vault.resolve("../pic.png") is None
    assert vault.resolve("notes") is None
    assert vault.resolve("missing.png") is None


def test_normalize_vault_path() -> None:
    assert normalize_vault_path("a\\b.png") == "a/b.png"
    assert normalize_vault_path("./a/./b.png") == "a/b.png"
    assert normalize_vault_path("..") is None
    assert normalize_vault_path("") is None


def test_list_all_is_sorted_and_skips_hidden_and_excluded(make_vault) -> None:
    root = make_vault(
        {
            "b.md": "b",
            "a/z.png": b"z",
            "a/c.md": "c",
            ".obsidian/app.json": "{}",
            "export/Old/Old.md": "old",
        }
    )
    vault = Vault(root, exclude=["export"])

    paths = [f.path for f in vault.list_all()]

    assert paths == ["a/c.md", "a/z.png", "b.md"]
    assert vault.resolve("export/Old/Old.md") is None
    assert vault.resolve(".obsidian/app.json") is None


def test_list_all_is_cached_until_refresh(make_vault) -> None:
    root = make_vault({"a.md": "a"})
    vault = Vault(root)
    assert [f.path for f in vault.list_all()] == ["a.md"]

    (root / "b.md").write_text("b", encoding="utf-8")
    assert [f.path for f in vault.list_all()] == ["a.md"]

    vault.refresh()
    assert [f.path for f in vault.list_all()] == ["a.md", "b.md"]


def test_read_text_and_binary(make_vault) -> None:
    root = make_vault({"Note.md": "héllo", "pic.png": b"\x89PNG"})
    vault = Vault(root)

    assert vault.read_text(vault.resolve("Note.md")) == "héllo"
    assert vault.read_binary(vault.resolve("pic.png")) == b"\x89PNG"


def test_read_binary_returns_none_for_vanished_file(make_vault) -> None:
    root = make_vault({"pic.png": b"data"})
    vault = Vault(root)
    found = vault.resolve("pic.png")
    (root / "pic.png").unlink()

    assert vault.read_binary(found) is None


def test_read_text_wraps_decode_errors(make_vault) -> None:
    root = make_vault({"Broken.md": b"\xff\xfe\xfa"})
    vault = Vault(root)

    with pytest.raises(VaultError):
        vault.read_text(vault.resolve("Broken.md"))


def test_ensure_exists_requires_directory(tmp_path) -> None:
    with pytest.raises(VaultError):
        Vault(tmp_path / "nope").ensure_exists()


def test_hiding_excludes_directories_inside_the_root(make_vault, tmp_path: Path) -> None:
    root = make_vault({"Title.md": "x\n", "dest/Title/Title.md": "copy\n"})
    vault = Vault(root)

    hidden = vault.hiding(root / "dest")

    assert [f.path for f in hidden.list_all()] == ["Title.md"]
    assert hidden.resolve("dest/Title/Title.md") is None
    assert vault.resolve("dest/Title/Title.md") is not None
    assert vault.hiding(tmp_path / "elsewhere") is vault
    assert vault.hiding(root) is vault

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

import pytest
from mdexporter.plugins import manager as plugin_manager

VaultFactory = Callable[[Mapping[str, str | bytes]], Path]


@pytest.fixture(autouse=True)
def reset_plugin_registry() -> None:
    """Ensure plugin discovery cache is cleared between tests."""

    plugin_manager.reset_plugin_manager_cache()
    yield
    plugin_manager.reset_plugin_manager_cache()


@pytest.fixture
def make_vault(tmp_path: Path) -> VaultFactory:
    """Return a helper writing ``{vault path: content}`` into a fresh vault."""

    root = tmp_path / "vault"

    def _make(files: Mapping[str, str | bytes]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return root

    return _make

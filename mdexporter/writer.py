"""Filesystem primitives used by the export walker."""

from __future__ import annotations

from pathlib import Path


class FileSystemWriter:
    """Create directories and write files beneath the export destination.

    Errors are left as :class:`OSError` so callers decide which failures abort
    the current note and which are only reported.
    """

    def ensure_dir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        path.write_text(content, encoding=encoding)

    def write_binary(self, path: Path, data: bytes) -> None:
        path.write_bytes(data)


__all__ = ["FileSystemWriter"]

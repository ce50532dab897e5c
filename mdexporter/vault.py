"""Filesystem-backed content store for notes and their assets."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable


class VaultError(RuntimeError):
    """Raised when interacting with the vault directory fails."""


@dataclass(slots=True, frozen=True)
class VaultFile:
    """A file stored in the vault, addressed by its vault-relative path."""

    path: str
    location: Path

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def basename(self) -> str:
        return PurePosixPath(self.path).stem

    @property
    def extension(self) -> str:
        return PurePosixPath(self.path).suffix.lstrip(".")

    @property
    def parent(self) -> str:
        return posixpath.dirname(self.path)


def normalize_vault_path(path: str) -> str | None:
    """Return ``path`` as a normalized vault-relative POSIX path.

    ``None`` is returned for paths that point at the vault root itself or
    escape it.
    """

    candidate = path.replace("\\", "/").strip()
    if not candidate:
        return None
    normalized = posixpath.normpath(candidate).lstrip("/")
    if normalized in ("", ".", "..") or normalized.startswith("../"):
        return None
    return normalized


class Vault:
    """Read-only view over a directory of notes and attachments.

    Hidden entries (dot files and dot directories such as ``.obsidian``) and
    the ``exclude`` prefixes are invisible to lookups and listings.
    """

    def __init__(self, root: Path | str, *, exclude: Iterable[str] = ()) -> None:
        self.root = Path(root).expanduser()
        self._exclude = tuple(
            prefix for prefix in (normalize_vault_path(p) for p in exclude) if prefix
        )
        self._files: list[VaultFile] | None = None

    def hiding(self, directory: Path) -> Vault:
        """Return a vault that also hides ``directory`` when it lies inside the root.

        The same vault is returned when ``directory`` is outside the root, is the
        root itself, or is already hidden.
        """

        try:
            inside = directory.expanduser().resolve().relative_to(self.root.resolve())
        except ValueError:
            return self
        prefix = inside.as_posix()
        if not inside.parts or prefix in self._exclude:
            return self
        return Vault(self.root, exclude=(*self._exclude, prefix))

    def ensure_exists(self) -> None:
        if not self.root.is_dir():
            raise VaultError(f"Vault directory not found: {self.root}")

    def resolve(self, path: str) -> VaultFile | None:
        """Return the file stored at ``path`` or ``None`` when there is none."""

        normalized = normalize_vault_path(path)
        if normalized is None or self._is_hidden(normalized):
            return None
        location = self.root.joinpath(*normalized.split("/"))
        if not location.is_file():
            return None
        return VaultFile(path=normalized, location=location)

    def read_text(self, file: VaultFile) -> str:
        try:
            return file.location.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise VaultError(f"Failed to read {file.path}: {exc}") from exc

    def read_binary(self, file: VaultFile) -> bytes | None:
        try:
            return file.location.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise VaultError(f"Failed to read {file.path}: {exc}") from exc

    def list_all(self) -> list[VaultFile]:
        """Return every visible file, ordered by vault path."""

        if self._files is None:
            self._files = sorted(self._walk(), key=lambda f: f.path)
        return list(self._files)

    def refresh(self) -> None:
        """Drop the cached listing so the next call rescans the directory."""

        self._files = None

    def _walk(self) -> Iterable[VaultFile]:
        for dirpath, dirnames, filenames in os.walk(self.root):
            rel_dir = Path(dirpath).relative_to(self.root).as_posix()
            prefix = "" if rel_dir == "." else f"{rel_dir}/"
            dirnames[:] = [
                d for d in dirnames if not self._is_hidden(f"{prefix}{d}")
            ]
            for filename in filenames:
                rel = f"{prefix}{filename}"
                if self._is_hidden(rel):
                    continue
                yield VaultFile(path=rel, location=Path(dirpath) / filename)

    def _is_hidden(self, rel: str) -> bool:
        if any(part.startswith(".") for part in rel.split("/")):
            return True
        return any(rel == prefix or rel.startswith(f"{prefix}/") for prefix in self._exclude)


__all__ = ["Vault", "VaultError", "VaultFile", "normalize_vault_path"]

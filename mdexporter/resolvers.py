"""Resolution strategies mapping raw link references to vault files."""

from __future__ import annotations

import logging
from typing import Sequence

from .links import split_target
from .plugins.types import ResolverContribution
from .vault import Vault, VaultFile

logger = logging.getLogger(__name__)

# Probed in order; "" is the vault root.
CONVENTIONAL_DIRS = ("", "attachments", "Assets", "asset", "images", "image")

NOTE_SUFFIX = ".md"


def _join(directory: str, name: str) -> str:
    return f"{directory}/{name}" if directory else name


def _note_target(reference: str) -> str:
    target = split_target(reference)
    if target.lower().endswith(NOTE_SUFFIX):
        return target[: -len(NOTE_SUFFIX)]
    return target


# ---------------------------------------------------------------------------
# Image strategies
# ---------------------------------------------------------------------------
def image_by_path(vault: Vault, reference: str, origin: VaultFile) -> VaultFile | None:
    """Look up references such as ``assets/pic.png`` or ``./pic.png`` directly."""

    target = split_target(reference)
    if "/" in target or target.startswith("."):
        return vault.resolve(target)
    return None


def image_near_note(vault: Vault, reference: str, origin: VaultFile) -> VaultFile | None:
    """Search the referencing note's folder, then each of its parent folders."""

    target = split_target(reference)
    if "/" in target or not origin.parent:
        return None
    parts = origin.parent.split("/")
    while parts:
        found = vault.resolve("/".join([*parts, target]))
        if found is not None:
            return found
        parts.pop()
    return None


def image_in_conventional_dirs(
    vault: Vault, reference: str, origin: VaultFile
) -> VaultFile | None:
    target = split_target(reference)
    for directory in CONVENTIONAL_DIRS:
        found = vault.resolve(_join(directory, target))
        if found is not None:
            return found
    return None


def image_by_filename(vault: Vault, reference: str, origin: VaultFile) -> VaultFile | None:
    target = split_target(reference)
    return next((f for f in vault.list_all() if f.name == target), None)


# ---------------------------------------------------------------------------
# Note strategies
# ---------------------------------------------------------------------------
def note_by_path(vault: Vault, reference: str, origin: VaultFile) -> VaultFile | None:
    return vault.resolve(_note_target(reference) + NOTE_SUFFIX)


def note_in_conventional_dirs(
    vault: Vault, reference: str, origin: VaultFile
) -> VaultFile | None:
    target = _note_target(reference)
    for directory in CONVENTIONAL_DIRS:
        if not directory:
            continue
        found = vault.resolve(_join(directory, target + NOTE_SUFFIX))
        if found is not None:
            return found
    return None


def note_by_basename(vault: Vault, reference: str, origin: VaultFile) -> VaultFile | None:
    target = _note_target(reference)
    return next(
        (
            f
            for f in vault.list_all()
            if f.extension.lower() == "md" and f.basename == target
        ),
        None,
    )


def resolve_reference(
    chain: Sequence[ResolverContribution],
    vault: Vault,
    reference: str,
    origin: VaultFile,
) -> VaultFile | None:
    """Run ``chain`` in order and return the first match."""

    for strategy in chain:
        found = strategy.resolve(vault, reference, origin)
        if found is not None:
            logger.debug("Resolved %r via %s -> %s", reference, strategy.name, found.path)
            return found
    return None


__all__ = [
    "CONVENTIONAL_DIRS",
    "image_by_filename",
    "image_by_path",
    "image_in_conventional_dirs",
    "image_near_note",
    "note_by_basename",
    "note_by_path",
    "note_in_conventional_dirs",
    "resolve_reference",
]

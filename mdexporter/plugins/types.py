"""Type definitions for mdexporter plugin contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - type check only
    from ..vault import Vault, VaultFile

RESOLVE_IMAGE = "image"
RESOLVE_NOTE = "note"
RESOLVER_KINDS = (RESOLVE_IMAGE, RESOLVE_NOTE)


class ResolveHandler(Protocol):
    """Callable that maps a raw reference to a stored file."""

    def __call__(
        self,
        vault: "Vault",
        reference: str,
        origin: "VaultFile",
    ) -> "VaultFile | None":  # pragma: no cover - Protocol
        """Return the matching file, or ``None`` to let the next strategy try."""


@dataclass(slots=True, frozen=True)
class ResolverContribution:
    """Descriptor for one resolution strategy provided by a plugin.

    Strategies of the same ``kind`` run in ascending ``priority``. Built-in
    strategies use priorities below 100.
    """

    kind: str
    name: str
    resolve: ResolveHandler
    priority: int = 100

"""Built-in resolution strategies for images and linked notes."""

from __future__ import annotations

from mdexporter import resolvers as strategies
from mdexporter.config import ExporterConfig
from mdexporter.plugins import RESOLVE_IMAGE, RESOLVE_NOTE, ResolverContribution, hookimpl


@hookimpl
def resolvers(config: ExporterConfig) -> tuple[ResolverContribution, ...]:
    """Expose the default lookup order as plugin contributions."""

    _ = config  # built-in strategies have no settings
    return (
        ResolverContribution(RESOLVE_IMAGE, "path", strategies.image_by_path, 10),
        ResolverContribution(RESOLVE_IMAGE, "near-note", strategies.image_near_note, 20),
        ResolverContribution(
            RESOLVE_IMAGE, "conventional-dirs", strategies.image_in_conventional_dirs, 30
        ),
        ResolverContribution(RESOLVE_IMAGE, "filename", strategies.image_by_filename, 40),
        ResolverContribution(RESOLVE_NOTE, "path", strategies.note_by_path, 10),
        ResolverContribution(
            RESOLVE_NOTE, "conventional-dirs", strategies.note_in_conventional_dirs, 30
        ),
        ResolverContribution(RESOLVE_NOTE, "basename", strategies.note_by_basename, 40),
    )


__all__ = ["resolvers"]

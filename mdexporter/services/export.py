"""Export services for mdexporter."""

from __future__ import annotations

from pathlib import Path

from ..config import ExporterConfig
from ..links import LinkSet, extract_links
from ..plugins import (
    RESOLVE_IMAGE,
    RESOLVE_NOTE,
    PluginRegistrationError,
    ResolverContribution,
    load_resolver_chains,
    reset_plugin_manager_cache,
)
from ..prompts import ConfirmPrompt, ExportOptions
from ..vault import Vault, VaultError, VaultFile
from ..walker import ExportContext, ExportWalker, Notifier
from ..writer import FileSystemWriter


class ExportError(RuntimeError):
    """Raised when an export cannot be started."""


def clear_resolver_registry_cache() -> None:
    """Reset cached resolver discovery (primarily for testing)."""

    reset_plugin_manager_cache()


def get_resolver_chains(
    config: ExporterConfig,
) -> dict[str, tuple[ResolverContribution, ...]]:
    try:
        return load_resolver_chains(config)
    except PluginRegistrationError as exc:
        raise ExportError(str(exc)) from exc


def find_note(vault: Vault, reference: str) -> VaultFile:
    """Locate the note to export from a vault path, a file path or a note name."""

    candidates = [reference]
    on_disk = Path(reference).expanduser().resolve()
    vault_root = vault.root.resolve()
    if on_disk.is_file() and on_disk.is_relative_to(vault_root):
        candidates.insert(0, on_disk.relative_to(vault_root).as_posix())

    for candidate in candidates:
        for path in (candidate, f"{candidate}.md"):
            found = vault.resolve(path)
            if found is not None and found.extension.lower() == "md":
                return found

    for file in vault.list_all():
        if file.extension.lower() == "md" and file.basename == reference:
            return file

    raise VaultError(f"Note '{reference}' not found.")


def collect_links(vault: Vault, note: VaultFile) -> LinkSet:
    """Return the images and notes referenced by ``note``."""

    return extract_links(vault.read_text(note))


def build_context(
    config: ExporterConfig,
    options: ExportOptions,
    *,
    destination_root: Path | None = None,
) -> ExportContext:
    formatting = config.compatibility_formatting
    return ExportContext(
        destination_root=destination_root or config.export_root,
        rename_images=options.rename_images,
        insert_style=formatting and options.insert_style,
        insert_line_breaks=formatting and options.insert_line_breaks,
        image_dir=config.image_dir,
        link_style=config.link_style,
        compatibility_formatting=formatting,
    )


def export_note(
    config: ExporterConfig,
    vault: Vault,
    note: VaultFile,
    *,
    prompt: ConfirmPrompt,
    notify: Notifier | None = None,
    destination_root: Path | None = None,
    writer: FileSystemWriter | None = None,
) -> int:
    """Export ``note`` and everything it links to.

    The prompt is asked once before anything is written. Returns the number
    of notes visited.
    """

    chains = get_resolver_chains(config)
    try:
        text = vault.read_text(note)
    except VaultError as exc:
        raise ExportError(str(exc)) from exc

    options = prompt(compatibility=config.compatibility_formatting)
    context = build_context(config, options, destination_root=destination_root)

    walker = ExportWalker(
        # Earlier exports under the destination must not be resolved as sources.
        vault.hiding(context.destination_root),
        image_resolvers=chains[RESOLVE_IMAGE],
        note_resolvers=chains[RESOLVE_NOTE],
        notify=notify,
        writer=writer,
    )
    walker.export_with_links(
        note,
        text,
        extract_links(text),
        context.destination_root / note.basename,
        context,
    )
    return len(context.visited)

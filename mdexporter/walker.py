"""Recursive export of a note, its images and the notes it links to."""

from __future__ import annotations

import logging
import posixpath
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping, Sequence

from .config import DEFAULT_IMAGE_DIRNAME, LINK_STYLE_ABSOLUTE, LINK_STYLE_RELATIVE
from .formatting import apply_compatibility_formatting
from .links import LinkSet, extract_links, safe_decode, split_target
from .plugins.types import ResolverContribution
from .resolvers import resolve_reference
from .vault import Vault, VaultError, VaultFile, normalize_vault_path
from .writer import FileSystemWriter

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]

DEFAULT_IMAGE_EXTENSION = ".png"

_EMBED_RE = re.compile(r"!\[\[(.+?)\]\]|!\[[^\]]*\]\(([^\)]+)\)")


@dataclass(slots=True)
class ExportContext:
    """Settings and shared state for one export traversal.

    ``visited`` holds the vault paths of notes already exported. The same set
    object is passed down every recursive call.
    """

    destination_root: Path
    rename_images: bool = True
    insert_style: bool = False
    insert_line_breaks: bool = False
    image_dir: str = DEFAULT_IMAGE_DIRNAME
    link_style: str = LINK_STYLE_RELATIVE
    compatibility_formatting: bool = True
    visited: set[str] = field(default_factory=set)

    @property
    def image_link_prefix(self) -> str:
        root = "/" if self.link_style == LINK_STYLE_ABSOLUTE else "./"
        return f"{root}{self.image_dir}/"


def assign_image_names(images: Sequence[str], *, rename: bool) -> dict[str, str]:
    """Map each image reference to the filename it is exported under.

    Renamed images are numbered ``image01``, ``image02``... in the order given,
    keeping their extension (``.png`` when there is none).
    """

    names: dict[str, str] = {}
    for index, reference in enumerate(images, start=1):
        if rename:
            ext = posixpath.splitext(split_target(reference))[1] or DEFAULT_IMAGE_EXTENSION
            names[reference] = f"image{index:02d}{ext}"
        else:
            names[reference] = reference
    return names


def rewrite_image_links(text: str, names: Mapping[str, str], prefix: str) -> str:
    """Point every embed of a mapped image at ``prefix + new name``.

    Wiki embeds and standard embeds are both rewritten to the standard
    ``![](...)`` form. Standard embed targets match either verbatim or after
    percent-decoding.
    """

    def replace(match: re.Match[str]) -> str:
        wiki_target, md_target = match.group(1), match.group(2)
        if wiki_target is not None:
            reference = wiki_target
        elif md_target in names:
            reference = md_target
        else:
            reference = safe_decode(md_target)
        name = names.get(reference)
        if name is None:
            return match.group(0)
        return f"![]({prefix}{name})"

    return _EMBED_RE.sub(replace, text)


class ExportWalker:
    """Materialize a note and everything it links to under a destination.

    Problems with single images or links are reported through ``notify`` and
    skipped; nothing raised while exporting reaches the caller.
    """

    def __init__(
        self,
        vault: Vault,
        *,
        image_resolvers: Sequence[ResolverContribution],
        note_resolvers: Sequence[ResolverContribution],
        notify: Notifier | None = None,
        writer: FileSystemWriter | None = None,
    ) -> None:
        self.vault = vault
        self.image_resolvers = tuple(image_resolvers)
        self.note_resolvers = tuple(note_resolvers)
        self.notify = notify
        self.writer = writer or FileSystemWriter()

    def export_with_links(
        self,
        note: VaultFile,
        text: str,
        links: LinkSet,
        destination: Path,
        context: ExportContext,
    ) -> None:
        if note.path in context.visited:
            logger.debug("Skipping already exported note %s", note.path)
            return
        context.visited.add(note.path)

        try:
            self._export_note(note, text, links, destination, context)
        except (OSError, VaultError) as exc:
            self._report(f"Export failed: {exc}", logging.ERROR)
            return
        except Exception as exc:  # pragma: no cover
            logger.exception("Unexpected error exporting %s", note.path)
            self._report(f"Export failed: {exc}", logging.ERROR)
            return

        self._report(f"Export completed: {note.path}")

    def _export_note(
        self,
        note: VaultFile,
        text: str,
        links: LinkSet,
        destination: Path,
        context: ExportContext,
    ) -> None:
        self.writer.ensure_dir(destination)
        out_path = destination / f"{note.basename}.md"
        self.writer.write_text(out_path, text, "utf-8")

        names = assign_image_names(links.images, rename=context.rename_images)
        image_root = destination / context.image_dir
        # Only copied images are relinked; others keep their original embed.
        copied = {
            reference: names[reference]
            for reference in links.images
            if self._copy_image(note, reference, names[reference], image_root, context)
        }

        content = rewrite_image_links(text, copied, context.image_link_prefix)
        if context.compatibility_formatting:
            content = apply_compatibility_formatting(
                content,
                insert_style=context.insert_style,
                insert_line_breaks=context.insert_line_breaks,
            )
        self.writer.write_text(out_path, content, "utf-8")

        for link in links.md_files:
            self._export_linked_note(note, link, destination, context)

    def _copy_image(
        self,
        note: VaultFile,
        reference: str,
        name: str,
        image_root: Path,
        context: ExportContext,
    ) -> bool:
        """Copy one image into ``image_root``; return whether it was written."""

        image = resolve_reference(self.image_resolvers, self.vault, reference, note)
        if image is None:
            self._report(f"Image file not found: {reference}", logging.WARNING)
            return False

        relative = normalize_vault_path(name)
        if relative is None:
            self._report(f"Image export failed: invalid file name {name!r}", logging.WARNING)
            return False
        out_path = image_root.joinpath(*relative.split("/"))

        self._report(f"Copying image file: {image.path} -> {context.image_dir}/{name}")
        try:
            data = self.vault.read_binary(image)
            if not data:
                self._report(f"Image export failed: {image.path} is empty.", logging.WARNING)
                return False
            self.writer.ensure_dir(out_path.parent)
            self.writer.write_binary(out_path, data)
        except (OSError, VaultError) as exc:
            self._report(f"Image export failed: {exc}", logging.WARNING)
            return False
        return True

    def _export_linked_note(
        self,
        note: VaultFile,
        link: str,
        destination: Path,
        context: ExportContext,
    ) -> None:
        linked = resolve_reference(self.note_resolvers, self.vault, link, note)
        if linked is None:
            self._report(f"Linked note not found: {link}.md", logging.WARNING)
            return
        if linked.path in context.visited:
            logger.debug("Linked note %s already exported", linked.path)
            return

        self._report(f"Exporting linked note: {link}.md")
        try:
            linked_text = self.vault.read_text(linked)
        except VaultError as exc:
            self._report(f"Linked note export failed: {exc}", logging.WARNING)
            return

        subdir = normalize_vault_path(split_target(link)) or linked.basename
        self.export_with_links(
            linked,
            linked_text,
            extract_links(linked_text),
            destination.joinpath(*subdir.split("/")),
            context,
        )

    def _report(self, message: str, level: int = logging.INFO) -> None:
        # With a notifier attached the user already sees the message.
        if self.notify is None:
            logger.log(level, message)
            return
        logger.debug(message)
        self.notify(message)


__all__ = [
    "ExportContext",
    "ExportWalker",
    "Notifier",
    "assign_image_names",
    "rewrite_image_links",
]

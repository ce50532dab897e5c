"""Link extraction for markdown notes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable
from urllib.parse import unquote_to_bytes

IMAGE_EXTENSIONS = (".png", ".jpg")

_WIKI_EMBED_RE = re.compile(r"!\[\[(.+?)\]\]")
_MD_EMBED_RE = re.compile(r"!\[[^\]]*\]\(([^\)]+)\)")
_WIKI_LINK_RE = re.compile(r"\[\[(.+?)\]\]")


@dataclass(slots=True, frozen=True)
class LinkSet:
    """Images and notes referenced by a note, in first-seen order."""

    images: tuple[str, ...] = ()
    md_files: tuple[str, ...] = ()


def safe_decode(value: str) -> str:
    """Percent-decode ``value``, returning it unchanged when malformed.

    A ``%`` that does not start a two-digit hex escape, or escapes that do not
    form valid UTF-8, count as malformed.
    """

    if "%" not in value:
        return value
    if re.search(r"%(?![0-9A-Fa-f]{2})", value):
        return value
    try:
        return unquote_to_bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        return value


def split_target(reference: str) -> str:
    """Return the file part of ``target#heading|alias`` references."""

    target = reference.split("|", 1)[0]
    target = target.split("#", 1)[0]
    return target.strip() or reference


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return tuple(ordered)


def _is_image_reference(reference: str) -> bool:
    return reference.endswith(IMAGE_EXTENSIONS)


def extract_links(text: str) -> LinkSet:
    """Scan ``text`` for referenced images and notes.

    Rules:
    - ``![[target]]`` and ``![alt](target)`` are images; standard embed
      targets are percent-decoded.
    - Images are de-duplicated in order of their position in the text.
    - ``[[target]]`` is a note link unless the target ends in ``.png`` or
      ``.jpg``.
    """

    content = text or ""
    positioned = [(m.start(), m.group(1)) for m in _WIKI_EMBED_RE.finditer(content)]
    positioned.extend(
        (m.start(), safe_decode(m.group(1))) for m in _MD_EMBED_RE.finditer(content)
    )
    positioned.sort(key=lambda item: item[0])
    note_links = [
        m.group(1)
        for m in _WIKI_LINK_RE.finditer(content)
        if not _is_image_reference(split_target(m.group(1)))
    ]
    return LinkSet(
        images=_unique(value for _, value in positioned),
        md_files=_unique(note_links),
    )


__all__ = ["IMAGE_EXTENSIONS", "LinkSet", "extract_links", "safe_decode", "split_target"]

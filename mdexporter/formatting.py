"""Compatibility formatting applied to exported notes.

Some renderers only break lines that end with two spaces and do not constrain
image sizes. This stage normalizes front matter line endings, can add hard
line breaks to prose lines, and can prepend a style directive for images.
"""

from __future__ import annotations

import re

FRONTMATTER_DELIM = "---"
LINE_BREAK = "  "
STYLE_DIRECTIVE = "<style>img { max-width: 100%; max-height: 100%; }</style>"

_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_TABLE_RE = re.compile(r"^\s*\|")
_BULLET_RE = re.compile(r"^\s*[-*+]\s")
_ORDERED_RE = re.compile(r"^\s*\d+[.)]\s")


def split_frontmatter(text: str) -> tuple[list[str] | None, list[str]]:
    """Split ``text`` into front matter lines (delimiters included) and body lines.

    Front matter must open with a line that is exactly ``---`` and closes at
    the next line starting with ``---``. Without both, the whole text is body.
    """

    lines = text.replace("\r\n", "\n").split("\n")
    if lines[0] != FRONTMATTER_DELIM:
        return None, lines
    for index in range(1, len(lines)):
        if lines[index].startswith(FRONTMATTER_DELIM):
            return lines[: index + 1], lines[index + 1 :]
    return None, lines


def normalize_trailing_spaces(line: str) -> str:
    """End ``line`` with exactly two spaces, whatever whitespace it had."""

    return line.rstrip(" \t") + LINE_BREAK


def keeps_layout(line: str) -> bool:
    """True for lines whose markdown structure trailing spaces would disturb."""

    if not line.strip():
        return True
    return bool(
        _FENCE_RE.match(line)
        or _TABLE_RE.match(line)
        or _BULLET_RE.match(line)
        or _ORDERED_RE.match(line)
    )


def apply_compatibility_formatting(
    text: str,
    *,
    insert_style: bool = False,
    insert_line_breaks: bool = False,
) -> str:
    frontmatter, body = split_frontmatter(text)

    if frontmatter is not None:
        inner = [normalize_trailing_spaces(line) for line in frontmatter[1:-1]]
        frontmatter = [frontmatter[0], *inner, frontmatter[-1]]

    if insert_line_breaks:
        body = [line if keeps_layout(line) else normalize_trailing_spaces(line) for line in body]

    start = 0
    while start < len(body) and not body[start].strip():
        start += 1
    body = body[start:]

    parts: list[str] = []
    if frontmatter is not None:
        parts.append("\n".join(frontmatter))
    if insert_style:
        parts.append(STYLE_DIRECTIVE + LINE_BREAK)
    parts.append("\n".join(body))
    return "\n".join(parts)


__all__ = [
    "FRONTMATTER_DELIM",
    "LINE_BREAK",
    "STYLE_DIRECTIVE",
    "apply_compatibility_formatting",
    "keeps_layout",
    "normalize_trailing_spaces",
    "split_frontmatter",
]

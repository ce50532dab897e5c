"""Confirmation prompts asked once before an export starts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import click


@dataclass(slots=True, frozen=True)
class ExportOptions:
    """User choices for a single export run."""

    rename_images: bool = True
    insert_style: bool = False
    insert_line_breaks: bool = False


DEFAULT_OPTIONS = ExportOptions()


class ConfirmPrompt(Protocol):
    """Ask the user how the export should behave."""

    def __call__(self, *, compatibility: bool) -> ExportOptions:  # pragma: no cover - Protocol
        """Return the chosen options.

        When ``compatibility`` is false only the rename question applies and
        the formatting answers are ignored.
        """


class StaticPrompt:
    """Prompt that answers with fixed options without asking anything."""

    def __init__(self, options: ExportOptions = DEFAULT_OPTIONS) -> None:
        self.options = options

    def __call__(self, *, compatibility: bool) -> ExportOptions:
        if compatibility:
            return self.options
        return ExportOptions(rename_images=self.options.rename_images)


class ClickPrompt:
    """Ask on the terminal for every option not already decided by flags."""

    def __init__(
        self,
        *,
        rename_images: bool | None = None,
        insert_style: bool | None = None,
        insert_line_breaks: bool | None = None,
        assume_defaults: bool = False,
    ) -> None:
        self.rename_images = rename_images
        self.insert_style = insert_style
        self.insert_line_breaks = insert_line_breaks
        self.assume_defaults = assume_defaults

    def __call__(self, *, compatibility: bool) -> ExportOptions:
        rename = self._ask(
            self.rename_images,
            "Rename image files (image01, image02, ...)?",
            DEFAULT_OPTIONS.rename_images,
        )
        if not compatibility:
            return ExportOptions(rename_images=rename)

        insert_style = self._ask(
            self.insert_style,
            "Insert image size style?",
            DEFAULT_OPTIONS.insert_style,
        )
        insert_line_breaks = self._ask(
            self.insert_line_breaks,
            "Insert line breaks (two trailing spaces)?",
            DEFAULT_OPTIONS.insert_line_breaks,
        )
        return ExportOptions(
            rename_images=rename,
            insert_style=insert_style,
            insert_line_breaks=insert_line_breaks,
        )

    def _ask(self, preset: bool | None, question: str, default: bool) -> bool:
        if preset is not None:
            return preset
        if self.assume_defaults:
            return default
        return click.confirm(question, default=default)


__all__ = [
    "ClickPrompt",
    "ConfirmPrompt",
    "DEFAULT_OPTIONS",
    "ExportOptions",
    "StaticPrompt",
]

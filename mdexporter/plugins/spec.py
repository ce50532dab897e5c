"""Hook markers and specifications for mdexporter plugins.

Third-party packages expose a module under the ``mdexporter.plugins`` entry
point group; every ``@hookimpl resolvers(config)`` it defines contributes
lookup strategies for image embeds or note links.
"""

from __future__ import annotations

from collections.abc import Iterable

import pluggy

from mdexporter.config import ExporterConfig

from .types import ResolverContribution

PLUGIN_NAMESPACE = "mdexporter"
ENTRY_POINT_GROUP = "mdexporter.plugins"

hookspec = pluggy.HookspecMarker(PLUGIN_NAMESPACE)
hookimpl = pluggy.HookimplMarker(PLUGIN_NAMESPACE)


class ExporterHookSpec:
    @hookspec
    def resolvers(self, config: ExporterConfig) -> Iterable[ResolverContribution]:
        """Return image or note lookup strategies provided by the plugin."""


__all__ = [
    "ENTRY_POINT_GROUP",
    "ExporterHookSpec",
    "PLUGIN_NAMESPACE",
    "hookimpl",
    "hookspec",
]

"""mdexporter plugin infrastructure based on pluggy."""

from __future__ import annotations

from .spec import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    get_plugin_manager,
    load_resolver_chains,
    reset_plugin_manager_cache,
)
from .types import RESOLVE_IMAGE, RESOLVE_NOTE, ResolverContribution

__all__ = [
    "ENTRY_POINT_GROUP",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "RESOLVE_IMAGE",
    "RESOLVE_NOTE",
    "ResolverContribution",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "load_resolver_chains",
    "reset_plugin_manager_cache",
]

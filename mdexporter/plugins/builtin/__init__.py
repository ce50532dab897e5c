"""Built-in mdexporter plugins."""

from __future__ import annotations

from . import resolvers

BUILTIN_PLUGINS = (resolvers,)

__all__ = ["BUILTIN_PLUGINS"]

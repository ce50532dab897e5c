"""Plugin manager construction and resolver chain assembly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache

import pluggy

from ..config import ExporterConfig
from .spec import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, ExporterHookSpec
from .types import RESOLVER_KINDS, ResolverContribution

ResolverChains = dict[str, tuple[ResolverContribution, ...]]


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


@lru_cache(maxsize=1)
def _builtin_plugin_modules() -> tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(ExporterHookSpec)
    manager.load_setuptools_entrypoints(ENTRY_POINT_GROUP)

    for module in _builtin_plugin_modules():
        try:
            manager.register(module)
        except pluggy.PluginValidationError as exc:
            raise PluginRegistrationError(str(exc)) from exc
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the shared plugin manager, building it on first use."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Forget the shared manager so the next lookup registers plugins again."""

    _build_plugin_manager.cache_clear()


def load_resolver_chains(config: ExporterConfig) -> ResolverChains:
    """Return the lookup strategies of every kind, in ascending priority.

    Strategy names must be unique within a kind (case-insensitively). Equal
    priorities keep the order in which pluggy returned them.
    """

    chains: dict[str, list[ResolverContribution]] = {kind: [] for kind in RESOLVER_KINDS}
    for contribution in _collect(get_plugin_manager(), config):
        chain = chains[contribution.kind]
        name = contribution.name.lower()
        if any(existing.name.lower() == name for existing in chain):
            raise PluginRegistrationError(
                f"Duplicate {contribution.kind} resolver detected: '{contribution.name}'."
            )
        chain.append(contribution)

    return {
        kind: tuple(sorted(chain, key=lambda item: item.priority))
        for kind, chain in chains.items()
    }


def _collect(
    manager: pluggy.PluginManager, config: ExporterConfig
) -> Iterator[ResolverContribution]:
    for result in manager.hook.resolvers(config=config):
        if result is None:
            continue
        if isinstance(result, ResolverContribution):
            result = (result,)
        elif not isinstance(result, Iterable) or isinstance(result, (str, bytes)):
            raise PluginRegistrationError(
                "Plugin hook did not return an iterable contribution collection."
            )
        for item in result:
            yield _validated(item)


def _validated(item: object) -> ResolverContribution:
    if not isinstance(item, ResolverContribution):
        raise PluginRegistrationError(
            "Resolver contributions must be ResolverContribution instances."
        )
    if item.kind not in RESOLVER_KINDS:
        kinds = ", ".join(RESOLVER_KINDS)
        raise PluginRegistrationError(
            f"Resolver '{item.name}' has unknown kind '{item.kind}'. "
            f"Expected one of: {kinds}."
        )
    return item


__all__ = [
    "PluginRegistrationError",
    "ResolverChains",
    "get_plugin_manager",
    "load_resolver_chains",
    "reset_plugin_manager_cache",
]

"""Plugin discovery and combinator registration.

Discovery: entry points in the ``twozhakes.plugins`` group (pip-installed)
via pluggy's setuptools loader, plus the built-in plugins.
Capabilities: contribute operator and getter factories by name.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Mapping
from typing import Any

import pluggy

from twozhakes.algebra.getters import getters
from twozhakes.algebra.namespace import CombinatorNamespace
from twozhakes.algebra.operators import operators
from twozhakes.plugins.hookspecs import TwozhakesHookSpec

PROJECT_NAME = "twozhakes"
ENTRY_POINT_GROUP = "twozhakes.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Loads plugins and installs their combinators into the namespaces."""

    def __init__(
        self,
        *,
        operator_namespace: CombinatorNamespace = operators,
        getter_namespace: CombinatorNamespace = getters,
    ) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(TwozhakesHookSpec)
        self._operators = operator_namespace
        self._getters = getter_namespace
        self._installed: dict[str, list[tuple[CombinatorNamespace, str]]] = {}
        self._loaded = False

    def discover_and_load(self, *, builtins: bool = True) -> list[str]:
        """Load entry-point plugins (and the built-ins) and install their
        combinators. Returns the names of all registered plugins."""
        if builtins:
            from twozhakes.plugins.builtins.recipes import RecipesPlugin

            if self._pm.get_plugin("recipes") is None:
                self.register_plugin(RecipesPlugin(), name="recipes")
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._install(plugin)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance; install its combinators once loaded."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._install(plugin)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister *plugin* and remove the combinators it contributed."""
        name = self._pm.get_name(plugin)
        self._pm.unregister(plugin)
        for namespace, combinator in self._installed.pop(name or "", []):
            namespace.unregister(combinator)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hook dispatch against class objects leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate plugin %s", plugin_name, exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)

    def _install(self, plugin: object) -> None:
        plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
        if plugin_name in self._installed:
            return
        installed: list[tuple[CombinatorNamespace, str]] = []
        for hook_name, namespace in (
            ("register_operators", self._operators),
            ("register_getters", self._getters),
        ):
            installed.extend(self._install_from_hook(plugin, plugin_name, hook_name, namespace))
        self._installed[plugin_name] = installed

    @staticmethod
    def _install_from_hook(
        plugin: object,
        plugin_name: str,
        hook_name: str,
        namespace: CombinatorNamespace,
    ) -> list[tuple[CombinatorNamespace, str]]:
        """Call one registration hook of *plugin* and register its results.

        A broken plugin must not prevent the rest from loading: failures are
        logged as warnings and skipped.
        """
        hook = getattr(plugin, hook_name, None)
        if hook is None:
            return []
        try:
            factories: Any = hook()
        except Exception:
            logger.warning("Plugin %s failed in %s", plugin_name, hook_name, exc_info=True)
            return []
        if factories is None:
            return []
        if not isinstance(factories, Mapping):
            logger.warning("Plugin %s returned a non-mapping from %s", plugin_name, hook_name)
            return []

        installed: list[tuple[CombinatorNamespace, str]] = []
        for name, factory in factories.items():
            try:
                namespace.register(name, factory)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping %s %r from plugin %s",
                    namespace.kind,
                    name,
                    plugin_name,
                    exc_info=True,
                )
                continue
            installed.append((namespace, name))
        return installed


_default_manager: PluginManager | None = None
_default_lock = threading.Lock()


def default_plugin_manager() -> PluginManager:
    """The process-wide manager for the global ``operators``/``getters``.

    Discovery runs once; later calls return the same manager.
    """
    global _default_manager
    with _default_lock:
        if _default_manager is None:
            manager = PluginManager()
            names = manager.discover_and_load()
            logger.debug("Loaded plugins: %s", ", ".join(names))
            _default_manager = manager
        return _default_manager

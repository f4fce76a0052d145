"""PluginManager — thin wrapper over :class:`pluggy.PluginManager`.

Third-party packages register under the ``cordova_android.plugins``
entry-point group. An entry point may name either a plugin instance or
a class with a no-argument constructor.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from cordova_android.plugins.hookspecs import AndroidHookSpec

PROJECT_NAME = "cordova_android"
ENTRY_POINT_GROUP = "cordova_android.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Owns the pluggy registry for project lifecycle hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AndroidHookSpec)

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names now registered."""
        loaded = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d plugin entry point(s)", loaded)
        for plugin in [p for p in self._pm.get_plugins() if inspect.isclass(p)]:
            self._replace_with_instance(plugin)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def _replace_with_instance(self, plugin_cls: type) -> None:
        """Swap a class registered by an entry point for an instance of it.

        Hooks called on the class itself would receive no ``self``. A class
        that fails to construct is dropped with a warning.
        """
        name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
        self._pm.unregister(plugin_cls)
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Plugin %s could not be instantiated", name, exc_info=True)
            return
        self._pm.register(instance, name=name)

# src/dotcheck/plugins/manager.py
"""Plugin manager for arbitrary providers.

Uses pluggy for hook-based registration. This is the explicit replacement
for discovering generators by scanning loaded code: a provider is a plugin
object whose hook registers its types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

from dotcheck.core.logging import get_logger
from dotcheck.plugins.hookspecs import PROJECT_NAME, DotCheckArbitrarySpec

if TYPE_CHECKING:
    from dotcheck.core.config import CheckSettings
    from dotcheck.core.registry import Registry

logger = get_logger(__name__)


class ArbitraryPluginManager:
    """Registers arbitrary-provider plugins and applies them to registries.

    Usage:
        manager = ArbitraryPluginManager()
        manager.register_builtin_plugins()
        manager.register(MyArbitraries())

        registry = Registry()
        manager.apply(registry)
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(DotCheckArbitrarySpec)

    def register_builtin_plugins(self, settings: CheckSettings | None = None) -> None:
        """Register the built-in primitive and container arbitraries."""
        from dotcheck.plugins.builtin import BuiltinArbitraries

        self.register(BuiltinArbitraries(settings))

    def register(self, plugin: Any, name: str | None = None) -> None:
        """Register a plugin.

        Args:
            plugin: Plugin instance implementing dotcheck_register_arbitraries
            name: Optional plugin name (defaults to the plugin's ``name``
                attribute, then pluggy's generated name)

        Raises:
            ValueError: If a plugin with the same name is already registered
        """
        plugin_name = name if name is not None else getattr(plugin, "name", None)
        if plugin_name is not None and self._pm.has_plugin(plugin_name):
            raise ValueError(f"Duplicate arbitrary plugin name: '{plugin_name}'")
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Arbitrary plugin registered", plugin=self._pm.get_name(plugin))

    def unregister(self, plugin: Any) -> None:
        self._pm.unregister(plugin)

    def plugin_names(self) -> list[str]:
        return [name for name, _ in self._pm.list_name_plugin()]

    def apply(self, registry: Registry) -> Registry:
        """Run every plugin's hook against ``registry`` and return it."""
        self._pm.hook.dotcheck_register_arbitraries(registry=registry)
        return registry

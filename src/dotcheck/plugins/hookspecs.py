# src/dotcheck/plugins/hookspecs.py
"""pluggy hook specifications for dotcheck plugins.

Plugins implement these hooks to contribute Arbitrary bindings. The plugin
manager applies every implementation to a registry.

Usage (implementing a plugin):
    from dotcheck.plugins.hookspecs import hookimpl

    class DecimalArbitraries:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def dotcheck_register_arbitraries(self, registry):
            registry.register(Decimal, generate_decimal, shrink_decimal)

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks plugin implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from dotcheck.core.registry import Registry

# Project name for pluggy
PROJECT_NAME = "dotcheck"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class DotCheckArbitrarySpec:
    """Hook specifications for arbitrary providers."""

    @hookspec
    def dotcheck_register_arbitraries(self, registry: "Registry") -> None:
        """Register generators, shrinkers and container factories.

        Implementations call ``registry.register`` / ``register_container``.
        Registration replaces existing bindings, so the implementation
        that runs last wins. Built-ins run first; other plugins run in
        pluggy's LIFO order (most recently registered first).

        Args:
            registry: The registry being populated
        """

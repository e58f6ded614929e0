"""Plugin system: arbitrary providers registered through pluggy hooks."""

from dotcheck.plugins.hookspecs import hookimpl
from dotcheck.plugins.manager import ArbitraryPluginManager

__all__ = ["ArbitraryPluginManager", "hookimpl"]

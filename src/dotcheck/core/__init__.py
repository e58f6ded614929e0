"""Core: registry, generators, shrinkers, reporting, settings and logging."""

from dotcheck.core.config import CheckSettings, load_settings
from dotcheck.core.logging import configure_logging, get_logger, reset_logging
from dotcheck.core.registry import Registry, builtin_registry, default_registry

__all__ = [
    "CheckSettings",
    "Registry",
    "builtin_registry",
    "configure_logging",
    "default_registry",
    "get_logger",
    "load_settings",
    "reset_logging",
]

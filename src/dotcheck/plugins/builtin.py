# src/dotcheck/plugins/builtin.py
"""Built-in arbitraries: int, Char, bool, str and list[T]."""

from __future__ import annotations

from dotcheck.contracts.types import Char
from dotcheck.core.config import CheckSettings
from dotcheck.core.generators import (
    char_generator,
    generate_bool,
    integer_generator,
    sequence_arbitrary,
    string_generator,
)
from dotcheck.core.registry import Registry
from dotcheck.core.shrinkers import shrink_integer
from dotcheck.plugins.hookspecs import hookimpl


class BuiltinArbitraries:
    """Plugin registering the primitive types and the list container.

    Only integers shrink. Characters, booleans and strings are reported as
    drawn; lists use the empty container shrinker.
    """

    name = "builtin"

    def __init__(self, settings: CheckSettings | None = None) -> None:
        self._settings = settings if settings is not None else CheckSettings()

    # Runs first: bindings from other providers replace these.
    @hookimpl(tryfirst=True)
    def dotcheck_register_arbitraries(self, registry: Registry) -> None:
        settings = self._settings
        generate_char = char_generator(settings.max_code_point)

        registry.register(int, integer_generator(settings.int_min, settings.int_max), shrink_integer)
        registry.register(Char, generate_char)
        registry.register(bool, generate_bool)
        registry.register(str, string_generator(settings.max_string_length, generate_char))
        registry.register_container(list, sequence_arbitrary)

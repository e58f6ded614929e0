# src/dotcheck/core/registry.py
"""Type-to-Arbitrary registry.

Dispatch is a direct dictionary lookup on the type descriptor. Types are
registered explicitly (or through the ``dotcheck_register_arbitraries``
plugin hook) - nothing is discovered by scanning loaded code.

Containers are handled in two steps:

    registry.register_container(list, sequence_arbitrary)
    registry.lookup(list[int])   # resolves int first, then composes

Element types are resolved eagerly and recursively at lookup time, so a
``list[T]`` whose T has no binding fails before any length or element is
drawn. Composed bindings are cached so their generation-size counter is
shared by every caller for the life of the registry.

Usage:
    registry = Registry()
    registry.register(int, integer_generator(), shrink_integer)
    arbitrary = registry.lookup(int)
    value = arbitrary.generate(random.Random(7))
"""

from __future__ import annotations

import random
import threading
from dataclasses import replace
from typing import TYPE_CHECKING, Any, get_args, get_origin

from dotcheck.contracts.errors import NotRegisteredError
from dotcheck.contracts.types import Arbitrary, Generator, Shrinker, TypeDescriptor, describe_type
from dotcheck.core.logging import get_logger

if TYPE_CHECKING:
    from dotcheck.core.config import CheckSettings
    from dotcheck.core.generators import ContainerFactory

logger = get_logger(__name__)


def _mentions(descriptor: TypeDescriptor, target: TypeDescriptor) -> bool:
    """True if ``target`` appears anywhere inside ``descriptor``."""
    if descriptor == target:
        return True
    return any(_mentions(arg, target) for arg in get_args(descriptor))


class Registry:
    """Process-wide table of Arbitrary bindings.

    At most one binding per descriptor; registering again replaces it.
    All methods serialize on a re-entrant lock, so registration and lookup
    may be called from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._bindings: dict[TypeDescriptor, Arbitrary[Any]] = {}
        self._containers: dict[Any, ContainerFactory] = {}
        self._composed: dict[TypeDescriptor, Arbitrary[Any]] = {}

    def register[T](
        self,
        descriptor: TypeDescriptor,
        generator: Generator[T],
        shrinker: Shrinker[T] | None = None,
    ) -> Arbitrary[T]:
        """Install or replace the binding for exactly ``descriptor``.

        Cached container bindings built on top of the replaced type are
        dropped so they pick up the new generator on next lookup.

        Returns:
            The new binding.
        """
        arbitrary: Arbitrary[T] = Arbitrary(generator=generator, shrinker=shrinker, descriptor=descriptor)
        with self._lock:
            replaced = descriptor in self._bindings
            self._bindings[descriptor] = arbitrary
            self._drop_composed(descriptor)
        logger.debug(
            "Arbitrary registered",
            type=describe_type(descriptor),
            replaced=replaced,
            has_shrinker=shrinker is not None,
        )
        return arbitrary

    def register_arbitrary(self, arbitrary: Arbitrary[Any]) -> Arbitrary[Any]:
        """Register a prebuilt binding under its own descriptor."""
        if arbitrary.descriptor is None:
            raise ValueError("Arbitrary must carry a descriptor to be registered")
        return self.register(arbitrary.descriptor, arbitrary.generator, arbitrary.shrinker)

    def register_container(self, origin: Any, factory: ContainerFactory) -> None:
        """Bind a container origin (e.g. ``list``) to a composing factory.

        The factory receives one resolved Arbitrary per type argument and
        returns the container's Arbitrary.
        """
        with self._lock:
            replaced = origin in self._containers
            self._containers[origin] = factory
            self._drop_composed(origin)
        logger.debug("Container factory registered", origin=describe_type(origin), replaced=replaced)

    def unregister(self, descriptor: TypeDescriptor) -> None:
        """Remove the binding for ``descriptor`` if present."""
        with self._lock:
            self._bindings.pop(descriptor, None)
            self._drop_composed(descriptor)

    def clear(self) -> None:
        """Remove every binding, container factory and cached composition."""
        with self._lock:
            self._bindings.clear()
            self._containers.clear()
            self._composed.clear()

    def _drop_composed(self, target: TypeDescriptor) -> None:
        stale = [d for d in self._composed if _mentions(d, target) or get_origin(d) == target]
        for descriptor in stale:
            del self._composed[descriptor]

    # === Lookup ===

    def lookup(self, descriptor: TypeDescriptor) -> Arbitrary[Any]:
        """Resolve the binding for ``descriptor``.

        Raises:
            NotRegisteredError: If the type, or any element type of a
                container, has no binding.
        """
        with self._lock:
            return self._resolve(descriptor, container=None)

    def _resolve(self, descriptor: TypeDescriptor, container: TypeDescriptor | None) -> Arbitrary[Any]:
        origin = get_origin(descriptor)
        args = get_args(descriptor) if origin is not None else ()
        # Element types must resolve even when the container itself has an exact binding.
        elements = [self._resolve(arg, container=descriptor) for arg in args]

        exact = self._bindings.get(descriptor)
        if exact is not None:
            return exact
        cached = self._composed.get(descriptor)
        if cached is not None:
            return cached

        factory = self._containers.get(origin) if origin is not None else None
        if factory is None or not args:
            raise NotRegisteredError(descriptor, container=container)

        composed = replace(factory(*elements), descriptor=descriptor)
        self._composed[descriptor] = composed
        logger.debug("Container arbitrary composed", type=describe_type(descriptor))
        return composed

    def has_generator(self, descriptor: TypeDescriptor) -> bool:
        """True if ``lookup(descriptor)`` would succeed. Never raises."""
        with self._lock:
            return self._resolvable(descriptor)

    def _resolvable(self, descriptor: TypeDescriptor) -> bool:
        origin = get_origin(descriptor)
        args = get_args(descriptor) if origin is not None else ()
        if not all(self._resolvable(arg) for arg in args):
            return False
        if descriptor in self._bindings or descriptor in self._composed:
            return True
        return origin in self._containers and bool(args)

    def has_shrinker(self, descriptor: TypeDescriptor) -> bool:
        """True if ``descriptor`` resolves to a binding with a shrinker."""
        with self._lock:
            if not self._resolvable(descriptor):
                return False
            return self._resolve(descriptor, container=None).has_shrinker

    def registered_types(self) -> list[TypeDescriptor]:
        """Descriptors with an explicit binding, in registration order."""
        with self._lock:
            return list(self._bindings)

    def __contains__(self, descriptor: object) -> bool:
        return self.has_generator(descriptor)


def builtin_registry(settings: CheckSettings | None = None) -> Registry:
    """Build a fresh registry holding the built-in arbitraries.

    Args:
        settings: Bounds for the primitive generators (defaults if None).
    """
    from dotcheck.plugins.manager import ArbitraryPluginManager

    manager = ArbitraryPluginManager()
    manager.register_builtin_plugins(settings)
    registry = Registry()
    manager.apply(registry)
    return registry


_default_registry: Registry | None = None
_default_lock = threading.Lock()


def default_registry() -> Registry:
    """The process-wide registry, populated with built-ins on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = builtin_registry()
        return _default_registry


def reset_default_registry() -> None:
    """Discard the process-wide registry; the next use rebuilds it."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def register[T](
    descriptor: TypeDescriptor,
    generator: Generator[T],
    shrinker: Shrinker[T] | None = None,
) -> Arbitrary[T]:
    """Register on the process-wide registry."""
    return default_registry().register(descriptor, generator, shrinker)


def lookup(descriptor: TypeDescriptor) -> Arbitrary[Any]:
    return default_registry().lookup(descriptor)


def has_generator(descriptor: TypeDescriptor) -> bool:
    return default_registry().has_generator(descriptor)


def has_shrinker(descriptor: TypeDescriptor) -> bool:
    return default_registry().has_shrinker(descriptor)


def generate(descriptor: TypeDescriptor, rng: random.Random, registry: Registry | None = None) -> Any:
    """Draw one value of ``descriptor`` through ``registry`` (default: process-wide)."""
    source = registry if registry is not None else default_registry()
    return source.lookup(descriptor).generate(rng)


def sample(
    descriptor: TypeDescriptor,
    count: int,
    rng: random.Random | None = None,
    registry: Registry | None = None,
) -> list[Any]:
    """Draw ``count`` values of ``descriptor``.

    Lookup happens once, before the first draw, so an unregistered type
    fails without consuming the random source.
    """
    source = registry if registry is not None else default_registry()
    arbitrary = source.lookup(descriptor)
    rng = rng if rng is not None else random.Random()
    return [arbitrary.generate(rng) for _ in range(count)]

# src/dotcheck/core/generators.py
"""Value generators for the built-in types.

Every generator is a function of an injected ``random.Random``; none of
them touch the module-level random state. Factories take their bounds as
arguments so a registry can be built from CheckSettings:

    generate_int = integer_generator(-100, 100)
    value = generate_int(random.Random(42))

Container generation is composed: SequenceGenerator wraps the element
generator resolved by the registry and grows its sample size on every call.
"""

import random
import threading
from collections.abc import Callable

from dotcheck.contracts.types import Arbitrary, Char, Generator, Shrinker
from dotcheck.core.shrinkers import shrink_nothing

# 32-bit signed range, matching the fixed-width integers properties were
# originally written against.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MAX_CODE_POINT = 0x10FFFF
MAX_STRING_LENGTH = 255

_SURROGATE_START = 0xD800
_SURROGATE_END = 0xDFFF


def integer_generator(minimum: int = INT_MIN, maximum: int = INT_MAX) -> Generator[int]:
    """Uniform integers over [minimum, maximum]."""
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) must not exceed maximum ({maximum})")

    def generate_integer(rng: random.Random) -> int:
        return rng.randint(minimum, maximum)

    return generate_integer


def char_generator(max_code_point: int = MAX_CODE_POINT) -> Generator[Char]:
    """Uniform Unicode scalar values in [0, max_code_point].

    Surrogates are not scalar values and cannot be encoded on output, so
    they are skipped: the draw is taken over the remaining code points and
    mapped past the surrogate block.
    """
    if not 0 <= max_code_point <= MAX_CODE_POINT:
        raise ValueError(f"max_code_point must be in [0, {MAX_CODE_POINT:#x}], got {max_code_point:#x}")

    excluded = max(0, min(max_code_point, _SURROGATE_END) - _SURROGATE_START + 1)
    upper = max_code_point - excluded

    def generate_char(rng: random.Random) -> Char:
        code = rng.randint(0, upper)
        if code >= _SURROGATE_START:
            code += excluded
        return Char(chr(code))

    return generate_char


def generate_bool(rng: random.Random) -> bool:
    return rng.choice((False, True))


def string_generator(
    max_length: int = MAX_STRING_LENGTH,
    char: Generator[Char] | None = None,
) -> Generator[str]:
    """Strings with a length uniform in [0, max_length].

    The length is drawn first, then each character independently.
    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    generate_char = char if char is not None else char_generator()

    def generate_string(rng: random.Random) -> str:
        length = rng.randint(0, max_length)
        return "".join(generate_char(rng) for _ in range(length))

    return generate_string


class SequenceGenerator[T]:
    """Generator for ``list[T]`` composed from T's generator.

    Keeps a generation-size counter that starts at 0 and grows by one on
    every call, so successive samples get progressively larger. A call
    reads the counter, increments it, then draws a length uniform in
    [0, size] followed by that many independent elements.

    The counter belongs to the binding: every run that resolves the same
    ``list[T]`` through the same registry shares it.
    """

    def __init__(self, element: Generator[T]) -> None:
        self._element = element
        self._lock = threading.Lock()
        self._generation_size = 0

    @property
    def generation_size(self) -> int:
        """Size bound the next call will use."""
        return self._generation_size

    def __call__(self, rng: random.Random) -> list[T]:
        with self._lock:
            size = self._generation_size
            self._generation_size += 1
        length = rng.randint(0, size)
        return [self._element(rng) for _ in range(length)]


def sequence_arbitrary[T](
    element: Arbitrary[T],
    shrinker: Shrinker[list[T]] | None = shrink_nothing,
) -> Arbitrary[list[T]]:
    """Container factory for ``list``: compose a binding from the element's.

    The registry supplies ``element`` already resolved, so an unregistered
    element type fails at lookup before anything is drawn.
    """
    return Arbitrary(generator=SequenceGenerator(element.generator), shrinker=shrinker)


type ContainerFactory = Callable[..., Arbitrary]

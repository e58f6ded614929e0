# src/dotcheck/core/shrinkers.py
"""Built-in shrinkers.

A shrinker maps a value to a finite, lazily produced sequence of simpler
candidates of the same type. Candidates are consumed in order and the
consumer may stop early, so every shrinker here is a generator function.
"""

from collections.abc import Iterator
from typing import Any


def shrink_integer(value: int) -> Iterator[int]:
    """Halve toward zero, keeping the sign.

    Yields value/2, value/4, ... while the magnitude is at least 1.
    Strictly descending in magnitude, never yields ``value`` itself, and
    empty for |value| < 2.

    Example:
        >>> list(shrink_integer(-20))
        [-10, -5, -2, -1]
    """
    # int(x / 2) would lose precision past 2**53; truncate in integer space.
    shrunk = _halve_toward_zero(value)
    while abs(shrunk) >= 1:
        yield shrunk
        shrunk = _halve_toward_zero(shrunk)


def _halve_toward_zero(value: int) -> int:
    magnitude = abs(value) // 2
    return -magnitude if value < 0 else magnitude


def shrink_nothing(value: Any) -> Iterator[Any]:
    """Container shrinker: never proposes a candidate.

    Containers are reported as drawn. Removing elements would usually
    produce a smaller counterexample but is not attempted.
    """
    return iter(())

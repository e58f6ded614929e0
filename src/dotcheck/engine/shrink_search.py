# src/dotcheck/engine/shrink_search.py
"""Single-pass shrink search.

The shrinker is called once, on the original failing value. Its candidates
are consumed in order until one no longer falsifies the property; the last
candidate that still did is the minimal counterexample.

Each new failing candidate is not itself re-shrunk.
For halving shrinkers this reports the last failing power-of-two fraction
of the original value, not the global minimum.
"""

from collections.abc import Callable
from typing import Any

from dotcheck.contracts.types import Shrinker, ShrinkResult
from dotcheck.core.logging import get_logger

logger = get_logger(__name__)


def shrink_search[T](
    failing_value: T,
    prop: Callable[[T], Any],
    shrinker: Shrinker[T] | None,
) -> ShrinkResult:
    """Minimize a counterexample with one pass over ``shrinker(failing_value)``.

    Args:
        failing_value: A value for which ``prop`` returned falsy.
        prop: The property under test.
        shrinker: Candidate producer, or None to skip shrinking.

    Returns:
        ShrinkResult with the minimal value found and the number of
        candidates that still falsified the property.
    """
    if shrinker is None:
        return ShrinkResult(value=failing_value)

    minimal = failing_value
    shrink_count = 0
    # Candidates are produced lazily; stop consuming at the first that passes.
    for candidate in shrinker(failing_value):
        if prop(candidate):
            break
        minimal = candidate
        shrink_count += 1

    logger.debug("Shrink search finished", shrink_count=shrink_count)
    return ShrinkResult(value=minimal, shrink_count=shrink_count)

# src/dotcheck/contracts/types.py
"""Core value types for generation, shrinking and trial outcomes.

Type descriptors are plain Python type expressions:

    int, bool, str, Char          # scalars
    list[int], list[list[Char]]   # homogeneous containers

Containers are decomposed with typing.get_origin / typing.get_args, so
lookup can recurse into the element type without any runtime scanning.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, NewType, get_args, get_origin

from dotcheck.contracts.enums import OutcomeStatus

# A single Unicode scalar value. str has no character type of its own.
Char = NewType("Char", str)

type TypeDescriptor = Any
type Generator[T] = Callable[[random.Random], T]
type Shrinker[T] = Callable[[T], Iterable[T]]


def describe_type(descriptor: TypeDescriptor) -> str:
    """Render a type descriptor for error messages and logs.

    Generic aliases are rendered recursively so nested element types keep
    their short names: ``list[list[Char]]`` rather than the module path.
    """
    origin = get_origin(descriptor)
    if origin is not None:
        args = ", ".join(describe_type(arg) for arg in get_args(descriptor))
        return f"{describe_type(origin)}[{args}]"
    name = getattr(descriptor, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(descriptor)


@dataclass(frozen=True)
class Arbitrary[T]:
    """A generator bound to an optional shrinker for one type.

    Immutable once built. A composed sequence generator carries its own
    generation-size counter, which is the only state that changes between
    draws.

    Attributes:
        generator: Draws a value from the supplied random source.
        shrinker: Produces simpler candidates from a value; None disables
            shrinking for this type.
        descriptor: The type this binding generates. Optional for per-call
            overrides, where the property's declared type is used.
    """

    generator: Generator[T]
    shrinker: Shrinker[T] | None = None
    descriptor: TypeDescriptor = None

    @property
    def has_shrinker(self) -> bool:
        return self.shrinker is not None

    def generate(self, rng: random.Random) -> T:
        return self.generator(rng)

    def shrink(self, value: T) -> Iterable[T]:
        """Candidates simpler than ``value``; empty when there is no shrinker."""
        if self.shrinker is None:
            return iter(())
        return self.shrinker(value)


@dataclass(frozen=True, slots=True)
class ShrinkResult:
    """Smallest counterexample found by one shrink pass.

    Attributes:
        value: The minimal value that still falsifies the property.
        shrink_count: Number of candidates that still falsified it.
    """

    value: Any
    shrink_count: int = 0


@dataclass(frozen=True, slots=True)
class TrialOutcome:
    """Result of running one property.

    Produced fresh per run and never persisted.

    Attributes:
        trials_run: Trials executed; on failure, the 1-based index of the
            failing trial.
        failed: True when a trial falsified the property.
        failing_value: The value drawn by the failing trial.
        shrink_count: Candidates that still falsified the property during
            shrinking (0 when shrinking was skipped or found nothing).
        minimal_counterexample: The value reported after shrinking.
    """

    trials_run: int
    failed: bool = False
    failing_value: Any = None
    shrink_count: int = 0
    minimal_counterexample: Any = None

    def __post_init__(self) -> None:
        if self.trials_run < 0:
            raise ValueError(f"trials_run must be non-negative, got {self.trials_run}")
        if self.shrink_count < 0:
            raise ValueError(f"shrink_count must be non-negative, got {self.shrink_count}")
        if not self.failed and self.shrink_count:
            raise ValueError("A passing outcome cannot record shrinks")

    @classmethod
    def passed(cls, trials_run: int) -> TrialOutcome:
        return cls(trials_run=trials_run)

    @classmethod
    def falsified(cls, trials_run: int, failing_value: Any, shrunk: ShrinkResult) -> TrialOutcome:
        return cls(
            trials_run=trials_run,
            failed=True,
            failing_value=failing_value,
            shrink_count=shrunk.shrink_count,
            minimal_counterexample=shrunk.value,
        )

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.FAILED if self.failed else OutcomeStatus.PASSED

# src/dotcheck/core/reporting.py
"""Text rendering for values and run outcomes.

Three summary shapes are produced, one per run:

    Passed 100 tests.
    Failed after 3 tests, with input `42'
    Failed after 3 tests (with 5 shrinks), with input `10'

Rendering errors (e.g. a value whose __str__ raises) are not caught.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, TextIO

from dotcheck.contracts.enums import TrialVerdict
from dotcheck.contracts.types import TrialOutcome


def repr_value(value: Any) -> str:
    """Literal textual form of a generated value.

    Lists and tuples render recursively as ``[a, b, c]``; everything else
    uses its natural ``str`` form.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return "[" + ", ".join(repr_value(item) for item in value) + "]"
    return str(value)


def summarize(outcome: TrialOutcome) -> str:
    if not outcome.failed:
        return f"Passed {outcome.trials_run} tests."
    if outcome.shrink_count == 0:
        return f"Failed after {outcome.trials_run} tests, with input `{repr_value(outcome.failing_value)}'"
    return (
        f"Failed after {outcome.trials_run} tests (with {outcome.shrink_count} shrinks), "
        f"with input `{repr_value(outcome.minimal_counterexample)}'"
    )


def format_trial(index: int, value: Any, passed: bool) -> str:
    """One verbose line per trial: ``3: `[1, 2]' passed``."""
    verdict = TrialVerdict.PASSED if passed else TrialVerdict.FAILED
    return f"{index}: `{repr_value(value)}' {verdict}"


class ConsoleReporter:
    """Write trial lines and run summaries to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdout

    def trial(self, index: int, value: Any, passed: bool) -> None:
        print(format_trial(index, value, passed), file=self._stream)

    def outcome(self, outcome: TrialOutcome) -> None:
        print(summarize(outcome), file=self._stream)

"""Status codes shared across the registry, engine and reporter."""

from enum import StrEnum


class OutcomeStatus(StrEnum):
    """Final status of a property run.

    A falsified property is an outcome, not an error.
    """

    PASSED = "passed"
    FAILED = "failed"


class TrialVerdict(StrEnum):
    """Verdict of a single generate-and-evaluate cycle."""

    PASSED = "passed"
    FAILED = "failed"

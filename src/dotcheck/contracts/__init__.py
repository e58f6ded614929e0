"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core/engine.
Settings (CheckSettings) are NOT re-exported here - import them from
dotcheck.core.config.

Import patterns:
    from dotcheck.contracts import Arbitrary, Char, TrialOutcome
    from dotcheck.contracts import ConfigurationError, NotRegisteredError
"""

from dotcheck.contracts.enums import OutcomeStatus, TrialVerdict
from dotcheck.contracts.errors import (
    ConfigurationError,
    DotCheckError,
    NotRegisteredError,
    SignatureMismatchError,
)
from dotcheck.contracts.types import (
    Arbitrary,
    Char,
    Generator,
    Shrinker,
    ShrinkResult,
    TrialOutcome,
    TypeDescriptor,
    describe_type,
)

__all__ = [
    "Arbitrary",
    "Char",
    "ConfigurationError",
    "DotCheckError",
    "Generator",
    "NotRegisteredError",
    "OutcomeStatus",
    "ShrinkResult",
    "Shrinker",
    "SignatureMismatchError",
    "TrialOutcome",
    "TrialVerdict",
    "TypeDescriptor",
    "describe_type",
]

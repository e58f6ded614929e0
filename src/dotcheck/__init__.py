"""
dotcheck: property-based testing with type-driven generators and shrinking.

Register a generator (and optionally a shrinker) per type, then run a
predicate against many generated inputs. The first failing input is
shrunk before it is reported.

    from dotcheck import Runner

    def prop_small(n: int) -> bool:
        return n < 10

    Runner(seed=1).check(prop_small)   # prints the shrunk counterexample
"""

from dotcheck.contracts import (
    Arbitrary,
    Char,
    ConfigurationError,
    DotCheckError,
    NotRegisteredError,
    OutcomeStatus,
    SignatureMismatchError,
    TrialOutcome,
)
from dotcheck.core.config import CheckSettings, load_settings
from dotcheck.core.logging import configure_logging
from dotcheck.core.registry import (
    Registry,
    builtin_registry,
    default_registry,
    generate,
    has_generator,
    has_shrinker,
    lookup,
    register,
    sample,
)
from dotcheck.core.reporting import repr_value, summarize
from dotcheck.engine import Runner, quick, shrink_search, verbose

__version__ = "0.1.0"

__all__ = [
    "Arbitrary",
    "Char",
    "CheckSettings",
    "ConfigurationError",
    "DotCheckError",
    "NotRegisteredError",
    "OutcomeStatus",
    "Registry",
    "Runner",
    "SignatureMismatchError",
    "TrialOutcome",
    "builtin_registry",
    "configure_logging",
    "default_registry",
    "generate",
    "has_generator",
    "has_shrinker",
    "load_settings",
    "lookup",
    "quick",
    "register",
    "repr_value",
    "sample",
    "shrink_search",
    "summarize",
    "verbose",
]

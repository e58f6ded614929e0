"""Configuration error hierarchy.

Only configuration problems are raised. A predicate returning False is
reported through TrialOutcome and never raised.
"""

from __future__ import annotations

from typing import Any

from dotcheck.contracts.types import describe_type


class DotCheckError(Exception):
    """Base class for all dotcheck errors."""


class ConfigurationError(DotCheckError):
    """Raised before any trial runs when a property cannot be set up.

    Attributes:
        message: Human-readable error description
        trials_run: Always 0 - configuration fails before the first draw
    """

    trials_run: int = 0

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotRegisteredError(ConfigurationError):
    """Raised when a type (or a container's element type) has no binding.

    Attributes:
        descriptor: The type that has no registered generator
        container: The container type being resolved, if the missing
            binding belongs to one of its element types
    """

    def __init__(self, descriptor: Any, *, container: Any | None = None) -> None:
        self.descriptor = descriptor
        self.container = container
        name = describe_type(descriptor)
        if container is None:
            message = f"No generator registered for type `{name}'"
        else:
            message = f"No generator registered for element type `{name}' of `{describe_type(container)}'"
        super().__init__(message)


class SignatureMismatchError(ConfigurationError):
    """Raised when a supplied callable has the wrong shape.

    Attributes:
        role: What the callable was supplied as ("generator", "shrinker", "property")
        func: The offending callable
        reason: Why the signature was rejected
    """

    def __init__(self, role: str, func: Any, reason: str) -> None:
        self.role = role
        self.func = func
        self.reason = reason
        func_name = getattr(func, "__qualname__", repr(func))
        super().__init__(f"Invalid {role} `{func_name}': {reason}")

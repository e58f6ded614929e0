# src/dotcheck/core/signatures.py
"""Signature checks for user-supplied callables.

Properties, generators and shrinkers all take exactly one positional
argument. Return annotations, when present, must agree with the declared
input type. Unannotated callables are accepted as-is.

All failures raise SignatureMismatchError so they surface as configuration
errors before the first trial.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from dotcheck.contracts.errors import SignatureMismatchError
from dotcheck.contracts.types import TypeDescriptor, describe_type


def _annotated_target(func: Callable[..., Any]) -> Any:
    """The object whose annotations describe ``func``'s call."""
    if inspect.isroutine(func) or inspect.isclass(func):
        return func
    return func.__call__


def _check_arity(role: str, func: Any) -> inspect.Signature | None:
    if not callable(func):
        raise SignatureMismatchError(role, func, f"expected a callable, got {type(func).__name__}")
    try:
        signature = inspect.signature(func)
    except ValueError:
        # Some builtins expose no signature; they are accepted unchecked.
        return None
    try:
        signature.bind(object())
    except TypeError as e:
        raise SignatureMismatchError(role, func, f"must accept exactly one positional argument ({e})") from e
    return signature


def _type_hints(role: str, func: Any) -> dict[str, Any]:
    target = _annotated_target(func)
    try:
        return get_type_hints(target)
    except (NameError, TypeError) as e:
        raise SignatureMismatchError(role, func, f"annotations cannot be resolved ({e})") from e


def _compatible(annotation: Any, expected: TypeDescriptor) -> bool:
    """True when a return annotation can produce values of ``expected``."""
    if annotation is Any or annotation is object or annotation == expected:
        return True
    if isinstance(annotation, TypeVar):
        return True
    # NewType aliases accept a callable annotated with the underlying type.
    if getattr(expected, "__supertype__", None) == annotation:
        return True
    origin, expected_origin = get_origin(annotation), get_origin(expected)
    if origin is None or origin is not expected_origin:
        return False
    args, expected_args = get_args(annotation), get_args(expected)
    if len(args) != len(expected_args):
        return False
    return all(_compatible(a, e) for a, e in zip(args, expected_args, strict=True))


def resolve_input_type(prop: Callable[[Any], Any]) -> TypeDescriptor | None:
    """Validate a property and return its parameter annotation, if any."""
    signature = _check_arity("property", prop)
    if signature is None:
        return None
    hints = _type_hints("property", prop)
    positional = [
        p for p in signature.parameters.values() if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    if not positional:
        return None
    return hints.get(positional[0].name)


def validate_generator(generator: Callable[..., Any], descriptor: TypeDescriptor | None) -> None:
    """Check a generator takes one random source and returns ``descriptor``."""
    if _check_arity("generator", generator) is None or descriptor is None:
        return
    returns = _type_hints("generator", generator).get("return")
    if returns is not None and not _compatible(returns, descriptor):
        raise SignatureMismatchError(
            "generator",
            generator,
            f"returns `{describe_type(returns)}' but the property expects `{describe_type(descriptor)}'",
        )


def validate_shrinker(shrinker: Callable[..., Any], descriptor: TypeDescriptor | None) -> None:
    """Check a shrinker takes one value and returns an iterable of ``descriptor``."""
    if _check_arity("shrinker", shrinker) is None or descriptor is None:
        return
    returns = _type_hints("shrinker", shrinker).get("return")
    if returns is None or returns is Any:
        return
    origin = get_origin(returns)
    if origin is None or not _is_iterable_origin(origin):
        raise SignatureMismatchError(
            "shrinker",
            shrinker,
            f"must return an iterable of `{describe_type(descriptor)}', annotated `{describe_type(returns)}'",
        )
    args = get_args(returns)
    if args and not _compatible(args[0], descriptor):
        raise SignatureMismatchError(
            "shrinker",
            shrinker,
            f"yields `{describe_type(args[0])}' but the property expects `{describe_type(descriptor)}'",
        )


def _is_iterable_origin(origin: Any) -> bool:
    return isinstance(origin, type) and issubclass(origin, Iterable)

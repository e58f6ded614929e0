# src/dotcheck/engine/runner.py
"""Trial runner: generate, evaluate, stop at the first failure, shrink.

A Runner owns its random source, so two runners never interfere and a
seeded runner reproduces the same draws, outcome and counterexample.

Usage:
    runner = Runner(seed=42)

    def prop_abs_non_negative(n: int) -> bool:
        return abs(n) >= 0

    outcome = runner.check(prop_abs_non_negative)   # prints "Passed 100 tests."

    # Per-call override bypasses the registry for this call only
    runner.run(prop_small, Arbitrary(generator=lambda rng: rng.randint(0, 9)))
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from dotcheck.contracts.errors import ConfigurationError
from dotcheck.contracts.types import Arbitrary, TrialOutcome, TypeDescriptor, describe_type
from dotcheck.core.config import CheckSettings
from dotcheck.core.logging import configure_from_settings, get_logger
from dotcheck.core.registry import Registry, default_registry
from dotcheck.core.reporting import ConsoleReporter
from dotcheck.core.signatures import resolve_input_type, validate_generator, validate_shrinker
from dotcheck.engine.shrink_search import shrink_search

logger = get_logger(__name__)

type Property[T] = Callable[[T], Any]


def _property_name(prop: Callable[..., Any]) -> str:
    return getattr(prop, "__qualname__", None) or repr(prop)


class Runner:
    """Executes properties against generated inputs.

    Single-threaded and synchronous: trials run strictly in sequence
    because every draw advances the runner's one random source.
    """

    def __init__(
        self,
        *,
        registry: Registry | None = None,
        settings: CheckSettings | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
        reporter: ConsoleReporter | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Where declared input types are looked up
                (default: the process-wide registry).
            settings: Default trial count, verbosity and seed. When given,
                its log_level and json_logs are applied to dotcheck's logger.
            rng: Random source to draw from; takes precedence over seeds.
            seed: Seed for a new random source; overrides settings.seed.
            reporter: Destination for verbose trial lines and summaries
                (default: stdout).
        """
        if settings is not None:
            configure_from_settings(settings)
        self._settings = settings if settings is not None else CheckSettings()
        self._registry = registry
        if rng is None:
            rng = random.Random(seed if seed is not None else self._settings.seed)
        self._rng = rng
        self._reporter = reporter if reporter is not None else ConsoleReporter()

    @property
    def registry(self) -> Registry:
        if self._registry is None:
            self._registry = default_registry()
        return self._registry

    @property
    def settings(self) -> CheckSettings:
        return self._settings

    def resolve(
        self,
        prop: Property[Any],
        override: Arbitrary[Any] | None = None,
        input_type: TypeDescriptor | None = None,
    ) -> Arbitrary[Any]:
        """Resolve the Arbitrary a run of ``prop`` would use.

        Raises:
            ConfigurationError: If the property, override or declared type
                cannot be used. Nothing has been drawn at that point.
        """
        declared = resolve_input_type(prop)
        if input_type is not None:
            declared = input_type

        if override is not None:
            if declared is not None and override.descriptor is not None and override.descriptor != declared:
                raise ConfigurationError(
                    f"Override generates `{describe_type(override.descriptor)}' "
                    f"but `{_property_name(prop)}' expects `{describe_type(declared)}'"
                )
            descriptor = declared if declared is not None else override.descriptor
            validate_generator(override.generator, descriptor)
            if override.shrinker is not None:
                validate_shrinker(override.shrinker, descriptor)
            return replace(override, descriptor=descriptor)

        if declared is None:
            raise ConfigurationError(
                f"Cannot determine the input type of `{_property_name(prop)}': "
                "annotate its parameter or pass input_type"
            )
        return self.registry.lookup(declared)

    def run[T](
        self,
        prop: Property[T],
        override: Arbitrary[T] | None = None,
        *,
        verbose: bool | None = None,
        trials: int | None = None,
        input_type: TypeDescriptor | None = None,
    ) -> TrialOutcome:
        """Run up to ``trials`` generate-and-evaluate cycles.

        Stops at the first falsifying value, shrinks it when a shrinker is
        available, and returns the outcome. Each drawn value is evaluated
        exactly once. Exceptions raised by the property propagate.

        Args:
            prop: Predicate taking one value.
            override: Generator/shrinker to use instead of the registry.
            verbose: Report one line per trial (default: settings.verbose).
            trials: Maximum trials (default: settings.trials).
            input_type: Declared input type when the property's parameter
                is not annotated.

        Raises:
            ConfigurationError: Before any trial, if resolution fails.
        """
        trials = self._settings.trials if trials is None else trials
        verbose = self._settings.verbose if verbose is None else verbose
        if trials < 0:
            raise ConfigurationError(f"trials must be non-negative, got {trials}")

        arbitrary = self.resolve(prop, override, input_type)
        log = logger.bind(property=_property_name(prop), type=describe_type(arbitrary.descriptor))
        log.debug("Property run started", trials=trials, override=override is not None)

        failure: tuple[int, T] | None = None
        for index in range(1, trials + 1):
            value = arbitrary.generate(self._rng)
            holds = bool(prop(value))
            if verbose:
                self._reporter.trial(index, value, holds)
            if not holds:
                failure = (index, value)
                break

        if failure is None:
            log.info("Property passed", trials_run=trials)
            return TrialOutcome.passed(trials)

        index, failing_value = failure
        log.debug("Property falsified", trial=index)
        shrunk = shrink_search(failing_value, prop, arbitrary.shrinker)
        outcome = TrialOutcome.falsified(index, failing_value, shrunk)
        log.info("Property failed", trials_run=index, shrink_count=outcome.shrink_count)
        return outcome

    def check[T](
        self,
        prop: Property[T],
        override: Arbitrary[T] | None = None,
        **kwargs: Any,
    ) -> TrialOutcome:
        """Run ``prop`` and report the summary line."""
        outcome = self.run(prop, override, **kwargs)
        self._reporter.outcome(outcome)
        return outcome


def quick[T](prop: Property[T], override: Arbitrary[T] | None = None, **kwargs: Any) -> TrialOutcome:
    """Check ``prop`` with a fresh runner and print only the summary."""
    return Runner().check(prop, override, verbose=False, **kwargs)


def verbose[T](prop: Property[T], override: Arbitrary[T] | None = None, **kwargs: Any) -> TrialOutcome:
    """Check ``prop`` with a fresh runner, printing every trial and the summary."""
    return Runner().check(prop, override, verbose=True, **kwargs)

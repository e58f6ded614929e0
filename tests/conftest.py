# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- registry: fresh registry with the built-in arbitraries (no shared state)
- rng: seeded random source
- stream / reporter: in-memory output for asserting report lines
- runner: seeded Runner wired to the fixtures above

The process-wide default registry is reset around every test so module-level
``register`` calls in one test never leak into another, and dotcheck's
logger is handed back to the application after each test.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import io
import os
import random

import pytest
from hypothesis import Phase, Verbosity, settings

from dotcheck.core.logging import reset_logging
from dotcheck.core.registry import Registry, builtin_registry, reset_default_registry
from dotcheck.core.reporting import ConsoleReporter
from dotcheck.engine.runner import Runner


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Add markers based on test location."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.path):
            item.add_marker(pytest.mark.property)


def pytest_runtest_setup(item: pytest.Item) -> None:
    reset_default_registry()


def pytest_runtest_teardown(item: pytest.Item) -> None:
    reset_default_registry()
    reset_logging()


@pytest.fixture
def registry() -> Registry:
    return builtin_registry()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(stream: io.StringIO) -> ConsoleReporter:
    return ConsoleReporter(stream)


@pytest.fixture
def runner(registry: Registry, reporter: ConsoleReporter) -> Runner:
    return Runner(registry=registry, seed=1234, reporter=reporter)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))

# tests/property/core/test_shrinker_properties.py
"""Property-based tests for shrinkers and the shrink search.

Invariants:
- Integer candidates keep the sign, never reach zero, and strictly
  decrease in magnitude
- The candidate sequence is finite: one candidate per halving step
- A shrunk counterexample still falsifies the property
- For a threshold property, one halving pass stops within a factor of two
  of the boundary
"""

from __future__ import annotations

from hypothesis import assume, given
from hypothesis import strategies as st

from dotcheck.core.shrinkers import shrink_integer
from dotcheck.engine.shrink_search import shrink_search

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


class TestShrinkIntegerProperties:
    @given(value=int32)
    def test_candidates_keep_sign_and_shrink(self, value: int) -> None:
        previous = abs(value)
        for candidate in shrink_integer(value):
            assert candidate != 0
            assert (candidate < 0) == (value < 0)
            assert abs(candidate) < previous
            previous = abs(candidate)

    @given(value=st.integers())
    def test_candidate_count_is_halving_steps(self, value: int) -> None:
        assert len(list(shrink_integer(value))) == max(abs(value).bit_length() - 1, 0)

    @given(value=int32)
    def test_never_yields_input(self, value: int) -> None:
        assert value not in list(shrink_integer(value))


class TestShrinkSearchProperties:
    @given(value=st.integers(min_value=1, max_value=2**31 - 1), threshold=st.integers(min_value=1, max_value=2**20))
    def test_threshold_stops_within_factor_of_two(self, value: int, threshold: int) -> None:
        def below(n: int) -> bool:
            return n < threshold

        assume(not below(value))
        result = shrink_search(value, below, shrink_integer)

        assert not below(result.value)
        assert threshold <= result.value < 2 * threshold
        assert result.value <= value

    @given(multiple=st.integers(min_value=-(2**27), max_value=2**27), divisor=st.integers(min_value=2, max_value=9))
    def test_result_still_falsifies(self, multiple: int, divisor: int) -> None:
        value = multiple * divisor

        def not_multiple(n: int) -> bool:
            return n % divisor != 0

        result = shrink_search(value, not_multiple, shrink_integer)

        assert not not_multiple(result.value)
        assert abs(result.value) <= abs(value)
        assert result.shrink_count <= max(abs(value).bit_length() - 1, 0)

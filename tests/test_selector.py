"""
Tests for fixed-shape indexed access.
"""

import pytest

from zkpredicate.errors import OutOfBounds
from zkpredicate.selector import select, select_pair


class TestSelect:
    """select() returns the physically stored element or fails."""

    def test_every_in_range_index(self):
        array = [7, -3, 0, 42, 10**30, 5]
        for i, expected in enumerate(array):
            assert select(array, i) == expected

    @pytest.mark.parametrize("index", [-1, 6, 7, 100, -100])
    def test_out_of_range_index(self, index):
        with pytest.raises(OutOfBounds, match="out of bounds"):
            select([1, 2, 3, 4, 5, 6], index)

    def test_bounds_are_exact(self):
        array = list(range(20))
        assert select(array, 0) == 0
        assert select(array, 19) == 19
        with pytest.raises(OutOfBounds) as exc:
            select(array, 20)
        assert exc.value.index == 20
        assert exc.value.length == 20

    def test_empty_array(self):
        with pytest.raises(OutOfBounds):
            select([], 0)

    def test_duplicate_values(self):
        """identical values at other positions do not confuse the multiplexer"""
        assert select([9, 9, 9, 1], 3) == 1
        assert select([9, 9, 9, 1], 1) == 9


class TestSelectPair:

    def test_selects_both_components(self):
        flat = [10, 11, 20, 21, 30, 31]
        assert select_pair(flat, 0) == (10, 11)
        assert select_pair(flat, 2) == (30, 31)

    def test_pair_out_of_range(self):
        with pytest.raises(OutOfBounds):
            select_pair([10, 11, 20, 21], 2)

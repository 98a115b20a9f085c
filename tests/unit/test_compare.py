"""
Unit tests for the comparator.
"""

import pytest

from mergesort.core.compare import Comparator
from mergesort.errors import MergeSortError, NotComparableError


class TestComparator:
    """Tests for Comparator.less()."""

    def test_strict_less_than(self):
        """Test that less() is strict."""
        cmp = Comparator()

        assert cmp.less(1, 2) is True
        assert cmp.less(2, 1) is False
        assert cmp.less(2, 2) is False

    def test_key_function(self):
        """Test comparing by key."""
        cmp = Comparator(key=len)

        assert cmp.less("b", "aa") is True
        assert cmp.less("aa", "b") is False

    def test_counts_comparisons(self):
        """Test that every call is counted."""
        cmp = Comparator()
        for _ in range(5):
            cmp.less(1, 2)

        assert cmp.comparisons == 5

    def test_incomparable_types(self):
        """Test that TypeError is turned into NotComparableError."""
        cmp = Comparator()

        with pytest.raises(NotComparableError) as exc_info:
            cmp.less(1, "a")

        assert exc_info.value.left_type == "int"
        assert exc_info.value.right_type == "str"
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_not_comparable_is_type_error(self):
        """Test that callers catching TypeError still catch it."""
        cmp = Comparator()

        with pytest.raises(TypeError):
            cmp.less(object(), object())

        with pytest.raises(MergeSortError):
            cmp.less(None, 3)

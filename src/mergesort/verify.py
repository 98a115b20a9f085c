"""
=============================================================================
SORT PROPERTY CHECKS
=============================================================================

What does "sorted correctly" actually mean? Two things must hold:

    1. SORTEDNESS   every adjacent pair (a, b) in the output has a <= b
    2. PERMUTATION  the output holds exactly the input's elements, with
                    the same multiplicities

An output of [] passes check 1 for any input, and sorted(set(x)) passes
check 1 while dropping duplicates. Only both checks together pin the
result down.

For a STABLE sort there is a third property:

    3. STABILITY    elements with equal keys keep their input order

These helpers are used by the test suite and by ``--verify`` on the CLI.

=============================================================================
"""

from collections import Counter
from typing import Any, Callable, Iterable, Optional, Sequence

from .sorter import merge_sort


def is_sorted(seq: Sequence, key: Optional[Callable[[Any], Any]] = None) -> bool:
    """Return True if no element is strictly less than its predecessor."""
    values = [key(x) for x in seq] if key is not None else list(seq)
    return all(not values[i + 1] < values[i] for i in range(len(values) - 1))


def is_permutation(a: Iterable, b: Iterable) -> bool:
    """
    Return True if ``a`` and ``b`` hold the same multiset of elements.

    Hashable elements are counted; unhashable ones (lists, dicts) fall
    back to removing matches one by one.
    """
    a, b = list(a), list(b)
    if len(a) != len(b):
        return False
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        remaining = list(b)
        for item in a:
            for idx, candidate in enumerate(remaining):
                if candidate == item:
                    del remaining[idx]
                    break
            else:
                return False
        return not remaining


def agrees_with_builtin(seq: Iterable, key=None, strategy=None) -> bool:
    """Return True if merge_sort() gives exactly what sorted() gives."""
    items = list(seq)
    return merge_sort(items, key=key, strategy=strategy) == sorted(items, key=key)


def is_stable(seq: Iterable, key: Callable[[Any], Any], strategy=None) -> bool:
    """
    Return True if sorting ``seq`` by ``key`` keeps equal-key elements in
    input order.

    Elements are tagged with their input position; within every run of
    equal keys in the output, positions must be increasing.
    """
    tagged = list(enumerate(seq))
    result = merge_sort(tagged, key=lambda pair: key(pair[1]), strategy=strategy)
    for (i, x), (j, y) in zip(result, result[1:]):
        if key(x) == key(y) and i > j:
            return False
    return True

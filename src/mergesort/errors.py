"""
=============================================================================
MERGE SORT ERRORS
=============================================================================

Sorting a well-formed sequence cannot fail. There is no "invalid input"
for the empty or the one-element sequence: both are already sorted.

What CAN go wrong is a caller error or a resource limit:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      EXCEPTION HIERARCHY                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   MergeSortError                                                    │
    │   ├── NotComparableError      two elements have no ordering         │
    │   │                           (also a TypeError)                    │
    │   └── RecursionLimitError     naive recursive merge asked to        │
    │                               merge more than its documented limit  │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Both failures are deterministic. Retrying the same call gives the same
error, so nothing in this package retries.

=============================================================================
"""

from typing import Any


class MergeSortError(Exception):
    """Base class for every error raised by the mergesort package."""


class NotComparableError(MergeSortError, TypeError):
    """
    Raised when two elements cannot be ordered with ``<``.

    Python raises a bare TypeError for ``1 < "a"``. We re-raise it with
    both operand types attached so the caller sees WHICH values clashed,
    instead of getting a silently wrong ordering.

    Subclassing TypeError keeps ``except TypeError`` working for callers
    that treat this like the builtin ``sorted()``.
    """

    def __init__(self, left: Any, right: Any):
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        super().__init__(
            f"Elements are not comparable: '<' not supported between "
            f"{self.left_type!r} and {self.right_type!r}"
        )


class RecursionLimitError(MergeSortError):
    """
    Raised by the naive recursive merge when its input is too large.

    The recursive merge uses one stack frame per merged element. Instead
    of letting the interpreter die with RecursionError deep inside the
    merge, we refuse up front and point to the iterative strategy.
    """

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Recursive merge of {size} elements exceeds the limit of "
            f"{limit}; use the 'iterative' or 'lazy' strategy instead"
        )

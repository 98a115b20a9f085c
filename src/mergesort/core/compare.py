"""
=============================================================================
COMPARATOR
=============================================================================

Every decision merge sort makes is one question: "is b smaller than a?"
This module owns that question.

=============================================================================
WHY ONLY "<"?
=============================================================================

A total order only needs one strict relation. Everything else follows:

    a > b    is    b < a
    a <= b   is    not (b < a)
    a == b   is    not (a < b) and not (b < a)   (for ordering purposes)

Python's own sorted() uses only __lt__ as well, so any type that works
with sorted() works here.

=============================================================================
KEY FUNCTIONS
=============================================================================

Like sorted(..., key=len), a key function maps each element to the value
that gets compared. The ELEMENT is what ends up in the output:

    merge_sort(["ccc", "a", "bb"], key=len)  ->  ["a", "bb", "ccc"]

=============================================================================
"""

import logging
from typing import Any, Callable, Optional

from ..errors import NotComparableError


logger = logging.getLogger(__name__)


class Comparator:
    """
    Strict less-than with an optional key, counting how often it is asked.

    One Comparator is created per sort call, so the counter never leaks
    between calls or threads.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        self.key = key
        self.comparisons = 0

    def less(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` sorts strictly before ``b``."""
        self.comparisons += 1
        if self.key is not None:
            a, b = self.key(a), self.key(b)
        try:
            return bool(a < b)
        except TypeError as e:
            logger.debug("Comparison failed: %r < %r", a, b)
            raise NotComparableError(a, b) from e

    def __repr__(self) -> str:
        return f"Comparator(key={self.key!r}, comparisons={self.comparisons})"

"""
=============================================================================
SPLITTER
=============================================================================

Step one of merge sort: cut the sequence in two.

    [5, 2, 9, 1, 7]
           │
           ▼  k = 5 // 2 = 2
    ┌──────────┐ ┌─────────────┐
    │ [5, 2]   │ │ [9, 1, 7]   │
    └──────────┘ └─────────────┘
       left          right

The left half gets floor(n/2) elements, the right half the rest. For
n = 0 or n = 1 the left half is empty, which is fine: the sorter never
splits sequences that short anyway.

Gluing the halves back together gives the original sequence:

    left + right == list(seq)

=============================================================================
"""

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def split_sequence(seq: Sequence[T]) -> Tuple[List[T], List[T]]:
    """
    Split ``seq`` into two contiguous halves.

    Args:
        seq: Any sized, sliceable sequence. It is not modified.

    Returns:
        ``(left, right)`` as new lists, ``len(left) == len(seq) // 2``.
    """
    items = list(seq)
    k = len(items) // 2
    return items[:k], items[k:]

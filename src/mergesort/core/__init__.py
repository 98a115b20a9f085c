"""
=============================================================================
MERGE SORT BUILDING BLOCKS
=============================================================================

The sorter is assembled from three small, pure pieces:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   split.py     Splitter    [5,2,9,1] → ([5,2], [9,1])               │
    │   merge.py     Merger      ([2,5], [1,9]) → [1,2,5,9]               │
    │   compare.py   Comparator  "is b < a?" (+ key, + counting)          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

None of them keeps state between calls and none of them mutates its
input, so they are safe to call from any number of threads at once.

=============================================================================
"""

from .compare import Comparator
from .split import split_sequence
from .merge import (
    DEFAULT_RECURSIVE_MERGE_LIMIT,
    MergeStrategy,
    get_merger,
    iter_merge,
    merge_sorted,
    merge_sorted_recursive,
)

__all__ = [
    "Comparator",                     # Strict less-than with key + counter
    "split_sequence",                 # Splitter
    "merge_sorted",                   # Iterative merge (default)
    "merge_sorted_recursive",         # Naive recursive merge (bounded)
    "iter_merge",                     # Lazy merge (generator)
    "MergeStrategy",                  # Enum of merge strategies
    "get_merger",                     # Strategy -> merge function
    "DEFAULT_RECURSIVE_MERGE_LIMIT",
]

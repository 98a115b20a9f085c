"""
=============================================================================
MERGESORT - A Stable Merge Sort, Explained Step by Step
=============================================================================

This package implements merge sort from scratch, with three ways of
writing the merge step side by side so the trade-offs can be read in the
code rather than just described.

=============================================================================
PROJECT OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     MERGE SORT ARCHITECTURE                         │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. SPLITTER                                                       │
    │      - Cut a sequence into two contiguous halves                    │
    │                                                                      │
    │   2. MERGER                                                         │
    │      - Combine two sorted lists into one (stable, left wins ties)  │
    │      - Iterative (default), naive recursive, lazy generator        │
    │                                                                      │
    │   3. SORTER                                                         │
    │      - Split until trivially sorted, merge back bottom-up          │
    │      - Optional key function, like sorted(key=...)                 │
    │      - Optional statistics (comparisons, merges, depth, time)      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    mergesort/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m mergesort)
    ├── sorter.py            # merge_sort(), sort_with_stats()
    ├── config.py            # SortConfig dataclass, setup_logging()
    ├── errors.py            # Exception hierarchy
    ├── stats.py             # SortStats record
    ├── verify.py            # Property checks (sorted, permutation, stable)
    └── core/                # Pure building blocks
        ├── split.py         # Splitter
        ├── merge.py         # Merge strategies
        └── compare.py       # Comparator

=============================================================================
QUICK START
=============================================================================

    from mergesort import merge_sort, sort_with_stats

    merge_sort([3, 1, 2])                       # [1, 2, 3]
    merge_sort([])                              # []
    merge_sort(words, key=str.lower)

    result, stats = sort_with_stats(range(50, 0, -1))
    print(stats.to_text())

=============================================================================
GUARANTEES
=============================================================================

- The input is never mutated; a new list is always returned.
- Output has the same length and elements as the input, in non-descending
  order, with equal elements in input order (stable).
- O(n log n) comparisons, O(n) extra memory.
- Elements that cannot be compared raise NotComparableError immediately.

=============================================================================
"""

__version__ = "1.0.0"

from .sorter import merge_sort, sort_with_stats
from .config import SortConfig
from .core import MergeStrategy, merge_sorted, split_sequence
from .errors import MergeSortError, NotComparableError, RecursionLimitError
from .stats import SortStats

__all__ = [
    "merge_sort",
    "sort_with_stats",
    "SortConfig",
    "SortStats",
    "MergeStrategy",
    "merge_sorted",
    "split_sequence",
    "MergeSortError",
    "NotComparableError",
    "RecursionLimitError",
    "__version__",
]

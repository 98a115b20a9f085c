"""
=============================================================================
SORTER
=============================================================================

Merge sort in three lines of logic:

    1. A sequence with 0 or 1 elements is already sorted.
    2. Otherwise split it in two and merge-sort each half.
    3. Merge the two sorted halves.

=============================================================================
RECURSION TREE
=============================================================================

    merge_sort([5, 2, 9, 1])
    │
    ├── split → [5, 2]                 [9, 1]
    │           │                      │
    │           ├── [5]  [2]           ├── [9]  [1]      ← base cases
    │           └── merge → [2, 5]     └── merge → [1, 9]
    │
    └── merge([2, 5], [1, 9]) → [1, 2, 5, 9]

Each level of the tree touches every element once (n work per level) and
halving gives log2(n) levels, hence O(n log n) comparisons.

The sorter itself only recurses log2(n) deep: sorting a million elements
needs about 20 nested calls. Only the MERGE can blow the stack, which is
why the merge strategy matters (see core/merge.py).

=============================================================================
USAGE
=============================================================================

    from mergesort import merge_sort

    merge_sort([3, 1, 2])                       # [1, 2, 3]
    merge_sort(["bb", "a", "ccc"], key=len)     # ['a', 'bb', 'ccc']
    merge_sort(data, strategy="lazy")

    result, stats = sort_with_stats(data)
    print(stats.to_text())

=============================================================================
"""

import json
import logging
import time
from operator import itemgetter
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from .config import SortConfig
from .core.compare import Comparator
from .core.merge import MergeStrategy, get_merger
from .core.split import split_sequence
from .stats import SortStats


logger = logging.getLogger(__name__)

T = TypeVar("T")


class _SortRun:
    """
    State of one top-level sort call.

    Holds the comparator and counters so the recursive helper does not
    have to thread them through every call.

    With a key function, every element is decorated ONCE as
    ``(key(element), element)`` and only the first slot is compared, so
    ``key`` runs n times like in ``sorted()``, not twice per comparison.
    """

    def __init__(
        self,
        strategy: MergeStrategy,
        key: Optional[Callable[[Any], Any]],
        config: SortConfig,
    ):
        self.strategy = strategy
        self.key = key
        self.comparator = Comparator(itemgetter(0) if key is not None else None)
        self.merger = get_merger(strategy, config.recursive_merge_limit)
        self.merges = 0
        self.max_depth = 0

    def run(self, items: List[T]) -> List[T]:
        if self.key is None:
            return self.sort(items)
        decorated = [(self.key(x), x) for x in items]
        return [x for _, x in self.sort(decorated)]

    def sort(self, items: List[T], depth: int = 0) -> List[T]:
        if depth > self.max_depth:
            self.max_depth = depth
        if len(items) <= 1:
            return list(items)

        left, right = split_sequence(items)
        left = self.sort(left, depth + 1)
        right = self.sort(right, depth + 1)

        self.merges += 1
        return self.merger(left, right, self.comparator)


def _resolve(strategy, config: Optional[SortConfig]) -> Tuple[MergeStrategy, SortConfig]:
    config = config or SortConfig()
    if strategy is None:
        strategy = config.strategy
    return MergeStrategy.parse(strategy), config


def merge_sort(
    seq: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    strategy=None,
    config: Optional[SortConfig] = None,
) -> List[T]:
    """
    Return a new list with the elements of ``seq`` in non-descending order.

    The sort is stable: elements that compare equal keep their input order.
    ``seq`` itself is never modified.

    Args:
        seq: Any finite iterable of mutually comparable elements.
        key: One-argument function extracting the comparison key, same
             meaning as in ``sorted()``.
        strategy: A MergeStrategy or "iterative" / "recursive" / "lazy".
                  Defaults to ``config.strategy``.
        config: Settings for this call. Defaults to ``SortConfig()``.

    Returns:
        A fresh sorted list.

    Raises:
        NotComparableError: Two elements (or keys) cannot be ordered.
        RecursionLimitError: The recursive strategy was asked to merge
            more than ``config.recursive_merge_limit`` elements.
        ValueError: Unknown strategy.
    """
    strategy, config = _resolve(strategy, config)
    items = list(seq)
    run = _SortRun(strategy, key, config)
    result = run.run(items)
    logger.debug(
        "Sorted %d elements (%s, %d comparisons)",
        len(items), strategy.value, run.comparator.comparisons,
    )
    return result


def sort_with_stats(
    seq: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    strategy=None,
    config: Optional[SortConfig] = None,
) -> Tuple[List[T], SortStats]:
    """
    Sort like merge_sort() and also return a SortStats record.

    The record is logged on the ``mergesort.sorter`` logger at
    ``config.stats_log_level``, in ``config.log_format``.
    """
    strategy, config = _resolve(strategy, config)
    items = list(seq)
    run = _SortRun(strategy, key, config)

    start_time = time.perf_counter()
    result = run.run(items)
    duration_ms = (time.perf_counter() - start_time) * 1000

    stats = SortStats(
        strategy=strategy.value,
        input_length=len(items),
        comparisons=run.comparator.comparisons,
        merges=run.merges,
        max_depth=run.max_depth,
        duration_ms=duration_ms,
    )

    if config.log_format == "json":
        logger.log(config.stats_level, json.dumps(stats.to_dict()))
    else:
        logger.log(config.stats_level, stats.to_text())

    return result, stats

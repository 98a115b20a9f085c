"""
=============================================================================
MERGER
=============================================================================

Step two of merge sort: combine two SORTED lists into one sorted list.

    a = [1, 4, 6]        b = [2, 3, 7]
         ▲                    ▲
         i                    j

    compare heads → take the smaller → advance that cursor → repeat

    result: [1] → [1, 2] → [1, 2, 3] → [1, 2, 3, 4] → [1, 2, 3, 4, 6]
            b ran out of smaller values; a ran out → append rest of b
            → [1, 2, 3, 4, 6, 7]

=============================================================================
STABILITY
=============================================================================

When the two heads are equal, the head of ``a`` goes first. Since ``a`` is
always the LEFT half of the input, equal elements keep their input order.
That is what makes merge sort a stable sort.

We only ever ask "is b[j] < a[i]?". If not (a[i] is smaller OR equal), we
take from ``a``.

=============================================================================
THREE WAYS TO WRITE THE SAME MERGE
=============================================================================

    ┌─────────────┬──────────────────────────┬───────────────────────────┐
    │ Strategy    │ How                      │ Stack depth               │
    ├─────────────┼──────────────────────────┼───────────────────────────┤
    │ ITERATIVE   │ while-loop + accumulator │ O(1) - safe for any size  │
    │ RECURSIVE   │ one call per element     │ O(n) - refuses big inputs │
    │ LAZY        │ generator, on demand     │ O(1) - safe for any size  │
    └─────────────┴──────────────────────────┴───────────────────────────┘

The recursive version is the most "mathematical" one to read:

    merge([],   b)   = b
    merge(a,    [])  = a
    merge(x:a', y:b') = y : merge(x:a', b')   if y < x
                      = x : merge(a', y:b')   otherwise

but every element costs one stack frame. Python's default recursion
limit is 1000 frames, so merging two lists of 600 elements each would
crash with RecursionError. The recursive merge therefore checks its input
size against a limit BEFORE it starts and raises RecursionLimitError.

The iterative version is the same recursion turned into a loop: the
partial result that the recursive version keeps on the call stack is
carried in an explicit accumulator list instead (the "accumulator
pattern"). This is the default and the one to use for real data.

The lazy version yields one element at a time. Nothing is computed until
somebody asks for the next element.

=============================================================================
"""

import functools
import logging
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, TypeVar

from .compare import Comparator
from ..errors import RecursionLimitError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Leaves room under Python's default recursion limit (1000) for the
# sorter's own O(log n) frames and whatever called us.
DEFAULT_RECURSIVE_MERGE_LIMIT = 500


class MergeStrategy(Enum):
    """Which merge formulation the sorter uses."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"
    LAZY = "lazy"

    @classmethod
    def parse(cls, value) -> "MergeStrategy":
        """
        Accept a MergeStrategy or its string value ("iterative", ...).

        Raises:
            ValueError: For an unknown name, listing the valid ones.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown merge strategy: {value!r}. Must be one of: {valid}"
            ) from None


# ═══════════════════════════════════════════════════════════════════════════
# ITERATIVE MERGE (default)
# ═══════════════════════════════════════════════════════════════════════════

def merge_sorted(
    a: Sequence[T],
    b: Sequence[T],
    comparator: Optional[Comparator] = None,
) -> List[T]:
    """
    Merge two sorted sequences into a new sorted list.

    Runs at most ``len(a) + len(b)`` steps and never recurses.

    Args:
        a: Sorted sequence, wins ties.
        b: Sorted sequence.
        comparator: Ordering to use. Defaults to plain ``<``.

    Returns:
        A new list; ``a`` and ``b`` are left untouched.
    """
    less = (comparator or Comparator()).less
    result: List[T] = []
    i = j = 0
    len_a, len_b = len(a), len(b)

    while True:
        if i == len_a:
            result.extend(b[j:])
            return result
        if j == len_b:
            result.extend(a[i:])
            return result

        if less(b[j], a[i]):
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1


# ═══════════════════════════════════════════════════════════════════════════
# NAIVE RECURSIVE MERGE (didactic)
# ═══════════════════════════════════════════════════════════════════════════

def merge_sorted_recursive(
    a: Sequence[T],
    b: Sequence[T],
    comparator: Optional[Comparator] = None,
    limit: int = DEFAULT_RECURSIVE_MERGE_LIMIT,
) -> List[T]:
    """
    Merge two sorted sequences by recursing once per placed element.

    Kept for teaching: it reads like the textbook definition, but uses
    O(len(a) + len(b)) stack frames and copies on every step.

    Raises:
        RecursionLimitError: If ``len(a) + len(b) > limit``.
    """
    size = len(a) + len(b)
    if size > limit:
        raise RecursionLimitError(size, limit)

    less = (comparator or Comparator()).less

    def go(i: int, j: int) -> List[T]:
        if i == len(a):
            return list(b[j:])
        if j == len(b):
            return list(a[i:])
        if less(b[j], a[i]):
            return [b[j]] + go(i, j + 1)
        return [a[i]] + go(i + 1, j)

    return go(0, 0)


# ═══════════════════════════════════════════════════════════════════════════
# LAZY MERGE
# ═══════════════════════════════════════════════════════════════════════════

def iter_merge(
    a: Sequence[T],
    b: Sequence[T],
    comparator: Optional[Comparator] = None,
) -> Iterator[T]:
    """
    Yield the stable merge of ``a`` and ``b`` one element at a time.

    Useful when only the first few elements are needed:

        >>> from itertools import islice
        >>> list(islice(iter_merge([1, 5, 9], [2, 3, 4]), 3))
        [1, 2, 3]
    """
    less = (comparator or Comparator()).less
    i = j = 0
    len_a, len_b = len(a), len(b)

    while i < len_a and j < len_b:
        if less(b[j], a[i]):
            yield b[j]
            j += 1
        else:
            yield a[i]
            i += 1

    yield from a[i:]
    yield from b[j:]


def _merge_lazy(
    a: Sequence[T],
    b: Sequence[T],
    comparator: Optional[Comparator] = None,
) -> List[T]:
    return list(iter_merge(a, b, comparator))


# ═══════════════════════════════════════════════════════════════════════════
# STRATEGY LOOKUP
# ═══════════════════════════════════════════════════════════════════════════

Merger = Callable[[Sequence[T], Sequence[T], Optional[Comparator]], List[T]]


def get_merger(
    strategy,
    recursive_limit: int = DEFAULT_RECURSIVE_MERGE_LIMIT,
) -> Merger:
    """
    Return the merge function for ``strategy``.

    Every returned function has the signature ``(a, b, comparator) -> list``.
    """
    strategy = MergeStrategy.parse(strategy)
    if strategy is MergeStrategy.RECURSIVE:
        return functools.partial(merge_sorted_recursive, limit=recursive_limit)
    if strategy is MergeStrategy.LAZY:
        return _merge_lazy
    return merge_sorted

"""
=============================================================================
SORT STATISTICS
=============================================================================

A structured record describing one sort call.

    TEXT FORMAT:
    ┌─────────────────────────────────────────────────────────────────────┐
    │ strategy=iterative n=50 comparisons=221 merges=49 depth=6 0.08ms    │
    └─────────────────────────────────────────────────────────────────────┘

    JSON FORMAT:
    ┌─────────────────────────────────────────────────────────────────────┐
    │ {"strategy": "iterative", "input_length": 50, "comparisons": 221,   │
    │  "merges": 49, "max_depth": 6, "duration_ms": 0.08}                 │
    └─────────────────────────────────────────────────────────────────────┘

The numbers make the O(n log n) claim visible: for n elements, merge sort
performs exactly n - 1 merges, splits ceil(log2 n) levels deep, and makes
at most about n * log2(n) comparisons.

=============================================================================
"""

from dataclasses import dataclass


@dataclass
class SortStats:
    """
    Structured record of one sort call.

    Attributes:
        strategy: Merge strategy name.
        input_length: Number of elements sorted.
        comparisons: How many times ``<`` was evaluated.
        merges: Number of merge calls (n - 1 for n >= 1).
        max_depth: Deepest split level reached (0 for n <= 1).
        duration_ms: Wall-clock time of the call.
    """

    strategy: str
    input_length: int
    comparisons: int = 0
    merges: int = 0
    max_depth: int = 0
    duration_ms: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "strategy": self.strategy,
            "input_length": self.input_length,
            "comparisons": self.comparisons,
            "merges": self.merges,
            "max_depth": self.max_depth,
            "duration_ms": round(self.duration_ms, 2),
        }

    def to_text(self) -> str:
        """Format as a single key=value line."""
        return (
            f"strategy={self.strategy} n={self.input_length} "
            f"comparisons={self.comparisons} merges={self.merges} "
            f"depth={self.max_depth} {self.duration_ms:.2f}ms"
        )

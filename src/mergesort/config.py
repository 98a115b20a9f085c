"""
=============================================================================
SORT CONFIGURATION
=============================================================================

Centralized configuration for the mergesort package.

The sort functions take plain keyword arguments for the common case
(``merge_sort(data, strategy="lazy")``). SortConfig collects the settings
that are usually chosen once per program: default strategy, the size limit
of the recursive merge, and how the package logs.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Function arguments / command-line flags                        │
    │      └── python -m mergesort --strategy lazy 3 1 2                  │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── MERGESORT_STRATEGY=lazy python -m mergesort 3 1 2          │
    │                                                                      │
    │   3. Default values (in this dataclass)                             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import logging
import os
from dataclasses import dataclass

from .core.merge import DEFAULT_RECURSIVE_MERGE_LIMIT, MergeStrategy


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class SortConfig:
    """
    Configuration for merge sort calls.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    ALGORITHM
    - strategy, recursive_merge_limit

    LOGGING
    - log_level, log_format, stats_log_level

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # ALGORITHM
    # ─────────────────────────────────────────────────────────────────────

    strategy: str = MergeStrategy.ITERATIVE.value
    """
    Merge strategy used when a call does not pick one.
    - "iterative" - loop + accumulator, any input size
    - "recursive" - textbook recursion, bounded by recursive_merge_limit
    - "lazy"      - generator based
    """

    recursive_merge_limit: int = DEFAULT_RECURSIVE_MERGE_LIMIT
    """
    Largest merge (len(a) + len(b)) the recursive strategy will attempt.
    Each merged element costs one stack frame.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "INFO"
    """Level for the ``mergesort`` logger (DEBUG, INFO, WARNING, ...)."""

    log_format: str = "text"
    """
    Format of SortStats records: 'text' or 'json'.
    JSON is better for log aggregators, text for humans.
    """

    stats_log_level: str = "DEBUG"
    """Level at which sort_with_stats() emits its record."""

    @classmethod
    def from_env(cls) -> "SortConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        MERGESORT_STRATEGY               Merge strategy (default: iterative)
        MERGESORT_RECURSIVE_MERGE_LIMIT  Recursive merge limit (default: 500)
        MERGESORT_LOG_LEVEL              Logging level (default: INFO)
        MERGESORT_LOG_FORMAT             text or json (default: text)
        MERGESORT_STATS_LOG_LEVEL        Stats record level (default: DEBUG)

        =====================================================================
        """
        return cls(
            strategy=os.getenv("MERGESORT_STRATEGY", MergeStrategy.ITERATIVE.value),
            recursive_merge_limit=int(os.getenv(
                "MERGESORT_RECURSIVE_MERGE_LIMIT",
                str(DEFAULT_RECURSIVE_MERGE_LIMIT),
            )),
            log_level=os.getenv("MERGESORT_LOG_LEVEL", "INFO"),
            log_format=os.getenv("MERGESORT_LOG_FORMAT", "text"),
            stats_log_level=os.getenv("MERGESORT_STATS_LOG_LEVEL", "DEBUG"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Fails fast with ValueError, before any sorting happens.
        """
        MergeStrategy.parse(self.strategy)

        if self.recursive_merge_limit < 1:
            raise ValueError("recursive_merge_limit must be >= 1")

        for name in ("log_level", "stats_log_level"):
            value = getattr(self, name)
            if value.upper() not in LOG_LEVELS:
                raise ValueError(
                    f"Invalid {name}: {value}. Must be one of: {', '.join(LOG_LEVELS)}"
                )

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be 'text' or 'json', got {self.log_format!r}")

    @property
    def merge_strategy(self) -> MergeStrategy:
        return MergeStrategy.parse(self.strategy)

    @property
    def stats_level(self) -> int:
        return getattr(logging, self.stats_log_level.upper(), logging.DEBUG)


def setup_logging(config: SortConfig) -> None:
    """
    Configure logging based on config.

    Only entry points call this. Importing the library never touches the
    logging configuration.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("mergesort").setLevel(level)

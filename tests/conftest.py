"""
pytest configuration and fixtures.
"""

import random
from typing import List

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mergesort import MergeStrategy, SortConfig


ALL_STRATEGIES = [s.value for s in MergeStrategy]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def shuffled_50(rng: random.Random) -> List[int]:
    """The integers 0..49 in random order."""
    values = list(range(50))
    rng.shuffle(values)
    return values


@pytest.fixture
def records() -> List[tuple]:
    """(name, score) records with repeated scores, for stability checks."""
    return [
        ("alice", 3),
        ("bob", 1),
        ("carol", 3),
        ("dave", 2),
        ("erin", 1),
        ("frank", 3),
        ("grace", 2),
    ]


@pytest.fixture
def config() -> SortConfig:
    """Default test configuration."""
    return SortConfig(log_level="WARNING")


@pytest.fixture(params=ALL_STRATEGIES)
def strategy(request) -> str:
    """Run a test once per merge strategy."""
    return request.param

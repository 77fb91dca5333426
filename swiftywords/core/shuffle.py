"""Uniform random permutations, injectable so games can be replayed."""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

# A shuffler returns a new list holding a permutation of its input.
Shuffler = Callable[[Sequence[T]], List[T]]


def system_shuffle(items: Sequence[T]) -> List[T]:
    """Shuffle with the process-wide random source."""
    return random.sample(list(items), len(items))


def seeded_shuffler(seed: int) -> Shuffler:
    """Return a shuffler whose sequence of permutations is fixed by ``seed``."""
    rng = random.Random(seed)

    def _shuffle(items: Sequence[T]) -> List[T]:
        return rng.sample(list(items), len(items))

    return _shuffle


def make_shuffler(seed: Optional[int] = None) -> Shuffler:
    if seed is None:
        return system_shuffle
    return seeded_shuffler(seed)

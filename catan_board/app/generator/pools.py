"""Fixed terrain and number-token pools, and pure helpers to deal from them."""

from __future__ import annotations

import collections
import random
from collections.abc import Iterable, Sequence
from typing import TypeVar

from ..models.board import NUMBER_POOL, TERRAIN_COUNTS, Cell, Terrain

T = TypeVar('T')

TERRAIN_POOL: tuple[Terrain, ...] = tuple(
    terrain for terrain, count in TERRAIN_COUNTS.items() for _ in range(count)
)

# Dots printed under each number: the count of two-dice rolls producing it.
PIP_WEIGHTS: dict[int, int] = {
    2: 1,
    12: 1,
    3: 2,
    11: 2,
    4: 3,
    10: 3,
    5: 4,
    9: 4,
    6: 5,
    8: 5,
}


def pip_weight(number: int | None) -> int:
    """Return the pip weight of a token, or 0 for no token."""
    if number is None:
        return 0
    return PIP_WEIGHTS[number]


def shuffled(pool: Iterable[T], rng: random.Random) -> list[T]:
    """Return a uniformly shuffled copy of ``pool``; the input is left untouched."""
    items = list(pool)
    rng.shuffle(items)
    return items


def assign_from_pool(pool: Sequence[T], count: int) -> tuple[list[T], list[T]]:
    """Take ``count`` items off the end of ``pool`` as if popping a stack.

    Returns ``(assigned, remaining)``: ``assigned[0]`` is the last item of
    ``pool``, and ``remaining`` holds the untouched prefix in its original
    order.
    """
    if count < 0 or count > len(pool):
        raise ValueError(f'Cannot take {count} items from a pool of {len(pool)}')
    split = len(pool) - count
    return list(reversed(pool[split:])), list(pool[:split])


def matches_standard_pools(cells: Sequence[Cell]) -> bool:
    """True if the cells use exactly the standard terrain and number tokens."""
    terrain_counts = collections.Counter(cell.terrain for cell in cells)
    if terrain_counts != collections.Counter(TERRAIN_COUNTS):
        return False
    for cell in cells:
        if (cell.terrain is Terrain.DESERT) != (cell.number is None):
            return False
    numbers = sorted(cell.number for cell in cells if cell.number is not None)
    return numbers == sorted(NUMBER_POOL)

"""Static adjacency graph of the standard 19-cell board.

Cells are numbered row by row, top to bottom and left to right, with rows of
3, 4, 5, 4 and 3 cells::

        0   1   2
      3   4   5   6
    7   8   9  10  11
     12  13  14  15
       16  17  18

Each cell touches up to six others. The table is symmetric and never
mutated.
"""

from __future__ import annotations

from collections.abc import Iterator

ADJACENCY: dict[int, frozenset[int]] = {
    0: frozenset({1, 3, 4}),
    1: frozenset({0, 2, 4, 5}),
    2: frozenset({1, 5, 6}),
    3: frozenset({0, 4, 7, 8}),
    4: frozenset({0, 1, 3, 5, 8, 9}),
    5: frozenset({1, 2, 4, 6, 9, 10}),
    6: frozenset({2, 5, 10, 11}),
    7: frozenset({3, 8, 12}),
    8: frozenset({3, 4, 7, 9, 12, 13}),
    9: frozenset({4, 5, 8, 10, 13, 14}),
    10: frozenset({5, 6, 9, 11, 14, 15}),
    11: frozenset({6, 10, 15}),
    12: frozenset({7, 8, 13, 16}),
    13: frozenset({8, 9, 12, 14, 16, 17}),
    14: frozenset({9, 10, 13, 15, 17, 18}),
    15: frozenset({10, 11, 14, 18}),
    16: frozenset({12, 13, 17}),
    17: frozenset({13, 14, 16, 18}),
    18: frozenset({14, 15, 17}),
}

# Cells per board row, top to bottom.
ROW_LENGTHS: tuple[int, ...] = (3, 4, 5, 4, 3)


def neighbors(cell_id: int) -> frozenset[int]:
    """Return the ids of the cells touching ``cell_id``."""
    return ADJACENCY[cell_id]


def edges() -> Iterator[tuple[int, int]]:
    """Yield every pair of touching cells once, as ``(lower_id, higher_id)``."""
    for cell_id, adjacent in sorted(ADJACENCY.items()):
        for other in sorted(adjacent):
            if other > cell_id:
                yield cell_id, other

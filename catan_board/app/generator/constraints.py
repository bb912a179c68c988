"""Placement rules checked against candidate layouts.

Every predicate is pure and works on any sequence of 19 cells indexed by
id, including candidates whose numbers have not been dealt yet (number
rules then find nothing to reject). Checking is cheap enough, roughly one
pass over the 42 board edges, to re-run on every attempt.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.board import Cell, ClumpingMode, RuleConfig, Terrain
from . import adjacency

HIGH_NUMBERS: frozenset[int] = frozenset({6, 8})
EXTREME_NUMBERS: frozenset[int] = frozenset({2, 12})

# Largest same-terrain group allowed under ClumpingMode.CLUSTER.
MAX_CLUSTER_SIZE = 2

# Names reported by violations().
HIGH_ADJACENCY = 'high_adjacency'
EXTREME_ADJACENCY = 'extreme_adjacency'
CLUMPING = 'clumping'

# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


def _numbers_touch(cells: Sequence[Cell], numbers: frozenset[int]) -> bool:
    for first, second in adjacency.edges():
        if cells[first].number in numbers and cells[second].number in numbers:
            return True
    return False


def violates_high_adjacency(cells: Sequence[Cell]) -> bool:
    """True if any 6 or 8 touches another 6 or 8."""
    return _numbers_touch(cells, HIGH_NUMBERS)


def violates_extreme_adjacency(cells: Sequence[Cell]) -> bool:
    """True if any 2 or 12 touches another 2 or 12."""
    return _numbers_touch(cells, EXTREME_NUMBERS)


def same_terrain_regions(cells: Sequence[Cell]) -> list[frozenset[int]]:
    """Split the producing cells into maximal connected same-terrain regions.

    Uses an iterative flood fill over the adjacency graph. The desert never
    joins a region. Regions are returned in order of their lowest cell id.
    """
    seen: set[int] = set()
    regions: list[frozenset[int]] = []
    for cell in cells:
        if cell.terrain is Terrain.DESERT or cell.id in seen:
            continue
        region = {cell.id}
        stack = [cell.id]
        while stack:
            current = stack.pop()
            for other in adjacency.neighbors(current):
                if other not in region and cells[other].terrain is cell.terrain:
                    region.add(other)
                    stack.append(other)
        seen |= region
        regions.append(frozenset(region))
    return regions


def violates_clumping(
    cells: Sequence[Cell], mode: ClumpingMode = ClumpingMode.ADJACENT
) -> bool:
    """True if same-terrain cells clump together.

    With ``ClumpingMode.ADJACENT`` any two touching cells of the same terrain
    count. With ``ClumpingMode.CLUSTER`` only regions larger than
    :data:`MAX_CLUSTER_SIZE` do.
    """
    if mode is ClumpingMode.CLUSTER:
        return any(
            len(region) > MAX_CLUSTER_SIZE for region in same_terrain_regions(cells)
        )
    for first, second in adjacency.edges():
        terrain = cells[first].terrain
        if terrain is not Terrain.DESERT and cells[second].terrain is terrain:
            return True
    return False


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------


def terrain_violations(cells: Sequence[Cell], rules: RuleConfig) -> list[str]:
    """Return the enabled terrain-only rules the candidate breaks."""
    if rules.prevent_clumping and violates_clumping(cells, rules.clumping_mode):
        return [CLUMPING]
    return []


def number_violations(cells: Sequence[Cell], rules: RuleConfig) -> list[str]:
    """Return the enabled number rules the candidate breaks."""
    broken: list[str] = []
    if rules.prevent_high_adjacency and violates_high_adjacency(cells):
        broken.append(HIGH_ADJACENCY)
    if rules.prevent_extreme_adjacency and violates_extreme_adjacency(cells):
        broken.append(EXTREME_ADJACENCY)
    return broken


def violations(cells: Sequence[Cell], rules: RuleConfig) -> list[str]:
    """Return the names of every enabled rule the candidate breaks."""
    return terrain_violations(cells, rules) + number_violations(cells, rules)


def is_valid(cells: Sequence[Cell], rules: RuleConfig) -> bool:
    """True if the candidate satisfies every enabled rule."""
    return not violations(cells, rules)

"""Intersection scoring: how much production touches each board vertex.

Corners are computed per cell from the static geometry table and snapped to
a coarse grid so that the same vertex computed from different cells lands
on the same key. Each producing cell adds its pip weight to all six of its
corners; the desert adds nothing.
"""

from __future__ import annotations

import collections
import math
from collections.abc import Mapping

from ..models.board import BoardLayout, IntersectionPoint, Terrain
from . import geometry, pools

SNAP = 5


def snap(value: float) -> int:
    """Round ``value`` to the nearest multiple of :data:`SNAP`, halves up."""
    return int(math.floor(value / SNAP + 0.5)) * SNAP


def corner_contributions(
    layout: BoardLayout,
    board_geometry: Mapping[int, geometry.Point] = geometry.STANDARD_GEOMETRY,
) -> list[tuple[int, int, int]]:
    """Return one ``(x, y, pip_weight)`` triple per corner of each producing cell."""
    contributions: list[tuple[int, int, int]] = []
    for cell in layout.cells:
        if cell.terrain is Terrain.DESERT:
            continue
        weight = pools.pip_weight(cell.number)
        for x, y in geometry.hex_corners(board_geometry[cell.id]):
            contributions.append((snap(x), snap(y), weight))
    return contributions


def aggregate(
    layout: BoardLayout,
    board_geometry: Mapping[int, geometry.Point] = geometry.STANDARD_GEOMETRY,
) -> list[IntersectionPoint]:
    """Sum corner contributions per vertex, ordered top to bottom, left to right."""
    scores: collections.Counter[tuple[int, int]] = collections.Counter()
    for x, y, weight in corner_contributions(layout, board_geometry):
        scores[(x, y)] += weight
    return [
        IntersectionPoint(x=x, y=y, pip_score=score)
        for (x, y), score in sorted(scores.items(), key=lambda item: item[0][::-1])
    ]

"""Per-resource production totals for a generated layout."""

from __future__ import annotations

from ..models.board import RESOURCES, BoardLayout, ResourceStat
from . import pools


def resource_stats(layout: BoardLayout) -> list[ResourceStat]:
    """Return the total pip weight of each resource, in display order.

    ``percent`` is relative to the best-producing resource, so the leader
    always reads 100.
    """
    totals = {resource: 0 for resource in RESOURCES}
    for cell in layout.cells:
        if cell.terrain in totals:
            totals[cell.terrain] += pools.pip_weight(cell.number)

    best = max(max(totals.values()), 1)
    return [
        ResourceStat(resource=resource, pips=pips, percent=pips / best * 100)
        for resource, pips in totals.items()
    ]

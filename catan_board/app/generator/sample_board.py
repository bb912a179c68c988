"""A hand-built standard board shared by the generator tests.

It passes every placement rule: no touching terrains, no touching 6/8 and no
touching 2/12. The desert is on cell 4.
"""

from __future__ import annotations

from ..models.board import BoardLayout, Cell, Terrain

TERRAINS = [
    'ore', 'wood', 'sheep',
    'wood', 'desert', 'wheat', 'wood',
    'sheep', 'wheat', 'wood', 'sheep', 'wheat',
    'brick', 'sheep', 'wheat', 'brick',
    'ore', 'brick', 'ore',
]  # fmt: skip

NUMBERS = [
    6, 3, 8,
    3, None, 4, 4,
    2, 5, 5, 9, 6,
    9, 10, 10, 11,
    8, 11, 12,
]  # fmt: skip


def cells(
    terrains: list[str] = TERRAINS, numbers: list[int | None] = NUMBERS
) -> list[Cell]:
    """Build cells 0-18, which need not form a valid layout."""
    return [
        Cell(id=i, terrain=Terrain(terrain), number=number)
        for i, (terrain, number) in enumerate(zip(terrains, numbers, strict=True))
    ]


def layout(
    terrains: list[str] = TERRAINS, numbers: list[int | None] = NUMBERS
) -> BoardLayout:
    return BoardLayout(cells=tuple(cells(terrains, numbers)))

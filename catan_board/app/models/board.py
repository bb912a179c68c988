"""Catan board layout data models.

Defines terrain and port types, the rule configuration accepted by the
generator, the 19-cell layout it produces, and the derived port,
intersection and statistics records handed to the rendering layer.
"""

from __future__ import annotations

import collections
import enum

import pydantic

# Number of land cells on the standard board.
CELL_COUNT = 19

# Dice totals that can appear on a number token (7 is the robber roll).
TOKEN_VALUES: frozenset[int] = frozenset({2, 3, 4, 5, 6, 8, 9, 10, 11, 12})


class Terrain(enum.StrEnum):
    """Terrain of a land cell, named after the resource it produces."""

    WOOD = 'wood'
    BRICK = 'brick'
    SHEEP = 'sheep'
    WHEAT = 'wheat'
    ORE = 'ore'
    DESERT = 'desert'  # produces nothing


# The five producing terrains, in display order.
RESOURCES: tuple[Terrain, ...] = (
    Terrain.WOOD,
    Terrain.BRICK,
    Terrain.SHEEP,
    Terrain.WHEAT,
    Terrain.ORE,
)

# Standard terrain distribution (must sum to 19).
TERRAIN_COUNTS: dict[Terrain, int] = {
    Terrain.WOOD: 4,
    Terrain.BRICK: 3,
    Terrain.SHEEP: 4,
    Terrain.WHEAT: 4,
    Terrain.ORE: 3,
    Terrain.DESERT: 1,
}

# Standard number-token distribution (18 tokens for 18 non-desert cells).
NUMBER_POOL = (2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12)


class PortType(enum.StrEnum):
    """Port types: generic 3:1 or specific resource 2:1."""

    WOOD = 'wood'
    BRICK = 'brick'
    SHEEP = 'sheep'
    WHEAT = 'wheat'
    ORE = 'ore'
    GENERIC = 'generic'

    @property
    def ratio(self) -> str:
        """Trade ratio printed on the port."""
        return '3:1' if self is PortType.GENERIC else '2:1'


class ClumpingMode(enum.StrEnum):
    """How the clumping rule judges same-terrain neighbours.

    ``ADJACENT`` rejects any two touching cells of the same terrain.
    ``CLUSTER`` allows pairs but rejects connected groups of three or more.
    """

    ADJACENT = 'adjacent'
    CLUSTER = 'cluster'


class RuleConfig(pydantic.BaseModel):
    """Placement rules applied while generating a layout."""

    model_config = pydantic.ConfigDict(frozen=True)

    prevent_high_adjacency: bool = True  # no 6/8 next to another 6/8
    prevent_extreme_adjacency: bool = True  # no 2/12 next to another 2/12
    prevent_clumping: bool = False
    clumping_mode: ClumpingMode = ClumpingMode.ADJACENT
    fixed_ports: bool = False

    @property
    def checks_numbers(self) -> bool:
        """True if any rule needs the numbered candidate."""
        return self.prevent_high_adjacency or self.prevent_extreme_adjacency


class Cell(pydantic.BaseModel):
    """A single land hex: its fixed id, terrain and number token."""

    model_config = pydantic.ConfigDict(frozen=True)

    id: int = pydantic.Field(ge=0, lt=CELL_COUNT)
    terrain: Terrain
    number: int | None = None  # None for desert, or before numbers are dealt

    @pydantic.field_validator('number')
    @classmethod
    def _check_token(cls, value: int | None) -> int | None:
        if value is not None and value not in TOKEN_VALUES:
            raise ValueError(f'{value} is not a valid number token')
        return value

    @pydantic.model_validator(mode='after')
    def _desert_has_no_token(self) -> Cell:
        if self.terrain is Terrain.DESERT and self.number is not None:
            raise ValueError('The desert cannot carry a number token')
        return self


class BoardLayout(pydantic.BaseModel):
    """A complete, validated assignment of terrain and numbers to all 19 cells.

    ``cells[i].id == i`` always holds. Every non-desert cell carries a number,
    and the terrains and numbers use exactly the standard pools.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    cells: tuple[Cell, ...]

    @pydantic.model_validator(mode='after')
    def _check_shape(self) -> BoardLayout:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(
                f'Expected {CELL_COUNT} cells, received {len(self.cells)}'
            )
        for index, cell in enumerate(self.cells):
            if cell.id != index:
                raise ValueError(f'Cell at position {index} has id {cell.id}')
            if cell.terrain is not Terrain.DESERT and cell.number is None:
                raise ValueError(
                    f'Cell {index} ({cell.terrain}) has no number token'
                )
        deserts = [c for c in self.cells if c.terrain is Terrain.DESERT]
        if len(deserts) != 1:
            raise ValueError(f'Expected exactly one desert, found {len(deserts)}')
        terrain_counts = collections.Counter(c.terrain for c in self.cells)
        if terrain_counts != collections.Counter(TERRAIN_COUNTS):
            raise ValueError(
                f'Terrain counts {dict(terrain_counts)} differ from the standard set'
            )
        numbers = sorted(c.number for c in self.cells if c.number is not None)
        if numbers != sorted(NUMBER_POOL):
            raise ValueError(f'Number tokens {numbers} differ from the standard set')
        return self

    def cell(self, cell_id: int) -> Cell:
        """Return the cell with the given id."""
        return self.cells[cell_id]

    def desert(self) -> Cell:
        """Return the single desert cell."""
        return next(c for c in self.cells if c.terrain is Terrain.DESERT)


class PortSlot(pydantic.BaseModel):
    """A port placed on one of the water slots around the board."""

    model_config = pydantic.ConfigDict(frozen=True)

    slot_id: int = pydantic.Field(ge=0, lt=18)
    port_type: PortType
    angle: int  # degrees; points the port at its land cells

    @pydantic.computed_field
    @property
    def ratio(self) -> str:
        """Trade ratio of this port."""
        return self.port_type.ratio


# Water slot id -> port placed there.
PortAssignment = dict[int, PortSlot]


class IntersectionPoint(pydantic.BaseModel):
    """A board vertex and the summed pip weight of the cells meeting there."""

    model_config = pydantic.ConfigDict(frozen=True)

    x: int
    y: int
    pip_score: int = pydantic.Field(ge=0)


class ResourceStat(pydantic.BaseModel):
    """Total production weight of one resource across the board."""

    model_config = pydantic.ConfigDict(frozen=True)

    resource: Terrain
    pips: int
    percent: float  # share of the best-producing resource, 0-100


class GenerationExhausted(pydantic.BaseModel):
    """Returned when no layout satisfying the rules was found in time."""

    model_config = pydantic.ConfigDict(frozen=True)

    attempts: int
    rules: RuleConfig

    @property
    def message(self) -> str:
        """User-facing description of the failure."""
        return 'Could not generate a valid map with these settings.'


class BoardResponse(pydantic.BaseModel):
    """Everything the rendering layer needs to draw one generated board."""

    rules: RuleConfig
    layout: BoardLayout
    ports: PortAssignment
    intersections: list[IntersectionPoint]
    stats: list[ResourceStat]

"""Static drawing geometry for the 19 land cells.

Each cell is a pointy-top hex drawn in a 100 x 115 box. Rows sit 86 units
apart and shorter rows are indented by half a hex per missing cell, so
touching cells share corners exactly. Coordinates include a one-hex margin
for the water ring.
"""

from __future__ import annotations

Point = tuple[float, float]

HEX_WIDTH = 100
HEX_HEIGHT = 115
ROW_SPACING = 86
EDGE_INSET = 29  # vertical offset of the side corners from the box top

# Top-left corner of each land cell's box, by cell id.
STANDARD_GEOMETRY: dict[int, Point] = {
    0: (200, 86),
    1: (300, 86),
    2: (400, 86),
    3: (150, 172),
    4: (250, 172),
    5: (350, 172),
    6: (450, 172),
    7: (100, 258),
    8: (200, 258),
    9: (300, 258),
    10: (400, 258),
    11: (500, 258),
    12: (150, 344),
    13: (250, 344),
    14: (350, 344),
    15: (450, 344),
    16: (200, 430),
    17: (300, 430),
    18: (400, 430),
}


def hex_corners(origin: Point) -> list[Point]:
    """Return the six corners of the hex whose box starts at ``origin``.

    Corners run clockwise from the top.
    """
    left, top = origin
    centre_x = left + HEX_WIDTH / 2
    return [
        (centre_x, top),
        (left + HEX_WIDTH, top + EDGE_INSET),
        (left + HEX_WIDTH, top + HEX_HEIGHT - EDGE_INSET),
        (centre_x, top + HEX_HEIGHT),
        (left, top + HEX_HEIGHT - EDGE_INSET),
        (left, top + EDGE_INSET),
    ]

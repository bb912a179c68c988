"""Port placement on the water ring around the board."""

from __future__ import annotations

import random

from ..models.board import PortAssignment, PortSlot, PortType
from . import pools

# Water slots that hold a port, and the angle (degrees) that points each
# port at the land cells it serves. Slots are numbered 0-17 around the ring.
PORT_ANGLES: dict[int, int] = {
    0: 330,
    2: 30,
    5: 30,
    6: 270,
    9: 90,
    10: 270,
    13: 150,
    14: 210,
    16: 150,
}

# One port per resource plus four generic ports.
PORT_POOL: tuple[PortType, ...] = (
    PortType.WOOD,
    PortType.BRICK,
    PortType.SHEEP,
    PortType.WHEAT,
    PortType.ORE,
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.GENERIC,
)

# Port types of the printed beginner board, in PORT_ANGLES slot order.
FIXED_PORT_ORDER: tuple[PortType, ...] = (
    PortType.GENERIC,
    PortType.BRICK,
    PortType.WOOD,
    PortType.GENERIC,
    PortType.GENERIC,
    PortType.SHEEP,
    PortType.WHEAT,
    PortType.GENERIC,
    PortType.ORE,
)


def assign_ports(
    fixed: bool,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> PortAssignment:
    """Place the nine ports on their water slots.

    With ``fixed`` the canonical arrangement is used and the result never
    changes; otherwise the port pool is shuffled. A slot's angle does not
    depend on which port lands there.
    """
    if fixed:
        port_types = list(FIXED_PORT_ORDER)
    else:
        port_types = pools.shuffled(PORT_POOL, rng or random.Random(seed))

    return {
        slot_id: PortSlot(slot_id=slot_id, port_type=port_type, angle=angle)
        for (slot_id, angle), port_type in zip(
            PORT_ANGLES.items(), port_types, strict=True
        )
    }

"""Builds the complete board response consumed by the HTTP API and CLI."""

from __future__ import annotations

import random

from ..models.board import BoardResponse, GenerationExhausted, RuleConfig
from . import intersections, layout, ports, stats


def build_board(
    rules: RuleConfig | None = None,
    max_attempts: int | None = None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> BoardResponse | GenerationExhausted:
    """Generate a layout and derive its ports, intersections and statistics.

    A single random source drives both the layout and the port shuffle, so a
    seed reproduces the whole board.
    """
    rules = rules or RuleConfig()
    if rng is None:
        rng = random.Random(seed)

    result = layout.generate(rules, max_attempts, rng=rng)
    if isinstance(result, GenerationExhausted):
        return result

    return BoardResponse(
        rules=rules,
        layout=result,
        ports=ports.assign_ports(rules.fixed_ports, rng=rng),
        intersections=intersections.aggregate(result),
        stats=stats.resource_stats(result),
    )

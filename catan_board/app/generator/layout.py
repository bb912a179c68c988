"""Randomised board layout generation by rejection sampling.

Each attempt shuffles the terrain pool onto cells 0-18, rejects the
arrangement early if it already breaks the clumping rule, then shuffles the
number pool onto the producing cells and checks the number rules. The first
candidate that passes every enabled rule is returned. Strict rule
combinations can need many attempts, so the loop is capped and running out
of attempts is reported as a :class:`GenerationExhausted` value rather than
an exception.
"""

from __future__ import annotations

import logging
import random

import common.settings

from ..models.board import (
    BoardLayout,
    Cell,
    GenerationExhausted,
    RuleConfig,
    Terrain,
)
from . import constraints, pools

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when generation is requested with settings that can never work."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate(
    rules: RuleConfig | None = None,
    max_attempts: int | None = None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> BoardLayout | GenerationExhausted:
    """Generate a layout satisfying ``rules``.

    Args:
        rules: Placement rules to enforce. Defaults to :class:`RuleConfig`.
        max_attempts: Number of candidates to try before giving up. Defaults
            to the BOARD_MAX_ATTEMPTS setting. Zero gives up immediately.
        rng: Random source. Takes precedence over ``seed``.
        seed: Seed for a fresh random source, for reproducible boards.

    Returns:
        The first valid :class:`BoardLayout`, or :class:`GenerationExhausted`
        if none was found within ``max_attempts``.

    Raises:
        InvalidConfiguration: If ``max_attempts`` is negative.
    """
    rules = rules or RuleConfig()
    if max_attempts is None:
        max_attempts = common.settings.BOARD_MAX_ATTEMPTS
    if max_attempts < 0:
        raise InvalidConfiguration(
            f'max_attempts must not be negative, got {max_attempts}'
        )
    if rng is None:
        rng = random.Random(seed)

    for attempt in range(1, max_attempts + 1):
        candidate = _deal_terrain(rng)
        if constraints.terrain_violations(candidate, rules):
            continue

        candidate = _deal_numbers(candidate, rng)
        if rules.checks_numbers and constraints.number_violations(candidate, rules):
            continue

        logger.debug('Generated layout after %d attempt(s)', attempt)
        return BoardLayout(cells=tuple(candidate))

    logger.warning(
        'No valid layout after %d attempts (rules: %s)',
        max_attempts,
        rules.model_dump(mode='json'),
    )
    return GenerationExhausted(attempts=max_attempts, rules=rules)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _deal_terrain(rng: random.Random) -> list[Cell]:
    """Shuffle the terrain pool onto cells 0-18, leaving numbers unset."""
    terrains = pools.shuffled(pools.TERRAIN_POOL, rng)
    return [
        Cell(id=cell_id, terrain=terrain) for cell_id, terrain in enumerate(terrains)
    ]


def _deal_numbers(cells: list[Cell], rng: random.Random) -> list[Cell]:
    """Return a copy of ``cells`` with shuffled tokens on the producing cells.

    Tokens go to producing cells in ascending id order, taken from the end of
    the shuffled pool.
    """
    producing = [cell for cell in cells if cell.terrain is not Terrain.DESERT]
    tokens, _ = pools.assign_from_pool(
        pools.shuffled(pools.NUMBER_POOL, rng), len(producing)
    )
    numbers = {cell.id: token for cell, token in zip(producing, tokens, strict=True)}
    return [
        cell.model_copy(update={'number': numbers[cell.id]})
        if cell.id in numbers
        else cell
        for cell in cells
    ]

"""HTTP routes for board generation.

Registers:

* ``GET /api/board``: generate a board under the requested rules
* ``GET /api/board/rules``: default rules and attempt cap
"""

from __future__ import annotations

import logging

import fastapi
import pydantic

import common.settings

from ..generator import layout, service
from ..models.board import (
    BoardResponse,
    ClumpingMode,
    GenerationExhausted,
    RuleConfig,
)

logger = logging.getLogger(__name__)

router = fastapi.APIRouter()


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class RuleDefaultsResponse(pydantic.BaseModel):
    """Returned by GET /api/board/rules."""

    rules: RuleConfig
    max_attempts: int


# ---------------------------------------------------------------------------
# HTTP endpoints
# ---------------------------------------------------------------------------


@router.get('/api/board', response_model=BoardResponse)
def generate_board(
    prevent_high_adjacency: bool = True,
    prevent_extreme_adjacency: bool = True,
    prevent_clumping: bool = False,
    clumping_mode: ClumpingMode = ClumpingMode.ADJACENT,
    fixed_ports: bool = False,
    max_attempts: int | None = None,
    seed: int | None = None,
) -> BoardResponse:
    """Generate a board and its ports, intersections and resource totals.

    Declared without ``async`` so the sampling loop runs in the threadpool.
    """
    rules = RuleConfig(
        prevent_high_adjacency=prevent_high_adjacency,
        prevent_extreme_adjacency=prevent_extreme_adjacency,
        prevent_clumping=prevent_clumping,
        clumping_mode=clumping_mode,
        fixed_ports=fixed_ports,
    )
    try:
        result = service.build_board(rules, max_attempts, seed=seed)
    except layout.InvalidConfiguration as exc:
        raise fastapi.HTTPException(status_code=400, detail=str(exc)) from exc

    if isinstance(result, GenerationExhausted):
        logger.info('Board request exhausted %d attempts', result.attempts)
        raise fastapi.HTTPException(status_code=409, detail=result.message)
    return result


@router.get('/api/board/rules', response_model=RuleDefaultsResponse)
async def rule_defaults() -> RuleDefaultsResponse:
    """Return the rules and attempt cap used when none are given."""
    return RuleDefaultsResponse(
        rules=RuleConfig(), max_attempts=common.settings.BOARD_MAX_ATTEMPTS
    )

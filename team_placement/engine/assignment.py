"""Strategy dispatch for newcomer placement.

- even          – load balancing by current team size
- compatibility – greedy leader ↔ newcomer compatibility matching
- weighted      – reserved; currently behaves exactly like "even"
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel

from team_placement.engine.even_allocator import assign_evenly
from team_placement.engine.results import AssignmentResult
from team_placement.engine.selector import assign_by_compatibility
from team_placement.personality_types import Member, Team
from team_placement.scoring_config import ScoringConfig, default_strategy, load_scoring_config

logger = logging.getLogger(__name__)

AssignmentStrategy = Literal["even", "compatibility", "weighted"]


class StrategyInfo(BaseModel):
    """Display text for a placement strategy."""

    label: str
    description: str


STRATEGY_INFO: dict[str, StrategyInfo] = {
    "even": StrategyInfo(
        label="Even assignment",
        description="Newcomers join the team with the fewest members, one at a time.",
    ),
    "compatibility": StrategyInfo(
        label="Compatibility assignment",
        description=(
            "Each newcomer is matched to a team leader by Big Five similarity and "
            "MBTI agreement; every team takes at most one newcomer."
        ),
    ),
    "weighted": StrategyInfo(
        label="Weighted assignment (in development)",
        description="Will weigh personality, skills and experience; currently the same as even assignment.",
    ),
}


def assign_newcomers(
    teams: list[Team],
    newcomers: list[Member],
    strategy: AssignmentStrategy | None = None,
    config: ScoringConfig | None = None,
) -> AssignmentResult:
    """Place *newcomers* into copies of *teams* using *strategy*.

    Without an explicit *strategy* or *config*, PLACEMENT_* environment
    variables decide (see ``team_placement.scoring_config``).

    Raises:
        ValueError: If *strategy* is not one of even / compatibility / weighted.
    """
    if strategy is None:
        strategy = default_strategy()

    if strategy == "compatibility":
        if config is None:
            config = load_scoring_config()
        result = assign_by_compatibility(teams, newcomers, config)
    elif strategy in ("even", "weighted"):
        result = assign_evenly(teams, newcomers)
    else:
        raise ValueError(f"Unknown assignment strategy: {strategy!r}")

    logger.info(
        "Strategy=%s assigned %d of %d newcomers across %d teams",
        strategy, len(result.assignments), len(newcomers), len(teams),
    )
    return result

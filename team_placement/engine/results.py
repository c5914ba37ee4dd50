"""Assignment result model and mapping re-application."""

from __future__ import annotations

from pydantic import BaseModel, Field

from team_placement.engine.compatibility import PairScore
from team_placement.personality_types import Member, Team


class AssignmentResult(BaseModel):
    """Outcome of one placement run.

    ``assignments`` keeps commit order, so re-applying it in iteration order
    reproduces ``teams`` exactly. ``scores`` is only set by the
    compatibility strategy.
    """

    teams: list[Team]
    assignments: dict[str, str] = Field(default_factory=dict)  # newcomer id → team id
    scores: dict[str, PairScore] | None = None


def copy_teams(teams: list[Team]) -> list[Team]:
    """Deep copies, so callers' rosters are never mutated."""
    return [t.model_copy(deep=True) for t in teams]


def apply_assignments(
    teams: list[Team],
    newcomers: list[Member],
    assignments: dict[str, str],
) -> list[Team]:
    """Prepend each assigned newcomer to its team, in mapping order.

    Works on copies of *teams*; the inputs are left untouched.

    Raises:
        ValueError: If the mapping names an unknown newcomer or team.
    """
    updated = copy_teams(teams)
    by_team = {t.id: t for t in updated}
    by_newcomer = {n.id: n for n in newcomers}

    for newcomer_id, team_id in assignments.items():
        newcomer = by_newcomer.get(newcomer_id)
        if newcomer is None:
            raise ValueError(f"Unknown newcomer in assignments: {newcomer_id}")
        team = by_team.get(team_id)
        if team is None:
            raise ValueError(f"Unknown team in assignments: {team_id}")
        team.members.insert(0, newcomer.model_copy(deep=True))

    return updated

"""Load-balancing placement; no personality data needed.

Each newcomer, in input order, goes to the team with the fewest members at
that moment. The leader is not counted. Ties go to the earliest team in the
input list.
"""

from __future__ import annotations

import logging

from team_placement.engine.results import AssignmentResult, copy_teams
from team_placement.personality_types import Member, Team

logger = logging.getLogger(__name__)


def assign_evenly(teams: list[Team], newcomers: list[Member]) -> AssignmentResult:
    """Place *newcomers* into the currently smallest team, one at a time."""
    updated = copy_teams(teams)
    assignments: dict[str, str] = {}

    if not updated:
        if newcomers:
            logger.warning("No teams available; %d newcomers left unassigned", len(newcomers))
        return AssignmentResult(teams=updated, assignments=assignments)

    for newcomer in newcomers:
        if newcomer.id in assignments:
            logger.debug("Skip duplicate newcomer %s", newcomer.id)
            continue
        # min() keeps the first of equally small teams
        target = min(updated, key=lambda t: len(t.members))
        target.members.insert(0, newcomer.model_copy(deep=True))
        assignments[newcomer.id] = target.id
        logger.debug("Placed %s in %s (now %d members)", newcomer.id, target.id, len(target.members))

    return AssignmentResult(teams=updated, assignments=assignments)

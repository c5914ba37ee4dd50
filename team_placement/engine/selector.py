"""Greedy compatibility-based placement.

Every (newcomer, team) pair where both the newcomer and the team leader carry
Big Five *and* MBTI data is scored. Candidates are then committed from the
highest score down, skipping any whose newcomer or team is already taken.

This is a greedy approximation, not a maximum-weight matching: a newcomer can
end up with its second-best team when a higher-scoring pair claimed the best
one first. Each team receives at most one newcomer per run, so surplus
newcomers stay unassigned.

Tie-break: candidates are enumerated newcomer-major (newcomer input order,
then team input order) and sorted with Python's stable sort, so equal scores
keep that enumeration order.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from team_placement.engine.compatibility import PairScore, explain_pair, pair_score
from team_placement.engine.results import AssignmentResult, copy_teams
from team_placement.personality_types import Member, Team, get_scoring_traits
from team_placement.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)


class PairCandidate(BaseModel):
    """A scored (newcomer, team) pair considered during selection."""

    newcomer_id: str
    team_id: str
    leader_id: str
    score: float = Field(ge=0.0, le=1.0)
    explanation: list[str]


def rank_candidates(
    teams: list[Team],
    newcomers: list[Member],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[PairCandidate]:
    """Score every eligible pair and return them best-first."""
    candidates: list[PairCandidate] = []
    for newcomer in newcomers:
        cand_traits = get_scoring_traits(newcomer)
        if cand_traits is None:
            continue
        cand_bf, cand_mbti = cand_traits
        for team in teams:
            leader_traits = get_scoring_traits(team.leader)
            if leader_traits is None:
                continue
            leader_bf, leader_mbti = leader_traits
            candidates.append(PairCandidate(
                newcomer_id=newcomer.id,
                team_id=team.id,
                leader_id=team.leader.id,
                score=pair_score(leader_bf, cand_bf, leader_mbti, cand_mbti, config),
                explanation=explain_pair(leader_bf, cand_bf, leader_mbti, cand_mbti, config),
            ))
    return sorted(candidates, key=lambda c: c.score, reverse=True)


def assign_by_compatibility(
    teams: list[Team],
    newcomers: list[Member],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AssignmentResult:
    """One greedy pass over the ranked candidates (one newcomer per team)."""
    updated = copy_teams(teams)
    by_team = {t.id: t for t in updated}
    by_newcomer = {n.id: n for n in newcomers}

    assignments: dict[str, str] = {}
    scores: dict[str, PairScore] = {}
    used_newcomers: set[str] = set()
    used_teams: set[str] = set()

    for cand in rank_candidates(teams, newcomers, config):
        if cand.newcomer_id in used_newcomers or cand.team_id in used_teams:
            logger.debug("Skip %s → %s (%.4f): already taken", cand.newcomer_id, cand.team_id, cand.score)
            continue
        by_team[cand.team_id].members.insert(0, by_newcomer[cand.newcomer_id].model_copy(deep=True))
        assignments[cand.newcomer_id] = cand.team_id
        scores[cand.newcomer_id] = PairScore(score=cand.score, explanation=cand.explanation)
        used_newcomers.add(cand.newcomer_id)
        used_teams.add(cand.team_id)
        logger.debug("Commit %s → %s (%.4f)", cand.newcomer_id, cand.team_id, cand.score)

    unassigned = [n.id for n in newcomers if n.id not in assignments]
    if unassigned:
        logger.warning("Newcomers left unassigned: %s", ", ".join(unassigned))

    return AssignmentResult(teams=updated, assignments=assignments, scores=scores)

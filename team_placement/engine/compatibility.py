"""Compatibility scoring between a team leader and a candidate.

Big Five similarity with exponential decay, plus a capped MBTI agreement
bonus. All functions are *pure*: no side-effects, no I/O.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from team_placement.engine.typing_parser import TEMPERAMENT_CODES, parse_mbti
from team_placement.personality_types import (
    BIG_FIVE_TRAITS,
    BigFiveScore,
    MBTIScore,
    Member,
    get_scoring_traits,
)
from team_placement.scoring_config import DEFAULT_SCORING_CONFIG, ScoringConfig


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PairScore(BaseModel):
    """Score and reasons for a single leader ↔ candidate pair."""

    score: float = Field(ge=0.0, le=1.0)
    explanation: list[str] = Field(min_length=1)


class PairDetail(BaseModel):
    """Full read-out for the pair detail view."""

    leader_id: str
    newcomer_id: str
    score: float = Field(ge=0.0, le=1.0)
    explanation: list[str]
    thinking_closeness: float
    value_alignment: float
    communication_tendency: float
    label: str
    description: str


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
_TRAIT_LABELS: dict[str, str] = {
    "openness": "openness",
    "conscientiousness": "conscientiousness",
    "extraversion": "extraversion",
    "agreeableness": "agreeableness",
    "neuroticism": "emotional stability",
}

# (pole when flag is true, pole when flag is false), in display order
_AXIS_WORDS: dict[str, tuple[str, str]] = {
    "extraversion": ("extraverted", "introverted"),
    "intuition": ("intuitive", "sensing"),
    "thinking": ("thinking", "feeling"),
    "judging": ("judging", "perceiving"),
}

FALLBACK_EXPLANATION = "balanced combination"

# (lower bound, label, description), checked top-down
_SCORE_BANDS: list[tuple[float, str, str]] = [
    (0.8, "very high",
     "A very strong match: the two share values and ways of thinking and should cooperate smoothly."),
    (0.6, "high",
     "A good match: they have a lot in common and should understand each other easily."),
    (0.4, "moderately high",
     "A balanced pairing: their differences can complement each other."),
    (0.2, "average",
     "Their traits differ somewhat; respecting those differences matters."),
]
_LOWEST_BAND = (
    "low",
    "Their traits differ widely; put communication first to build mutual understanding.",
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def trait_deltas(leader_bf: BigFiveScore, cand_bf: BigFiveScore) -> list[float]:
    """Normalised absolute difference per Big Five dimension, each in [0, 1]."""
    return [
        abs(getattr(cand_bf, t) - getattr(leader_bf, t)) / 100
        for t in BIG_FIVE_TRAITS
    ]


def mbti_bonus(
    leader_mbti: MBTIScore,
    cand_mbti: MBTIScore,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Additive MBTI agreement bonus, capped on the summed total."""
    lp = parse_mbti(leader_mbti)
    cp = parse_mbti(cand_mbti)

    bonus = 0.0
    if lp.temperament == cp.temperament:
        bonus += config.temperament_bonus
    if lp.extraversion == cp.extraversion:
        bonus += config.extraversion_bonus
    if lp.judging == cp.judging:
        bonus += config.judging_bonus
    if lp.intuition == cp.intuition:
        bonus += config.intuition_bonus
    if lp.thinking == cp.thinking:
        bonus += config.thinking_bonus

    return min(bonus, config.bonus_cap)


def pair_score(
    leader_bf: BigFiveScore,
    cand_bf: BigFiveScore,
    leader_mbti: MBTIScore,
    cand_mbti: MBTIScore,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """Return the compatibility score (0-1) for a leader + candidate."""
    deltas = trait_deltas(leader_bf, cand_bf)
    mean_delta = sum(deltas) / len(deltas)
    similarity = math.exp(-config.alpha * mean_delta)
    bonus = mbti_bonus(leader_mbti, cand_mbti, config)
    return max(0.0, min(1.0, similarity + bonus))


def explain_pair(
    leader_bf: BigFiveScore,
    cand_bf: BigFiveScore,
    leader_mbti: MBTIScore,
    cand_mbti: MBTIScore,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[str]:
    """Human-readable reasons behind a pair score. Never empty."""
    explanations: list[str] = []

    close = [
        _TRAIT_LABELS[t]
        for t in BIG_FIVE_TRAITS
        if abs(getattr(cand_bf, t) - getattr(leader_bf, t)) < config.close_threshold
    ]
    if close:
        explanations.append(f"{', '.join(close)} are close")

    lp = parse_mbti(leader_mbti)
    cp = parse_mbti(cand_mbti)

    if lp.temperament == cp.temperament:
        code = TEMPERAMENT_CODES[lp.temperament]
        explanations.append(f"shares {lp.temperament} ({code}) temperament.")

    matches: list[str] = []
    for axis, (yes_word, no_word) in _AXIS_WORDS.items():
        flag = getattr(lp, axis)
        if flag == getattr(cp, axis):
            matches.append(yes_word if flag else no_word)
    if matches:
        explanations.append(f"typing: {', '.join(matches)}")

    if not explanations:
        explanations.append(FALLBACK_EXPLANATION)
    return explanations


def score_pair(
    leader_bf: BigFiveScore,
    cand_bf: BigFiveScore,
    leader_mbti: MBTIScore,
    cand_mbti: MBTIScore,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> PairScore:
    """Score and explanation in one model."""
    return PairScore(
        score=pair_score(leader_bf, cand_bf, leader_mbti, cand_mbti, config),
        explanation=explain_pair(leader_bf, cand_bf, leader_mbti, cand_mbti, config),
    )


# ---------------------------------------------------------------------------
# Single-dimension read-outs (detail display only)
# ---------------------------------------------------------------------------
def thinking_closeness(leader_bf: BigFiveScore, cand_bf: BigFiveScore) -> float:
    return 1 - abs(leader_bf.openness - cand_bf.openness) / 100


def value_alignment(leader_bf: BigFiveScore, cand_bf: BigFiveScore) -> float:
    return 1 - abs(leader_bf.agreeableness - cand_bf.agreeableness) / 100


def communication_tendency(leader_bf: BigFiveScore, cand_bf: BigFiveScore) -> float:
    """Higher means a more talkative pair."""
    return (leader_bf.extraversion + cand_bf.extraversion) / 200


def score_label(score: float) -> str:
    for lower, label, _ in _SCORE_BANDS:
        if score >= lower:
            return label
    return _LOWEST_BAND[0]


def compatibility_description(score: float) -> str:
    for lower, _, description in _SCORE_BANDS:
        if score >= lower:
            return description
    return _LOWEST_BAND[1]


def describe_pair(
    leader: Member,
    newcomer: Member,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> PairDetail | None:
    """Build the detail read-out, or ``None`` if either side lacks trait data."""
    leader_traits = get_scoring_traits(leader)
    cand_traits = get_scoring_traits(newcomer)
    if leader_traits is None or cand_traits is None:
        return None

    leader_bf, leader_mbti = leader_traits
    cand_bf, cand_mbti = cand_traits
    scored = score_pair(leader_bf, cand_bf, leader_mbti, cand_mbti, config)
    return PairDetail(
        leader_id=leader.id,
        newcomer_id=newcomer.id,
        score=scored.score,
        explanation=scored.explanation,
        thinking_closeness=thinking_closeness(leader_bf, cand_bf),
        value_alignment=value_alignment(leader_bf, cand_bf),
        communication_tendency=communication_tendency(leader_bf, cand_bf),
        label=score_label(scored.score),
        description=compatibility_description(scored.score),
    )

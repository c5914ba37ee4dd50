"""MBTI axis parsing and temperament classification.

All functions are *pure*. Flags are derived strictly from the numeric axis
signs, never from a precomputed type code.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from team_placement.personality_types import MBTIScore


Temperament = Literal["idealist", "rationalist", "guardian", "artisan"]

TEMPERAMENT_CODES: dict[str, str] = {
    "idealist": "NF",
    "rationalist": "NT",
    "guardian": "SJ",
    "artisan": "SP",
}


class ParsedMBTI(BaseModel):
    """Boolean poles of the four axes plus the derived temperament."""

    extraversion: bool
    intuition: bool
    thinking: bool
    judging: bool
    temperament: Temperament


def classify_temperament(intuition: bool, thinking: bool, judging: bool) -> Temperament:
    """NF → idealist, NT → rationalist, SJ → guardian, otherwise artisan."""
    if intuition and not thinking:
        return "idealist"
    if intuition and thinking:
        return "rationalist"
    if judging:
        return "guardian"
    return "artisan"


def parse_mbti(score: MBTIScore) -> ParsedMBTI:
    """Derive the four flags (``axis >= 0``) and the temperament."""
    e = score.extraversion >= 0
    n = score.intuition >= 0
    t = score.thinking >= 0
    j = score.judging >= 0
    return ParsedMBTI(
        extraversion=e,
        intuition=n,
        thinking=t,
        judging=j,
        temperament=classify_temperament(n, t, j),
    )

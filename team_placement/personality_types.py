"""Personality and roster models for newcomer placement.

Two independent trait systems can be attached to a member:

- Big Five (continuous, 5 dimensions, each 0..100)
- MBTI (categorical, 4 signed axes, each -100..100)

Either or both may be missing. Downstream scoring treats "missing" as
"exclude from scoring", never as a zero-valued default.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
MemberRole = Literal["leader", "member", "newcomer"]

BIG_FIVE_TRAITS: tuple[str, ...] = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
)


# ---------------------------------------------------------------------------
# Trait models
# ---------------------------------------------------------------------------
class BigFiveScore(BaseModel):
    """Five-dimension trait profile, each dimension in [0, 100]."""

    model_config = ConfigDict(frozen=True)

    openness: float = Field(ge=0, le=100)
    conscientiousness: float = Field(ge=0, le=100)
    extraversion: float = Field(ge=0, le=100)
    agreeableness: float = Field(ge=0, le=100)
    neuroticism: float = Field(ge=0, le=100)


class MBTIScore(BaseModel):
    """Four signed typing axes, each in [-100, 100].

    Every axis is named after its positive pole: a value ``>= 0`` means
    Extraversion / Intuition / Thinking / Judging, a negative value means
    Introversion / Sensing / Feeling / Perceiving.
    """

    model_config = ConfigDict(frozen=True)

    extraversion: float = Field(ge=-100, le=100)
    intuition: float = Field(ge=-100, le=100)
    thinking: float = Field(ge=-100, le=100)
    judging: float = Field(ge=-100, le=100)

    @property
    def type_code(self) -> str:
        """4-letter code recomputed from the axis signs (e.g. ``"ENTJ"``)."""
        return "".join((
            "E" if self.extraversion >= 0 else "I",
            "N" if self.intuition >= 0 else "S",
            "T" if self.thinking >= 0 else "F",
            "J" if self.judging >= 0 else "P",
        ))


class Personality(BaseModel):
    """Optional trait records attached to a member."""

    mbti: MBTIScore | None = None
    big_five: BigFiveScore | None = None

    @property
    def is_complete(self) -> bool:
        return self.mbti is not None and self.big_five is not None


# ---------------------------------------------------------------------------
# Roster models
# ---------------------------------------------------------------------------
class Member(BaseModel):
    """A leader, existing member or newcomer."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: MemberRole
    initials: str | None = None
    color: str | None = None
    personality: Personality | None = None


class Team(BaseModel):
    """A team: one leader plus an ordered roster of other members."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    leader: Member
    members: list[Member] = Field(default_factory=list)

    @field_validator("leader")
    @classmethod
    def validate_leader_role(cls, v: Member) -> Member:
        """The leader slot only accepts a member tagged as leader."""
        if v.role != "leader":
            raise ValueError(f"team leader must have role 'leader', got '{v.role}'")
        return v


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def get_scoring_traits(member: Member) -> tuple[BigFiveScore, MBTIScore] | None:
    """Return ``(big_five, mbti)`` when both are present, else ``None``."""
    p = member.personality
    if p is None or p.big_five is None or p.mbti is None:
        return None
    return p.big_five, p.mbti

"""Newcomer placement: compatibility scoring and team assignment."""

from .engine.assignment import STRATEGY_INFO, assign_newcomers
from .engine.results import AssignmentResult, apply_assignments
from .personality_types import BigFiveScore, MBTIScore, Member, Personality, Team

__all__ = [
    "AssignmentResult",
    "BigFiveScore",
    "MBTIScore",
    "Member",
    "Personality",
    "STRATEGY_INFO",
    "Team",
    "apply_assignments",
    "assign_newcomers",
]

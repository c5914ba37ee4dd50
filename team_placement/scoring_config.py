"""Scoring constants with environment overrides.

Defaults reproduce the reference compatibility formula exactly. Overrides are
read from PLACEMENT_* environment variables.
"""

import logging
import os

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_STRATEGIES = ("even", "compatibility", "weighted")


class ScoringConfig(BaseModel):
    """Weights for the pairwise compatibility score."""

    alpha: float = Field(default=3.0, gt=0)
    temperament_bonus: float = Field(default=0.04, ge=0)
    extraversion_bonus: float = Field(default=0.02, ge=0)
    judging_bonus: float = Field(default=0.02, ge=0)
    intuition_bonus: float = Field(default=0.015, ge=0)
    thinking_bonus: float = Field(default=0.015, ge=0)
    bonus_cap: float = Field(default=0.08, ge=0)
    close_threshold: float = Field(default=20.0, gt=0, le=100)


DEFAULT_SCORING_CONFIG = ScoringConfig()


def _float_env(name: str) -> float | None:
    raw = os.getenv(name, "")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_scoring_config() -> ScoringConfig:
    """Build a ScoringConfig from PLACEMENT_* environment variables.

    Reads PLACEMENT_ALPHA, PLACEMENT_BONUS_CAP and PLACEMENT_CLOSE_THRESHOLD.
    Unset variables keep their defaults.

    Raises:
        ValueError: If a variable is set to a non-numeric or out-of-range value.
    """
    overrides: dict[str, float] = {}
    for env_name, field_name in (
        ("PLACEMENT_ALPHA", "alpha"),
        ("PLACEMENT_BONUS_CAP", "bonus_cap"),
        ("PLACEMENT_CLOSE_THRESHOLD", "close_threshold"),
    ):
        value = _float_env(env_name)
        if value is not None:
            overrides[field_name] = value

    if not overrides:
        return DEFAULT_SCORING_CONFIG

    try:
        config = ScoringConfig(**overrides)
    except ValidationError as exc:
        raise ValueError(f"Invalid scoring override: {exc}") from exc
    logger.info("Scoring config overrides: %s", overrides)
    return config


def default_strategy() -> str:
    """Return PLACEMENT_DEFAULT_STRATEGY, or ``"even"`` when unset.

    Raises:
        ValueError: If the variable names an unknown strategy.
    """
    strategy = os.getenv("PLACEMENT_DEFAULT_STRATEGY", "") or "even"
    if strategy not in _STRATEGIES:
        raise ValueError(
            f"PLACEMENT_DEFAULT_STRATEGY must be one of {', '.join(_STRATEGIES)}, got {strategy!r}"
        )
    return strategy

"""Tests for team_placement/engine/typing_parser.py."""

import pytest

from team_placement.engine.typing_parser import (
    TEMPERAMENT_CODES,
    classify_temperament,
    parse_mbti,
)
from team_placement.personality_types import MBTIScore


class TestParseMbti:
    def test_flags_follow_signs(self):
        parsed = parse_mbti(MBTIScore(extraversion=20, intuition=-20, thinking=-3, judging=40))
        assert parsed.extraversion is True
        assert parsed.intuition is False
        assert parsed.thinking is False
        assert parsed.judging is True

    def test_zero_is_positive_pole(self):
        parsed = parse_mbti(MBTIScore(extraversion=0, intuition=0, thinking=0, judging=0))
        assert parsed.extraversion and parsed.intuition and parsed.thinking and parsed.judging

    @pytest.mark.parametrize(
        "axes, expected",
        [
            ((-40, 60, -10, 30), "idealist"),      # INFJ
            ((40, 60, 10, -30), "rationalist"),    # ENTP
            ((-40, -60, 10, 30), "guardian"),      # ISTJ
            ((40, -60, -10, -30), "artisan"),      # ESFP
        ],
    )
    def test_temperament(self, axes, expected):
        e, n, t, j = axes
        parsed = parse_mbti(MBTIScore(extraversion=e, intuition=n, thinking=t, judging=j))
        assert parsed.temperament == expected


class TestClassifyTemperament:
    def test_intuitive_ignores_judging(self):
        assert classify_temperament(True, False, True) == "idealist"
        assert classify_temperament(True, True, False) == "rationalist"

    def test_sensing_ignores_thinking(self):
        assert classify_temperament(False, True, True) == "guardian"
        assert classify_temperament(False, False, True) == "guardian"
        assert classify_temperament(False, True, False) == "artisan"

    def test_codes_cover_all_temperaments(self):
        assert TEMPERAMENT_CODES == {
            "idealist": "NF",
            "rationalist": "NT",
            "guardian": "SJ",
            "artisan": "SP",
        }

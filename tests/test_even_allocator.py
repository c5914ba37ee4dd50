"""Tests for team_placement/engine/even_allocator.py."""

from team_placement.engine.even_allocator import assign_evenly
from team_placement.engine.results import apply_assignments
from team_placement.personality_types import Member, Team


def _team(tid: str, size: int) -> Team:
    return Team(
        id=tid,
        name=tid.upper(),
        leader=Member(id=f"{tid}-leader", name="Leader", role="leader"),
        members=[Member(id=f"{tid}-m{i}", name=f"M{i}", role="member") for i in range(size)],
    )


def _newcomers(*ids: str) -> list[Member]:
    return [Member(id=i, name=i.upper(), role="newcomer") for i in ids]


class TestAssignEvenly:
    def test_equal_teams_get_one_each(self):
        teams = [_team("t1", 6), _team("t2", 6), _team("t3", 6)]
        result = assign_evenly(teams, _newcomers("a", "b", "c"))
        assert [len(t.members) for t in result.teams] == [7, 7, 7]
        assert result.assignments == {"a": "t1", "b": "t2", "c": "t3"}

    def test_newcomer_at_front(self):
        result = assign_evenly([_team("t1", 6)], _newcomers("a"))
        assert result.teams[0].members[0].id == "a"

    def test_smallest_team_can_take_several(self):
        teams = [_team("t1", 2), _team("t2", 5)]
        result = assign_evenly(teams, _newcomers("a", "b", "c"))
        assert result.assignments == {"a": "t1", "b": "t1", "c": "t1"}
        # last placed sits first
        assert [m.id for m in result.teams[0].members[:3]] == ["c", "b", "a"]

    def test_recomputed_after_each_insert(self):
        teams = [_team("t1", 3), _team("t2", 4)]
        result = assign_evenly(teams, _newcomers("a", "b", "c"))
        assert result.assignments == {"a": "t1", "b": "t1", "c": "t2"}
        assert [len(t.members) for t in result.teams] == [5, 5]

    def test_leader_not_counted(self):
        teams = [_team("t1", 1), _team("t2", 0)]
        result = assign_evenly(teams, _newcomers("a"))
        assert result.assignments == {"a": "t2"}

    def test_no_scores(self):
        assert assign_evenly([_team("t1", 1)], _newcomers("a")).scores is None

    def test_no_teams(self):
        result = assign_evenly([], _newcomers("a"))
        assert result.teams == []
        assert result.assignments == {}

    def test_no_newcomers(self):
        teams = [_team("t1", 2)]
        result = assign_evenly(teams, [])
        assert result.teams == teams
        assert result.assignments == {}

    def test_input_not_mutated(self):
        teams = [_team("t1", 2)]
        assign_evenly(teams, _newcomers("a", "b"))
        assert len(teams[0].members) == 2

    def test_duplicate_newcomer_placed_once(self):
        teams = [_team("t1", 1), _team("t2", 2)]
        newcomers = _newcomers("a", "a")
        result = assign_evenly(teams, newcomers)
        assert result.assignments == {"a": "t1"}
        assert [m.id for m in result.teams[0].members].count("a") == 1
        assert len(result.teams[1].members) == 2
        assert apply_assignments(teams, newcomers, result.assignments) == result.teams

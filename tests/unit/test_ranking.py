"""Unit tests for the ranking calculator."""

import itertools

import pytest

from domain.models import Submission, Team
from services.ranking import rank, scoreboard_rows, team_standing

PROBLEMS = ["A", "B", "C"]


def make_team(name: str, *submissions: tuple[str, str, int]) -> Team:
    """Build a team with submissions applied to the visible state."""
    team = Team(name=name)
    for problem, verdict, time in submissions:
        submission = Submission(problem=problem, verdict=verdict, time=time)
        team.ledger.record(submission)
        team.problem_state(problem).apply(submission)
    return team


def names(ranking) -> list[str]:
    return [entry.team_name for entry in ranking]


def test_penalty_includes_twenty_minutes_per_wrong_attempt():
    """Solve at 30 after one rejection contributes 50 penalty minutes."""
    team = make_team("A", ("A", "Wrong_Answer", 10), ("A", "Accepted", 30))

    standing = team_standing(team, PROBLEMS)

    assert team.problems["A"].solved is True
    assert standing.solved_count == 1
    assert standing.penalty == 50


def test_wrong_attempts_on_unsolved_problem_do_not_add_penalty():
    """Rejected attempts only count once the problem is solved."""
    team = make_team("A", ("B", "Wrong_Answer", 10), ("B", "Time_Limit_Exceed", 15))

    standing = team_standing(team, PROBLEMS)

    assert standing.solved_count == 0
    assert standing.penalty == 0
    assert team.problems["B"].wrong_attempts == 2


def test_submissions_after_solve_are_ignored():
    """A later Accepted does not move the solve time."""
    team = make_team(
        "A",
        ("A", "Accepted", 12),
        ("A", "Wrong_Answer", 20),
        ("A", "Accepted", 40),
    )

    state = team.problems["A"]
    assert state.solve_time == 12
    assert state.wrong_attempts == 0


def test_more_solved_problems_rank_first():
    """Solved count dominates penalty."""
    fast = make_team("fast", ("A", "Accepted", 1))
    slow = make_team("slow", ("A", "Accepted", 200), ("B", "Accepted", 250))

    ranking = rank([fast, slow], PROBLEMS)

    assert names(ranking) == ["slow", "fast"]


def test_lower_penalty_ranks_first():
    """Same solved count: lower penalty wins."""
    first = make_team("zz", ("A", "Accepted", 10))
    second = make_team("aa", ("A", "Wrong_Answer", 5), ("A", "Accepted", 10))

    ranking = rank([second, first], PROBLEMS)

    assert names(ranking) == ["zz", "aa"]


def test_tie_on_penalty_resolved_by_descending_solve_times():
    """Equal solved count and penalty: compare solve times sorted descending."""
    # X: times (50, 10), Y: times (30, 30); both penalty 60
    x = make_team("X", ("A", "Accepted", 10), ("B", "Accepted", 50))
    y = make_team("Y", ("A", "Accepted", 30), ("B", "Accepted", 30))

    ranking = rank([x, y], PROBLEMS)

    assert ranking.entry_for("X").penalty == ranking.entry_for("Y").penalty == 60
    assert names(ranking) == ["Y", "X"]


def test_full_tie_resolved_by_team_name():
    """Identical results fall back to case-sensitive name order."""
    teams = [
        make_team("beta", ("A", "Accepted", 10)),
        make_team("Beta", ("A", "Accepted", 10)),
        make_team("alpha", ("A", "Accepted", 10)),
    ]

    ranking = rank(teams, PROBLEMS)

    assert names(ranking) == ["Beta", "alpha", "beta"]


def test_ranks_are_dense_and_unique():
    """Every team gets a distinct rank 1..n."""
    teams = [make_team(f"team{i}") for i in range(5)]
    teams.append(make_team("solver", ("C", "Accepted", 99)))

    ranking = rank(teams, PROBLEMS)

    assert [entry.rank for entry in ranking] == [1, 2, 3, 4, 5, 6]
    for a, b in itertools.combinations(names(ranking), 2):
        assert ranking.rank_of(a) != ranking.rank_of(b)


def test_problems_outside_contest_are_not_counted():
    """Only the contest's problem list contributes to the ranking."""
    team = make_team("A", ("Z", "Accepted", 10))

    assert team_standing(team, PROBLEMS).solved_count == 0


def test_solved_but_not_counted_problem_is_excluded():
    """A solve not marked as counted does not affect the ranking."""
    team = make_team("A", ("A", "Accepted", 10))
    team.problems["A"].counted_as_solved_pre_freeze = False

    assert team_standing(team, PROBLEMS).solved_count == 0


def test_custom_penalty_per_wrong():
    team = make_team("A", ("A", "Wrong_Answer", 1), ("A", "Accepted", 30))

    assert team_standing(team, PROBLEMS, penalty_per_wrong=10).penalty == 40


class TestRankingSnapshot:
    @pytest.fixture
    def ranking(self):
        return rank(
            [
                make_team("gold", ("A", "Accepted", 5), ("B", "Accepted", 6)),
                make_team("silver", ("A", "Accepted", 5)),
                make_team("bronze"),
            ],
            PROBLEMS,
        )

    def test_lookup_by_name(self, ranking):
        assert ranking.rank_of("silver") == 2
        assert ranking.entry_for("gold").solved_count == 2
        assert ranking.rank_of("missing") is None

    def test_lookup_by_rank(self, ranking):
        assert ranking.entry_at_rank(3).team_name == "bronze"
        assert ranking.entry_at_rank(4) is None
        assert ranking.entry_at_rank(0) is None

    def test_membership(self, ranking):
        assert "gold" in ranking
        assert "lead" not in ranking
        assert len(ranking) == 3

    def test_equal_snapshots_compare_equal(self, ranking):
        again = rank(
            [
                make_team("gold", ("A", "Accepted", 5), ("B", "Accepted", 6)),
                make_team("silver", ("A", "Accepted", 5)),
                make_team("bronze"),
            ],
            PROBLEMS,
        )
        assert again == ranking


def test_scoreboard_rows_follow_ranking_order():
    """Rows capture each team-problem cell in ranking order."""
    teams = {
        "one": make_team("one", ("A", "Wrong_Answer", 3), ("A", "Accepted", 9)),
        "two": make_team("two", ("B", "Wrong_Answer", 4)),
    }
    ranking = rank(teams.values(), PROBLEMS)

    rows = scoreboard_rows(teams, ranking, PROBLEMS)

    assert [row.entry.team_name for row in rows] == ["one", "two"]
    assert rows[0].cells[0].solved is True
    assert rows[0].cells[0].wrong_attempts == 1
    assert rows[1].cells[1].wrong_attempts == 1
    assert rows[1].cells[2].problem == "C"
    assert rows[1].cells[2].solved is False

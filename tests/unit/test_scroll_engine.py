"""Unit tests for the scroll engine."""

import pytest

from domain.exceptions import NotFrozenError
from domain.models import Submission, Team
from services.contest import ContestService


@pytest.fixture
def service():
    """Three teams, two problems, a few hidden submissions."""
    service = ContestService()
    for name in ("Alpha", "Beta", "Gamma"):
        service.register_team(name)
    service.start_contest(300, 2)

    service.submit("A", "Alpha", "Wrong_Answer", 10)
    service.submit("A", "Alpha", "Accepted", 30)
    service.submit("B", "Beta", "Accepted", 20)
    service.freeze()

    service.submit("A", "Gamma", "Wrong_Answer", 200)
    service.submit("A", "Gamma", "Accepted", 210)
    service.submit("B", "Gamma", "Accepted", 220)
    service.submit("B", "Alpha", "Time_Limit_Exceed", 230)
    return service


def test_scroll_requires_frozen_board():
    service = ContestService()
    service.start_contest(100, 1)

    with pytest.raises(NotFrozenError):
        service.scroll()


def test_select_candidate_picks_worst_ranked_team_and_lowest_problem(service):
    engine = service.scroll_engine

    team, problem = engine.select_candidate(engine.ranking())

    assert team.name == "Gamma"
    assert problem == "A"


def test_reveal_step_without_rank_change_emits_nothing(service):
    """Gamma solving A still leaves it last."""
    step = service.scroll_engine.reveal_step()

    assert step.team_name == "Gamma"
    assert step.old_rank == step.new_rank == 3
    assert step.change is None


def test_scroll_reports_rank_changes(service):
    report = service.scroll()

    assert len(report.changes) == 1
    change = report.changes[0]
    assert change.team_name == "Gamma"
    assert change.replaced_team == "Beta"
    assert change.solved_count == 2
    assert change.penalty == 450
    assert (change.old_rank, change.new_rank) == (3, 1)
    assert report.steps == 3


def test_scroll_captures_boards_before_and_after(service):
    report = service.scroll()

    assert [row.entry.team_name for row in report.before] == ["Beta", "Alpha", "Gamma"]
    assert [row.entry.team_name for row in report.after] == ["Gamma", "Beta", "Alpha"]
    gamma_before = report.before[2]
    assert [cell.pending for cell in gamma_before.cells] == [2, 1]
    assert all(cell.pending == 0 for row in report.after for cell in row.cells)


def test_scroll_unfreezes_and_drains_every_queue(service):
    service.scroll()

    assert service.frozen is False
    for team in service.teams.values():
        assert not team.has_pending


def test_scroll_replay_sets_solve_time_and_wrong_attempts(service):
    """Wrong then Accepted during the freeze replays to one rejection."""
    service.scroll()

    state = service.teams["Gamma"].problems["A"]
    assert state.solved is True
    assert state.solve_time == 210
    assert state.wrong_attempts == 1


def test_scroll_updates_cached_ranking(service):
    service.flush()
    assert service.query_ranking("Gamma").rank == 3

    service.scroll()

    assert service.query_ranking("Gamma").rank == 1


def test_revealed_team_never_drops(service):
    """Each reveal step leaves the revealed team at the same or a better rank."""
    engine = service.scroll_engine
    steps = 0
    step = engine.reveal_step()
    while step is not None:
        steps += 1
        assert step.new_rank <= step.old_rank
        step = engine.reveal_step()

    assert steps <= len(service.teams) * len(service.problems)


def test_scroll_terminates_within_team_problem_bound():
    """Every team with hidden submissions on every problem."""
    service = ContestService()
    names = [f"team{i:02d}" for i in range(8)]
    for name in names:
        service.register_team(name)
    service.start_contest(300, 4)
    service.freeze()

    for offset, name in enumerate(names):
        for problem in service.problems:
            service.submit(problem, name, "Wrong_Answer", 200 + offset)
            if offset % 2 == 0:
                service.submit(problem, name, "Accepted", 210 + offset)

    report = service.scroll()

    assert report.steps == len(names) * len(service.problems)
    assert service.frozen is False


def test_scroll_with_nothing_hidden_just_unfreezes():
    service = ContestService()
    service.register_team("solo")
    service.start_contest(60, 1)
    service.freeze()

    report = service.scroll()

    assert report.steps == 0
    assert report.changes == ()
    assert report.before == report.after
    assert service.frozen is False


def test_replaced_team_is_the_one_just_below_new_rank():
    """The climbing team passes several teams; the replaced team is the old holder of new_rank."""
    service = ContestService()
    for name in ("a", "b", "c", "d"):
        service.register_team(name)
    service.start_contest(300, 2)
    service.submit("A", "a", "Accepted", 10)
    service.submit("A", "b", "Accepted", 20)
    service.submit("A", "c", "Accepted", 30)
    service.freeze()
    service.submit("A", "d", "Accepted", 15)

    report = service.scroll()

    (change,) = report.changes
    assert change.team_name == "d"
    assert (change.old_rank, change.new_rank) == (4, 2)
    assert change.replaced_team == "b"


def test_submission_outside_contest_problems_costs_no_scroll_step():
    """Only the contest's problems are revealed, so the step bound holds."""
    service = ContestService()
    service.register_team("solo")
    service.start_contest(60, 1)
    service.freeze()
    service.submit("A", "solo", "Wrong_Answer", 30)
    service.submit("Z", "solo", "Accepted", 31)

    report = service.scroll()

    assert report.steps <= len(service.teams) * len(service.problems)
    assert report.steps == 1
    assert service.query_submission("solo", "Z").submission.time == 31


def test_pending_problems_follow_contest_order():
    team = Team(name="t")
    for problem in ("C", "A", "Q"):
        team.problem_state(problem).hide(Submission(problem, "Accepted", 200))

    assert team.pending_problems(["A", "B", "C"]) == ["A", "C"]
    assert team.pending_problems([]) == []

"""Ranking calculator.

Ranking is always derived from scratch from the visible problem state of every
team. Nothing here caches a partial order, because freezing and scrolling
mutate the underlying state between calls.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from domain.models import (
    DEFAULT_PENALTY_PER_WRONG,
    ProblemCell,
    RankingEntry,
    RankingSnapshot,
    ScoreboardRow,
    Team,
)


@dataclass(frozen=True)
class TeamStanding:
    """Sort key material for one team."""

    name: str
    solved_count: int
    penalty: int
    solve_times_desc: tuple[int, ...]

    @property
    def sort_key(self) -> tuple:
        return (-self.solved_count, self.penalty, self.solve_times_desc, self.name)


def team_standing(
    team: Team,
    problems: Sequence[str],
    penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG,
) -> TeamStanding:
    """Compute solved count, penalty and tie-break times for a team."""
    solved_count = 0
    penalty = 0
    solve_times = []

    for problem in problems:
        state = team.problems.get(problem)
        if state is None or not state.is_counted:
            continue
        solved_count += 1
        penalty += state.penalty(penalty_per_wrong)
        solve_times.append(state.solve_time)

    return TeamStanding(
        name=team.name,
        solved_count=solved_count,
        penalty=penalty,
        solve_times_desc=tuple(sorted(solve_times, reverse=True)),
    )


def rank(
    teams: Iterable[Team],
    problems: Sequence[str],
    penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG,
) -> RankingSnapshot:
    """
    Rank teams into a strict total order.

    More solved problems first, then lower penalty, then the lexicographically
    smaller descending list of solve times, then team name.

    Args:
        teams: All registered teams
        problems: Problem identifiers counted by the contest
        penalty_per_wrong: Penalty minutes per rejected attempt on a solved problem

    Returns:
        RankingSnapshot with ranks 1..n and no ties
    """
    standings = sorted(
        (team_standing(team, problems, penalty_per_wrong) for team in teams),
        key=lambda standing: standing.sort_key,
    )

    return RankingSnapshot(
        entries=tuple(
            RankingEntry(
                team_name=standing.name,
                rank=position,
                solved_count=standing.solved_count,
                penalty=standing.penalty,
            )
            for position, standing in enumerate(standings, 1)
        )
    )


def scoreboard_rows(
    teams: dict[str, Team],
    snapshot: RankingSnapshot,
    problems: Sequence[str],
) -> tuple[ScoreboardRow, ...]:
    """Capture printable scoreboard rows in ranking order."""
    rows = []
    for entry in snapshot:
        team = teams[entry.team_name]
        cells = []
        for problem in problems:
            state = team.problems.get(problem)
            if state is None:
                cells.append(ProblemCell(problem=problem))
                continue
            cells.append(
                ProblemCell(
                    problem=problem,
                    solved=state.is_counted,
                    wrong_attempts=state.wrong_attempts,
                    pending=len(state.pending_hidden),
                )
            )
        rows.append(ScoreboardRow(entry=entry, cells=tuple(cells)))
    return tuple(rows)

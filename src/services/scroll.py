"""Scroll engine: reveals frozen submissions one team-problem at a time."""

from dataclasses import dataclass

from loguru import logger

from domain.exceptions import NotFrozenError
from domain.models import (
    DEFAULT_PENALTY_PER_WRONG,
    ContestClock,
    RankChange,
    RankingSnapshot,
    ScrollReport,
    Team,
)
from services.freeze import FreezeController
from services.ranking import rank, scoreboard_rows


@dataclass(frozen=True)
class RevealStep:
    """Outcome of replaying one hidden queue."""

    team_name: str
    problem: str
    old_rank: int
    new_rank: int
    ranking: RankingSnapshot
    change: RankChange | None = None


class ScrollEngine:
    """Replays hidden submissions, worst-ranked team first."""

    def __init__(
        self,
        teams: dict[str, Team],
        clock: ContestClock,
        freeze_controller: FreezeController,
        penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG,
    ):
        self.teams = teams
        self.clock = clock
        self.freeze_controller = freeze_controller
        self.penalty_per_wrong = penalty_per_wrong

    def ranking(self) -> RankingSnapshot:
        return rank(self.teams.values(), self.clock.problems, self.penalty_per_wrong)

    def select_candidate(self, ranking: RankingSnapshot) -> tuple[Team, str] | None:
        """
        Pick the worst-ranked team with hidden submissions and its lowest
        pending problem. Returns None when nothing is left to reveal.
        """
        for entry in reversed(ranking.entries):
            team = self.teams[entry.team_name]
            pending = team.pending_problems(self.clock.problems)
            if pending:
                return team, pending[0]
        return None

    def reveal_step(self, ranking: RankingSnapshot | None = None) -> RevealStep | None:
        """Reveal a single team-problem. Returns None when no queue is left."""
        if ranking is None:
            ranking = self.ranking()

        candidate = self.select_candidate(ranking)
        if candidate is None:
            return None

        team, problem = candidate
        old_rank = ranking.rank_of(team.name)
        revealed = team.problems[problem].reveal()

        new_ranking = self.ranking()
        new_rank = new_ranking.rank_of(team.name)
        logger.debug(
            f"Revealed {len(revealed)} submission(s) of {team.name} on {problem}: "
            f"rank {old_rank} -> {new_rank}"
        )

        change = None
        if new_rank < old_rank:
            entry = new_ranking.entry_for(team.name)
            replaced = new_ranking.entry_at_rank(new_rank + 1)
            change = RankChange(
                team_name=team.name,
                replaced_team=replaced.team_name,
                solved_count=entry.solved_count,
                penalty=entry.penalty,
                old_rank=old_rank,
                new_rank=new_rank,
            )

        return RevealStep(
            team_name=team.name,
            problem=problem,
            old_rank=old_rank,
            new_rank=new_rank,
            ranking=new_ranking,
            change=change,
        )

    def scroll(self) -> tuple[ScrollReport, RankingSnapshot]:
        """
        Reveal every hidden submission and unfreeze the scoreboard.

        Returns:
            The scroll report and the final ranking

        Raises:
            NotFrozenError: If the scoreboard is not frozen
        """
        if not self.clock.frozen:
            raise NotFrozenError()

        ranking = self.ranking()
        before = scoreboard_rows(self.teams, ranking, self.clock.problems)

        changes = []
        steps = 0
        while True:
            step = self.reveal_step(ranking)
            if step is None:
                break
            steps += 1
            ranking = step.ranking
            if step.change is not None:
                changes.append(step.change)

        after = scoreboard_rows(self.teams, ranking, self.clock.problems)
        self.freeze_controller.unfreeze()

        logger.info(f"Scroll finished after {steps} step(s) with {len(changes)} rank change(s)")
        report = ScrollReport(before=before, changes=tuple(changes), after=after, steps=steps)
        return report, ranking

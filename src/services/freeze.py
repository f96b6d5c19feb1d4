"""Freeze controller: gates whether submissions update the visible board."""

from collections.abc import Iterable

from loguru import logger

from domain.exceptions import AlreadyFrozenError
from domain.models import ContestClock, Submission, Team


class FreezeController:
    """Owns the frozen flag and the submission write path."""

    def __init__(self, clock: ContestClock):
        self.clock = clock

    @property
    def frozen(self) -> bool:
        return self.clock.frozen

    def freeze(self, teams: Iterable[Team]) -> None:
        """
        Freeze the scoreboard.

        Every problem solved so far is marked as resolved before the freeze,
        so later submissions to it keep applying immediately.

        Raises:
            AlreadyFrozenError: If the scoreboard is already frozen
        """
        if self.clock.frozen:
            raise AlreadyFrozenError()

        resolved = 0
        for team in teams:
            for state in team.problems.values():
                if state.solved:
                    state.counted_as_solved_pre_freeze = True
                    resolved += 1

        self.clock.frozen = True
        logger.info(f"Scoreboard frozen with {resolved} resolved team-problem(s)")

    def unfreeze(self) -> None:
        self.clock.frozen = False
        logger.info("Scoreboard unfrozen")

    def write(self, team: Team, submission: Submission) -> bool:
        """
        Record a submission and route it to the visible or hidden state.

        Submissions to problems outside the contest carry no rank weight and
        are never hidden.

        Returns:
            True if the submission was hidden until the next scroll
        """
        team.ledger.record(submission)
        state = team.problem_state(submission.problem)

        if (
            not self.clock.frozen
            or state.counted_as_solved_pre_freeze
            or submission.problem not in self.clock.problems
        ):
            state.apply(submission)
            return False

        state.hide(submission)
        logger.debug(f"Hid submission from {team.name}: {submission}")
        return True

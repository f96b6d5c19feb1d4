"""Per team, per problem solve state."""

from dataclasses import dataclass, field

from .submission import Submission

DEFAULT_PENALTY_PER_WRONG = 20


@dataclass
class ProblemState:
    """Mutable solve state of one problem for one team.

    Visible fields (solved, solve_time, wrong_attempts) only change through
    ``apply``. While the scoreboard is frozen, submissions to problems that
    were not resolved before the freeze are parked in ``pending_hidden``
    until a scroll replays them.
    """

    solved: bool = False
    solve_time: int | None = None
    wrong_attempts: int = 0
    pending_hidden: list[Submission] = field(default_factory=list)
    counted_as_solved_pre_freeze: bool = False

    @property
    def is_counted(self) -> bool:
        """Whether the problem contributes to the ranking."""
        return self.solved and self.counted_as_solved_pre_freeze

    @property
    def has_pending(self) -> bool:
        return bool(self.pending_hidden)

    def apply(self, submission: Submission) -> bool:
        """
        Apply a submission to the visible state.

        Returns:
            True if the visible state changed
        """
        if self.solved:
            return False

        if submission.is_accepted:
            self.solved = True
            self.solve_time = submission.time
            self.counted_as_solved_pre_freeze = True
        else:
            self.wrong_attempts += 1
        return True

    def hide(self, submission: Submission) -> None:
        """Queue a submission made during the freeze window."""
        self.pending_hidden.append(submission)

    def reveal(self) -> list[Submission]:
        """Replay every hidden submission in order and clear the queue."""
        revealed = self.pending_hidden
        self.pending_hidden = []
        for submission in revealed:
            self.apply(submission)
        return revealed

    def penalty(self, penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG) -> int:
        """Penalty minutes contributed by this problem (0 when not counted)."""
        if not self.is_counted or self.solve_time is None:
            return 0
        return self.solve_time + penalty_per_wrong * self.wrong_attempts

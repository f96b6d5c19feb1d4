"""Team aggregate with its submission ledger."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .problem import ProblemState
from .submission import WILDCARD, Submission


@dataclass
class SubmissionLedger:
    """Append-only record of every submission made by a team."""

    entries: list[Submission] = field(default_factory=list)

    def record(self, submission: Submission) -> None:
        self.entries.append(submission)

    def last_matching(
        self,
        problem_filter: str = WILDCARD,
        verdict_filter: str = WILDCARD,
    ) -> Submission | None:
        """Return the most recent submission matching both filters."""
        for submission in reversed(self.entries):
            if submission.matches(problem_filter, verdict_filter):
                return submission
        return None

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class Team:
    """A registered team."""

    name: str
    ledger: SubmissionLedger = field(default_factory=SubmissionLedger)
    problems: dict[str, ProblemState] = field(default_factory=dict)

    def problem_state(self, problem: str) -> ProblemState:
        """Get the state for a problem, creating it on first access."""
        state = self.problems.get(problem)
        if state is None:
            state = ProblemState()
            self.problems[problem] = state
        return state

    def pending_problems(self, problems: Sequence[str]) -> list[str]:
        """Problems from the given list with hidden submissions, in list order."""
        return [
            problem
            for problem in problems
            if problem in self.problems and self.problems[problem].has_pending
        ]

    @property
    def has_pending(self) -> bool:
        return any(state.has_pending for state in self.problems.values())

"""Contest lifecycle state."""

from dataclasses import dataclass, field
from string import ascii_uppercase

from domain.exceptions import InvalidProblemCountError

MAX_PROBLEMS = len(ascii_uppercase)


@dataclass
class ContestClock:
    """Lifecycle flags and problem set of a single contest."""

    started: bool = False
    frozen: bool = False
    ended: bool = False
    duration_minutes: int = 0
    problems: list[str] = field(default_factory=list)

    def start(self, duration_minutes: int, problem_count: int) -> None:
        problems = problem_ids(problem_count)
        self.started = True
        self.duration_minutes = duration_minutes
        self.problems = problems


def problem_ids(count: int) -> list[str]:
    """Sequential single-letter problem identifiers starting at 'A'."""
    if not 0 <= count <= MAX_PROBLEMS:
        raise InvalidProblemCountError(count)
    return list(ascii_uppercase[:count])

"""Value objects for submissions."""

from dataclasses import dataclass

ACCEPTED = "Accepted"

# Filter value matching any problem or verdict in submission queries.
WILDCARD = "ALL"


@dataclass(frozen=True)
class Submission:
    """A single judged submission, immutable once recorded."""

    problem: str
    verdict: str
    time: int

    @property
    def is_accepted(self) -> bool:
        return self.verdict == ACCEPTED

    def matches(self, problem_filter: str = WILDCARD, verdict_filter: str = WILDCARD) -> bool:
        """Check the submission against optional problem and verdict filters."""
        if problem_filter != WILDCARD and self.problem != problem_filter:
            return False
        if verdict_filter != WILDCARD and self.verdict != verdict_filter:
            return False
        return True

    def __str__(self) -> str:
        return f"{self.problem} {self.verdict} {self.time}"

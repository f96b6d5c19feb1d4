"""Domain exceptions for the scoreboard engine."""


class ScoreboardError(Exception):
    """Base error for rejected scoreboard operations.

    Every operation checks its preconditions before mutating anything, so a
    raised ScoreboardError always leaves the contest state untouched.
    """

    reason = "operation rejected"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.reason)


class DuplicateTeamError(ScoreboardError):
    """Team name is already registered."""

    reason = "duplicated team name"

    def __init__(self, team_name: str):
        self.team_name = team_name
        super().__init__(f"Team already registered: {team_name}")


class ContestAlreadyStartedError(ScoreboardError):
    """Operation is only allowed before the contest starts."""

    reason = "competition has started"


class ContestNotStartedError(ScoreboardError):
    """Operation requires a started contest."""

    reason = "competition has not started"


class AlreadyFrozenError(ScoreboardError):
    """Scoreboard is already frozen."""

    reason = "scoreboard has been frozen"


class NotFrozenError(ScoreboardError):
    """Scroll requested while the scoreboard is not frozen."""

    reason = "scoreboard has not been frozen"


class UnknownTeamError(ScoreboardError):
    """Team name was never registered."""

    reason = "cannot find the team"

    def __init__(self, team_name: str):
        self.team_name = team_name
        super().__init__(f"Unknown team: {team_name}")


class InvalidProblemCountError(ScoreboardError):
    """Problem count does not fit the single-letter problem identifiers."""

    reason = "invalid problem count"

    def __init__(self, problem_count: int):
        self.problem_count = problem_count
        super().__init__(f"Problem count must be between 0 and 26: {problem_count}")

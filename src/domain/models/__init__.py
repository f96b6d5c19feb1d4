"""Domain models package."""

from .contest import MAX_PROBLEMS, ContestClock, problem_ids
from .problem import DEFAULT_PENALTY_PER_WRONG, ProblemState
from .ranking import (
    ProblemCell,
    RankChange,
    RankingEntry,
    RankingQuery,
    RankingSnapshot,
    ScoreboardRow,
    ScrollReport,
    SubmissionQuery,
)
from .submission import ACCEPTED, WILDCARD, Submission
from .team import SubmissionLedger, Team

__all__ = [
    "ACCEPTED",
    "DEFAULT_PENALTY_PER_WRONG",
    "MAX_PROBLEMS",
    "WILDCARD",
    "ContestClock",
    "ProblemCell",
    "ProblemState",
    "RankChange",
    "RankingEntry",
    "RankingQuery",
    "RankingSnapshot",
    "ScoreboardRow",
    "ScrollReport",
    "Submission",
    "SubmissionLedger",
    "SubmissionQuery",
    "Team",
    "problem_ids",
]

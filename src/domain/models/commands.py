"""Typed commands produced by the command parser."""

from dataclasses import dataclass

from .submission import WILDCARD


@dataclass(frozen=True)
class AddTeamCommand:
    team_name: str


@dataclass(frozen=True)
class StartCommand:
    duration_minutes: int
    problem_count: int


@dataclass(frozen=True)
class SubmitCommand:
    problem: str
    team_name: str
    verdict: str
    time: int


@dataclass(frozen=True)
class FlushCommand:
    pass


@dataclass(frozen=True)
class FreezeCommand:
    pass


@dataclass(frozen=True)
class ScrollCommand:
    pass


@dataclass(frozen=True)
class QueryRankingCommand:
    team_name: str


@dataclass(frozen=True)
class QuerySubmissionCommand:
    team_name: str
    problem: str = WILDCARD
    verdict: str = WILDCARD


@dataclass(frozen=True)
class EndCommand:
    pass


Command = (
    AddTeamCommand
    | StartCommand
    | SubmitCommand
    | FlushCommand
    | FreezeCommand
    | ScrollCommand
    | QueryRankingCommand
    | QuerySubmissionCommand
    | EndCommand
)

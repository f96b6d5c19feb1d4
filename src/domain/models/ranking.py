"""Derived ranking and scoreboard views."""

from dataclasses import dataclass, field

from .submission import Submission


@dataclass(frozen=True)
class RankingEntry:
    """One team's position on the scoreboard."""

    team_name: str
    rank: int
    solved_count: int
    penalty: int


@dataclass(frozen=True)
class RankingSnapshot:
    """Ranking as an ordered array with a name -> position index."""

    entries: tuple[RankingEntry, ...] = ()
    _positions: dict[str, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_positions",
            {entry.team_name: index for index, entry in enumerate(self.entries)},
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, team_name: object) -> bool:
        return team_name in self._positions

    def entry_for(self, team_name: str) -> RankingEntry | None:
        position = self._positions.get(team_name)
        return None if position is None else self.entries[position]

    def rank_of(self, team_name: str) -> int | None:
        entry = self.entry_for(team_name)
        return None if entry is None else entry.rank

    def entry_at_rank(self, rank: int) -> RankingEntry | None:
        if 1 <= rank <= len(self.entries):
            return self.entries[rank - 1]
        return None


@dataclass(frozen=True)
class ProblemCell:
    """Scoreboard view of one team-problem at capture time."""

    problem: str
    solved: bool = False
    wrong_attempts: int = 0
    pending: int = 0


@dataclass(frozen=True)
class ScoreboardRow:
    """Scoreboard line for a single team."""

    entry: RankingEntry
    cells: tuple[ProblemCell, ...]


@dataclass(frozen=True)
class RankChange:
    """Emitted by a scroll step when the revealed team climbs the ranking."""

    team_name: str
    replaced_team: str
    solved_count: int
    penalty: int
    old_rank: int
    new_rank: int


@dataclass(frozen=True)
class ScrollReport:
    """Everything a scroll produced, in emission order."""

    before: tuple[ScoreboardRow, ...]
    changes: tuple[RankChange, ...]
    after: tuple[ScoreboardRow, ...]
    steps: int = 0


@dataclass(frozen=True)
class RankingQuery:
    """Result of a ranking query; ``stale`` is set while the board is frozen."""

    team_name: str
    rank: int
    stale: bool = False


@dataclass(frozen=True)
class SubmissionQuery:
    """Result of a submission query; ``submission`` is None when nothing matched."""

    team_name: str
    submission: Submission | None = None

    @property
    def found(self) -> bool:
        return self.submission is not None

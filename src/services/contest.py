"""Service owning the state of a single contest."""

from loguru import logger

from domain.exceptions import (
    ContestAlreadyStartedError,
    ContestNotStartedError,
    DuplicateTeamError,
    UnknownTeamError,
)
from domain.models import (
    DEFAULT_PENALTY_PER_WRONG,
    WILDCARD,
    ContestClock,
    RankingQuery,
    RankingSnapshot,
    ScrollReport,
    Submission,
    SubmissionQuery,
    Team,
)
from services.freeze import FreezeController
from services.ranking import rank
from services.scroll import ScrollEngine


class ContestService:
    """Scoreboard engine for one contest.

    All mutable state (teams, ledgers, problem states, lifecycle flags) lives
    on the instance, so independent contests can run side by side.
    """

    def __init__(
        self,
        *,
        auto_register: bool = True,
        penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG,
    ):
        """
        Initialize an empty contest.

        Args:
            auto_register: Register unknown teams on their first submission
                instead of rejecting the submission
            penalty_per_wrong: Penalty minutes per rejected attempt
        """
        self.auto_register = auto_register
        self.penalty_per_wrong = penalty_per_wrong

        self.clock = ContestClock()
        self.teams: dict[str, Team] = {}
        self.flushed_ranking: RankingSnapshot | None = None

        self.freeze_controller = FreezeController(self.clock)
        self.scroll_engine = ScrollEngine(
            self.teams, self.clock, self.freeze_controller, penalty_per_wrong
        )

    @property
    def problems(self) -> list[str]:
        return self.clock.problems

    @property
    def frozen(self) -> bool:
        return self.clock.frozen

    def register_team(self, name: str) -> Team:
        """
        Register a team before the contest starts.

        Raises:
            ContestAlreadyStartedError: If the contest has started
            DuplicateTeamError: If the name is taken
        """
        if self.clock.started:
            logger.warning(f"Rejected team {name}: contest already started")
            raise ContestAlreadyStartedError()
        if name in self.teams:
            logger.warning(f"Rejected duplicated team name: {name}")
            raise DuplicateTeamError(name)

        team = Team(name=name)
        self.teams[name] = team
        logger.debug(f"Registered team {name}")
        return team

    def start_contest(self, duration_minutes: int, problem_count: int) -> None:
        """
        Start the contest with problems 'A' onwards.

        Raises:
            ContestAlreadyStartedError: If the contest has already started
            InvalidProblemCountError: If the count is outside 0..26
        """
        if self.clock.started:
            raise ContestAlreadyStartedError()

        self.clock.start(duration_minutes, problem_count)
        logger.info(
            f"Contest started: {duration_minutes} minutes, "
            f"{problem_count} problems, {len(self.teams)} teams"
        )

    def submit(self, problem: str, team_name: str, verdict: str, time: int) -> Submission:
        """
        Record a submission and apply or hide it.

        Raises:
            ContestNotStartedError: If the contest has not started
            UnknownTeamError: If the team is unknown and auto-registration is off
        """
        if not self.clock.started:
            raise ContestNotStartedError()

        team = self.teams.get(team_name)
        if team is None:
            if not self.auto_register:
                raise UnknownTeamError(team_name)
            team = Team(name=team_name)
            self.teams[team_name] = team
            logger.info(f"Auto-registered team {team_name} on first submission")

        submission = Submission(problem=problem, verdict=verdict, time=time)
        self.freeze_controller.write(team, submission)
        return submission

    def ranking(self) -> RankingSnapshot:
        """Fresh ranking of all teams; does not touch the flushed snapshot."""
        return rank(self.teams.values(), self.clock.problems, self.penalty_per_wrong)

    def flush(self) -> RankingSnapshot:
        """Recompute and cache the ranking snapshot used by ranking queries."""
        self.flushed_ranking = self.ranking()
        logger.debug(f"Flushed ranking of {len(self.flushed_ranking)} teams")
        return self.flushed_ranking

    def freeze(self) -> None:
        """
        Freeze the scoreboard.

        Raises:
            ContestNotStartedError: If the contest has not started
            AlreadyFrozenError: If already frozen
        """
        if not self.clock.started:
            raise ContestNotStartedError()
        self.freeze_controller.freeze(self.teams.values())

    def scroll(self) -> ScrollReport:
        """
        Reveal all hidden submissions and unfreeze.

        The final ranking becomes the flushed snapshot.

        Raises:
            ContestNotStartedError: If the contest has not started
            NotFrozenError: If the scoreboard is not frozen
        """
        if not self.clock.started:
            raise ContestNotStartedError()

        report, final_ranking = self.scroll_engine.scroll()
        self.flushed_ranking = final_ranking
        return report

    def query_ranking(self, team_name: str) -> RankingQuery:
        """
        Rank of a team as of the last flush.

        Before any flush, teams are ranked alphabetically.

        Raises:
            UnknownTeamError: If the team is unknown
        """
        if team_name not in self.teams:
            raise UnknownTeamError(team_name)

        if self.flushed_ranking is not None and team_name in self.flushed_ranking:
            position = self.flushed_ranking.rank_of(team_name)
        else:
            position = sorted(self.teams).index(team_name) + 1

        return RankingQuery(team_name=team_name, rank=position, stale=self.clock.frozen)

    def query_submission(
        self,
        team_name: str,
        problem_filter: str = WILDCARD,
        verdict_filter: str = WILDCARD,
    ) -> SubmissionQuery:
        """
        Most recent submission of a team matching the filters.

        Raises:
            UnknownTeamError: If the team is unknown
        """
        team = self.teams.get(team_name)
        if team is None:
            raise UnknownTeamError(team_name)

        submission = team.ledger.last_matching(problem_filter, verdict_filter)
        return SubmissionQuery(team_name=team_name, submission=submission)

    def end_contest(self) -> None:
        self.clock.ended = True
        logger.info("Contest ended")

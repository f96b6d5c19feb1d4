"""Parser for line-oriented scoreboard commands."""

import re

from loguru import logger

from domain.models import MAX_PROBLEMS
from domain.models.commands import (
    AddTeamCommand,
    Command,
    EndCommand,
    FlushCommand,
    FreezeCommand,
    QueryRankingCommand,
    QuerySubmissionCommand,
    ScrollCommand,
    StartCommand,
    SubmitCommand,
)
from .interfaces import CommandParserProtocol, ParsingError


class CommandParsingError(ParsingError):
    """Malformed or unknown command line."""

    pass


class CommandParser(CommandParserProtocol):
    """Parser for the scoreboard command language."""

    ADDTEAM_PATTERN = re.compile(r"ADDTEAM\s+(\S+)")
    START_PATTERN = re.compile(r"START\s+DURATION\s+(\d+)\s+PROBLEM\s+(\d+)")
    SUBMIT_PATTERN = re.compile(r"SUBMIT\s+(\S+)\s+BY\s+(\S+)\s+WITH\s+(\S+)\s+AT\s+(\d+)")
    QUERY_RANKING_PATTERN = re.compile(r"QUERY_RANKING\s+(\S+)")
    QUERY_SUBMISSION_PATTERN = re.compile(
        r"QUERY_SUBMISSION\s+(\S+)\s+WHERE\s+PROBLEM=(\S+)\s+AND\s+STATUS=(\S+)"
    )

    BARE_COMMANDS = {
        "FLUSH": FlushCommand,
        "FREEZE": FreezeCommand,
        "SCROLL": ScrollCommand,
        "END": EndCommand,
    }

    @classmethod
    def parse(cls, line: str) -> Command | None:
        """
        Parse one input line.

        Returns:
            The parsed command, or None for a blank line

        Raises:
            CommandParsingError: If the line is not a valid command
        """
        text = line.strip()
        if not text:
            return None

        keyword = text.split(maxsplit=1)[0]
        logger.debug(f"Parsing command: {text}")

        if keyword in cls.BARE_COMMANDS:
            return cls.BARE_COMMANDS[keyword]()

        if keyword == "ADDTEAM":
            (team_name,) = cls._match(cls.ADDTEAM_PATTERN, text)
            return AddTeamCommand(team_name=team_name)

        if keyword == "START":
            duration, problem_count = cls._match(cls.START_PATTERN, text)
            if int(problem_count) > MAX_PROBLEMS:
                raise CommandParsingError(
                    f"Problem count must not exceed {MAX_PROBLEMS}: {problem_count}"
                )
            return StartCommand(duration_minutes=int(duration), problem_count=int(problem_count))

        if keyword == "SUBMIT":
            problem, team_name, verdict, time = cls._match(cls.SUBMIT_PATTERN, text)
            return SubmitCommand(problem=problem, team_name=team_name, verdict=verdict, time=int(time))

        if keyword == "QUERY_RANKING":
            (team_name,) = cls._match(cls.QUERY_RANKING_PATTERN, text)
            return QueryRankingCommand(team_name=team_name)

        if keyword == "QUERY_SUBMISSION":
            team_name, problem, verdict = cls._match(cls.QUERY_SUBMISSION_PATTERN, text)
            return QuerySubmissionCommand(team_name=team_name, problem=problem, verdict=verdict)

        raise CommandParsingError(f"Unknown command: {keyword}")

    @classmethod
    def _match(cls, pattern: re.Pattern, text: str) -> tuple[str, ...]:
        match = pattern.fullmatch(text)
        if not match:
            raise CommandParsingError(f"Malformed command: {text}")
        return match.groups()

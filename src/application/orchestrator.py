"""Command loop coordinating parsing, the contest engine and output."""

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from loguru import logger

from domain.exceptions import ScoreboardError
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
from infrastructure.formatters import ConsoleFormatter
from infrastructure.parsers import CommandParser, CommandParserProtocol, CommandParsingError
from services.contest import ContestService


class CommandOrchestrator:
    """Feeds commands to a contest service and writes the formatted results."""

    def __init__(
        self,
        service: ContestService,
        parser: type[CommandParserProtocol] = CommandParser,
        formatter: ConsoleFormatter | None = None,
        output: TextIO | None = None,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            service: Contest engine receiving the commands
            parser: Command line parser
            formatter: Result formatter
            output: Stream receiving output lines (stdout by default)
        """
        self.service = service
        self.parser = parser
        self.formatter = formatter or ConsoleFormatter()
        self.output = output or sys.stdout

        # Operation label used in error messages, and the handler for each command type
        self.handlers: dict[type, tuple[str, Callable[..., list[str]]]] = {
            AddTeamCommand: ("Add", self._add_team),
            StartCommand: ("Start", self._start),
            SubmitCommand: ("Submit", self._submit),
            FlushCommand: ("Flush", self._flush),
            FreezeCommand: ("Freeze", self._freeze),
            ScrollCommand: ("Scroll", self._scroll),
            QueryRankingCommand: ("Query ranking", self._query_ranking),
            QuerySubmissionCommand: ("Query submission", self._query_submission),
            EndCommand: ("End", self._end),
        }

    def run(self, lines: Iterable[str]) -> int:
        """
        Process input lines until END or end of input.

        Returns:
            Number of commands executed
        """
        executed = 0
        for line_number, line in enumerate(lines, 1):
            try:
                command = self.parser.parse(line)
            except CommandParsingError as e:
                logger.warning(f"Skipping line {line_number}: {e}")
                continue

            if command is None:
                continue

            self.emit(self.execute(command))
            executed += 1

            if self.service.clock.ended:
                break

        logger.info(f"Processed {executed} command(s)")
        return executed

    def execute(self, command: Command) -> list[str]:
        """Execute one command and return its output lines."""
        operation, handler = self.handlers[type(command)]
        try:
            return handler(command)
        except ScoreboardError as e:
            logger.warning(f"{operation} rejected: {e}")
            return [self.formatter.error(operation, e)]

    def emit(self, lines: list[str]) -> None:
        for line in lines:
            self.output.write(line + "\n")

    def _add_team(self, command: AddTeamCommand) -> list[str]:
        self.service.register_team(command.team_name)
        return [self.formatter.info("Add successfully.")]

    def _start(self, command: StartCommand) -> list[str]:
        self.service.start_contest(command.duration_minutes, command.problem_count)
        return [self.formatter.info("Competition starts.")]

    def _submit(self, command: SubmitCommand) -> list[str]:
        self.service.submit(command.problem, command.team_name, command.verdict, command.time)
        return []

    def _flush(self, command: FlushCommand) -> list[str]:
        self.service.flush()
        return [self.formatter.info("Flush scoreboard.")]

    def _freeze(self, command: FreezeCommand) -> list[str]:
        self.service.freeze()
        return [self.formatter.info("Freeze scoreboard.")]

    def _scroll(self, command: ScrollCommand) -> list[str]:
        return self.formatter.scroll(self.service.scroll())

    def _query_ranking(self, command: QueryRankingCommand) -> list[str]:
        return self.formatter.ranking_query(self.service.query_ranking(command.team_name))

    def _query_submission(self, command: QuerySubmissionCommand) -> list[str]:
        result = self.service.query_submission(command.team_name, command.problem, command.verdict)
        return self.formatter.submission_query(result)

    def _end(self, command: EndCommand) -> list[str]:
        self.service.end_contest()
        return [self.formatter.info("Competition ends.")]

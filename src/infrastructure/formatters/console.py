"""Plain-text rendering of engine results."""

from collections.abc import Iterable

from domain.exceptions import ScoreboardError
from domain.models import (
    ProblemCell,
    RankChange,
    RankingQuery,
    ScoreboardRow,
    ScrollReport,
    SubmissionQuery,
)

FROZEN_WARNING = (
    "[Warning]Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."
)


class ConsoleFormatter:
    """Maps engine results and errors to output lines."""

    def info(self, message: str) -> str:
        return f"[Info]{message}"

    def error(self, operation: str, error: ScoreboardError) -> str:
        return f"[Error]{operation} failed: {error.reason}."

    def cell(self, cell: ProblemCell) -> str:
        """
        Render a team-problem cell.

        ``+n`` solved after n rejections, ``-x/y`` x visible rejections and y
        hidden submissions, ``-n`` rejected only, ``.`` untouched.
        """
        if cell.solved:
            return f"+{cell.wrong_attempts}" if cell.wrong_attempts else "+"
        if cell.pending:
            prefix = f"-{cell.wrong_attempts}" if cell.wrong_attempts else "0"
            return f"{prefix}/{cell.pending}"
        if cell.wrong_attempts:
            return f"-{cell.wrong_attempts}"
        return "."

    def row(self, row: ScoreboardRow) -> str:
        entry = row.entry
        parts = [entry.team_name, str(entry.rank), str(entry.solved_count), str(entry.penalty)]
        parts.extend(self.cell(cell) for cell in row.cells)
        return " ".join(parts)

    def scoreboard(self, rows: Iterable[ScoreboardRow]) -> list[str]:
        return [self.row(row) for row in rows]

    def rank_change(self, change: RankChange) -> str:
        return f"{change.team_name} {change.replaced_team} {change.solved_count} {change.penalty}"

    def scroll(self, report: ScrollReport) -> list[str]:
        lines = [self.info("Scroll scoreboard.")]
        lines.extend(self.scoreboard(report.before))
        lines.extend(self.rank_change(change) for change in report.changes)
        lines.extend(self.scoreboard(report.after))
        return lines

    def ranking_query(self, result: RankingQuery) -> list[str]:
        lines = [self.info("Complete query ranking.")]
        if result.stale:
            lines.append(FROZEN_WARNING)
        lines.append(f"{result.team_name} NOW AT RANKING {result.rank}")
        return lines

    def submission_query(self, result: SubmissionQuery) -> list[str]:
        lines = [self.info("Complete query submission.")]
        if not result.found:
            lines.append("Cannot find any submission.")
        else:
            lines.append(f"{result.team_name} {result.submission}")
        return lines

"""Command line entry point: reads commands from stdin, writes the scoreboard to stdout."""

import sys
from dataclasses import replace

from dotenv import load_dotenv
from loguru import logger

from application.orchestrator import CommandOrchestrator
from infrastructure.settings import load_settings, parse_log_level
from services import create_contest_service


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the scoreboard command loop."""
    argv = sys.argv[1:] if argv is None else argv

    # Load environment variables from .env file
    load_dotenv()
    try:
        settings = load_settings()

        # Command line flags override the environment
        if "--strict" in argv:
            settings = replace(settings, auto_register=False)
        if "--log-level" in argv:
            idx = argv.index("--log-level")
            if idx + 1 < len(argv):
                settings = replace(settings, log_level=parse_log_level(argv[idx + 1]))
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Setup logging; stdout is reserved for scoreboard output
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    service = create_contest_service(settings)
    orchestrator = CommandOrchestrator(service, output=sys.stdout)
    orchestrator.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass

from domain.models import DEFAULT_PENALTY_PER_WRONG

TRUTHY = ("true", "1", "yes", "on")
FALSY = ("false", "0", "no", "off")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Scoreboard engine settings."""

    auto_register: bool = True
    penalty_per_wrong: int = DEFAULT_PENALTY_PER_WRONG
    log_level: str = "WARNING"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    if value.strip().lower() in TRUTHY:
        return True
    if value.strip().lower() in FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got: {value}")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got: {value}") from e


def parse_log_level(value: str) -> str:
    """Normalize a loguru level name, rejecting unknown levels."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got: {value}")
    return level


def load_settings() -> Settings:
    """
    Build settings from SCOREBOARD_* environment variables.

    Call ``load_dotenv()`` first to pick up a local .env file.
    """
    return Settings(
        auto_register=_env_bool("SCOREBOARD_AUTO_REGISTER", True),
        penalty_per_wrong=_env_int("SCOREBOARD_PENALTY_PER_WRONG", DEFAULT_PENALTY_PER_WRONG),
        log_level=parse_log_level(os.getenv("SCOREBOARD_LOG_LEVEL", "WARNING")),
    )

from services.contest import ContestService
from services.freeze import FreezeController
from services.ranking import rank
from services.scroll import ScrollEngine


def create_contest_service(settings=None) -> ContestService:
    """Factory function to create a contest service from settings."""
    from infrastructure.settings import load_settings

    settings = settings or load_settings()

    return ContestService(
        auto_register=settings.auto_register,
        penalty_per_wrong=settings.penalty_per_wrong,
    )


__all__ = [
    "ContestService",
    "FreezeController",
    "ScrollEngine",
    "create_contest_service",
    "rank",
]

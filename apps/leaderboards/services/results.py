"""Result wrapping shared by the public leaderboards services."""

from apps.common.results import ServiceResult, returns_result

from .exceptions import LeaderboardsServiceError, StorageError

GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."

# Domain errors pass through as typed failures; anything else is logged
# and reported as a StorageError.
leaderboard_service = returns_result(
    LeaderboardsServiceError,
    fallback=lambda: StorageError(GENERIC_FAILURE_MESSAGE),
)

__all__ = ['ServiceResult', 'leaderboard_service', 'GENERIC_FAILURE_MESSAGE']

"""Per-user daily cap on generation requests."""

from collections.abc import Callable
from datetime import UTC, datetime

import structlog

from flashdeck.application.generation.exceptions import (
    DailyLimitExceededError,
    QuotaCheckFailedError,
)
from flashdeck.application.generation.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import UserId

logger = structlog.get_logger(__name__)


def start_of_utc_day(moment: datetime) -> datetime:
    return moment.astimezone(UTC).replace(hour=0, minute=0, second=0, microsecond=0)


class QuotaGuard:
    """
    Rejects a request once the user has used up today's generations.

    The count is read here and incremented later by the recorder, outside
    any shared transaction. Concurrent requests from one user can therefore
    overshoot the limit slightly.
    """

    def __init__(
        self,
        generation_repository: GenerationRepositoryProtocol,
        daily_limit: int,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self.generation_repository = generation_repository
        self.daily_limit = daily_limit
        self.clock = clock

    def ensure_within_limit(self, user_id: UserId) -> int:
        """
        Check today's usage for a user.

        Returns:
            Number of generations the user has made since UTC midnight

        Raises:
            QuotaCheckFailedError: If the usage count cannot be read
            DailyLimitExceededError: If the count has reached the daily limit
        """
        since = start_of_utc_day(self.clock())
        try:
            used = self.generation_repository.count_generations_since(user_id, since)
        except Exception as e:
            logger.error(
                "generation_quota_check_failed",
                user_id=str(user_id),
                error=str(e),
            )
            raise QuotaCheckFailedError(diagnostic=str(e)) from e

        if used >= self.daily_limit:
            logger.warning(
                "daily_generation_limit_exceeded",
                user_id=str(user_id),
                used=used,
                limit=self.daily_limit,
            )
            raise DailyLimitExceededError(self.daily_limit)

        return used

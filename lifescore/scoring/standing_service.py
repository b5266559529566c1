"""
Standing service for serving a user's score and standing through the cache.

Computes the breakdown on every call (it is cheap) and only falls back to
the estimator when the cache has no fresh standing for the user.
"""

import logging
from typing import Any, Optional, Tuple

from lifescore.models.global_standing import GlobalStanding
from lifescore.models.life_score import LifeScoreBreakdown
from lifescore.models.user_record import UserRecord
from lifescore.scoring.score_calculator import LifeScoreCalculator
from lifescore.scoring.standing_estimator import GlobalStandingEstimator
from lifescore.storage.standing_cache import StandingCache


logger = logging.getLogger(__name__)


class StandingService:
    """
    Get-or-compute access to a user's global standing.

    Users without an id are scored and estimated but never cached.

    Example usage:
        service = StandingService(StandingCache(InMemoryKeyValueStore()))
        breakdown, standing = service.resolve(user)
    """

    def __init__(
        self,
        cache: StandingCache,
        calculator: Optional[LifeScoreCalculator] = None,
        estimator: Optional[GlobalStandingEstimator] = None,
    ) -> None:
        self.cache = cache
        self.calculator = calculator or LifeScoreCalculator()
        self.estimator = estimator or GlobalStandingEstimator()

    def resolve(self, user: Any) -> Tuple[LifeScoreBreakdown, GlobalStanding]:
        """
        Score a user and return their standing, from cache when fresh.

        Args:
            user: UserRecord or raw user mapping

        Returns:
            (breakdown, standing)
        """
        record = UserRecord.from_raw(user)
        breakdown = self.calculator.calculate(record)
        score = breakdown.total_life_score

        if record.id:
            cached = self.cache.get_cached_global_standing(record.id, score)
            if cached is not None:
                return breakdown, cached

        standing = self.estimator.estimate(score, record)
        if record.id:
            self.cache.set_cached_global_standing(record.id, standing, score)
        return breakdown, standing

    def refresh(self, user: Any) -> Tuple[LifeScoreBreakdown, GlobalStanding]:
        """
        Drop the user's cached standing and recompute it.

        Args:
            user: UserRecord or raw user mapping

        Returns:
            (breakdown, freshly estimated standing)
        """
        record = UserRecord.from_raw(user)
        if record.id:
            logger.debug(f"Refreshing standing for user {record.id}")
            self.cache.invalidate(record.id)
        return self.resolve(record)

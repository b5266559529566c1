"""
StandingCache - Per-user cache of computed global standings.

Entries are stored as JSON under "lifescore_standing_{user_id}" in an
injected KeyValueStore. An entry is served only while it is younger than
24 hours and was computed for a score within 100 points of the current
one; stale entries are deleted on read.

Cache failures never reach the caller: a failed read is a miss, a failed
write is a no-op.
"""

import logging
import time
from typing import Callable, Optional

from lifescore.models.cached_standing import CachedStanding
from lifescore.models.global_standing import GlobalStanding
from lifescore.storage.kv_store import KeyValueStore
from lifescore.utils.constants import (
    CACHE_DURATION_MS,
    CACHE_KEY_PREFIX,
    CACHE_SCORE_TOLERANCE,
)


logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def cache_key(user_id: str) -> str:
    return f"{CACHE_KEY_PREFIX}{user_id}"


class StandingCache:
    """
    Time- and score-bounded standing cache.

    Example usage:
        cache = StandingCache(InMemoryKeyValueStore())
        standing = cache.get_cached_global_standing(user.id, score)
        if standing is None:
            standing = estimate_global_standing(score, user)
            cache.set_cached_global_standing(user.id, standing, score)
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        Initialize cache.

        Args:
            store: Backing key-value store
            clock: Zero-arg callable returning epoch millis.
                   Defaults to wall-clock time.
        """
        self.store = store
        self.clock = clock or _now_ms

    def get_cached_global_standing(
        self, user_id: str, current_score: float
    ) -> Optional[GlobalStanding]:
        """
        Return the cached standing if it is still fresh.

        Fresh means: now - timestamp < 24h and |stored score - current| < 100.
        A stale entry is deleted before returning None.

        Args:
            user_id: User the standing belongs to
            current_score: The user's current total LifeScore

        Returns:
            Cached GlobalStanding, or None on miss, staleness or any failure
        """
        key = cache_key(user_id)
        try:
            raw = self.store.get(key)
            if not raw:
                logger.debug(f"Standing cache miss for {key}")
                return None

            entry = CachedStanding.model_validate_json(raw)

            if self._is_fresh(entry, current_score):
                logger.debug(f"Standing cache hit for {key}")
                return entry.standing

            logger.debug(f"Standing cache entry for {key} is stale, removing")
            self.store.delete(key)
            return None
        except Exception as e:
            logger.warning(f"Standing cache read failed for {key}: {e}")
            return None

    def set_cached_global_standing(
        self, user_id: str, standing: GlobalStanding, score: float
    ) -> None:
        """
        Store a standing, overwriting any existing entry.

        Records the current clock time and the score it was computed for.
        """
        key = cache_key(user_id)
        try:
            entry = CachedStanding(standing=standing, timestamp=self.clock(), score=score)
            self.store.set(key, entry.model_dump_json(by_alias=True))
        except Exception as e:
            logger.warning(f"Standing cache write failed for {key}: {e}")

    def invalidate(self, user_id: str) -> None:
        """Drop a user's cached standing."""
        key = cache_key(user_id)
        try:
            self.store.delete(key)
        except Exception as e:
            logger.warning(f"Standing cache invalidate failed for {key}: {e}")

    def _is_fresh(self, entry: CachedStanding, current_score: float) -> bool:
        age_ms = self.clock() - entry.timestamp
        score_delta = abs(entry.score - current_score)
        return age_ms < CACHE_DURATION_MS and score_delta < CACHE_SCORE_TOLERANCE


def get_cached_global_standing(
    store: KeyValueStore, user_id: str, current_score: float
) -> Optional[GlobalStanding]:
    """
    Read a fresh cached standing from a store.

    Convenience function using a default-clock cache.
    """
    cache = StandingCache(store)
    return cache.get_cached_global_standing(user_id, current_score)


def set_cached_global_standing(
    store: KeyValueStore, user_id: str, standing: GlobalStanding, score: float
) -> None:
    """
    Write a standing to a store.

    Convenience function using a default-clock cache.
    """
    cache = StandingCache(store)
    cache.set_cached_global_standing(user_id, standing, score)

"""
Leaderboard and rank helpers.

Ranks users against each other by total LifeScore, and converts a score
into an estimated rank worldwide or within a country.
"""

import math
from typing import Any, Iterable, List, Optional

from lifescore.classifiers.score_level_classifier import ScoreLevelClassifier
from lifescore.models.leaderboard_entry import LeaderboardEntry
from lifescore.models.user_record import UserRecord
from lifescore.scoring.score_calculator import LifeScoreCalculator
from lifescore.scoring.standing_estimator import GlobalStandingEstimator
from lifescore.utils.constants import COUNTRY_POPULATIONS, DEFAULT_COUNTRY_POPULATION


def get_global_rank(score: float) -> int:
    """
    Estimated worldwide rank for a score (1 = top).

    Rank = 8 billion - people ahead, from a score-only estimate.
    """
    return GlobalStandingEstimator().estimate(score).global_rank


def get_country_rank(score: float, country: str) -> int:
    """
    Estimated rank within a country.

    Formula: floor(population × (1 - percentile / 100)). Countries missing
    from the population table are treated as 50 million people.
    """
    standing = GlobalStandingEstimator().estimate(score)
    population = COUNTRY_POPULATIONS.get(country, DEFAULT_COUNTRY_POPULATION)
    return math.floor(population * (1 - standing.percentile / 100))


def build_leaderboard(
    users: Iterable[Any], limit: Optional[int] = None
) -> List[LeaderboardEntry]:
    """
    Rank users by total LifeScore, highest first.

    Ties keep their input order. Ranks are 1-based and contiguous.

    Args:
        users: UserRecords or raw user mappings
        limit: Keep only the top N entries (None = all)

    Returns:
        List of LeaderboardEntry
    """
    calculator = LifeScoreCalculator()
    classifier = ScoreLevelClassifier()

    scored = []
    for user in users:
        record = UserRecord.from_raw(user)
        scored.append((record, calculator.calculate(record).total_life_score))

    scored.sort(key=lambda item: item[1], reverse=True)
    if limit is not None:
        scored = scored[:max(limit, 0)]

    return [
        LeaderboardEntry(
            rank=position,
            user_id=record.id,
            name=record.name,
            country=record.country,
            total_life_score=score,
            level=classifier.classify(score).level,
        )
        for position, (record, score) in enumerate(scored, start=1)
    ]

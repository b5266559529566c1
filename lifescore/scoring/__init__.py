"""LifeScore calculation and global standing estimation."""

from .score_calculator import (
    LifeScoreCalculator,
    calculate_life_score,
    update_user_life_score,
    format_score_breakdown,
)
from .standing_estimator import GlobalStandingEstimator, estimate_global_standing
from .standing_service import StandingService
from .leaderboard import build_leaderboard, get_global_rank, get_country_rank

__all__ = [
    'LifeScoreCalculator',
    'calculate_life_score',
    'update_user_life_score',
    'format_score_breakdown',
    'GlobalStandingEstimator',
    'estimate_global_standing',
    'StandingService',
    'build_leaderboard',
    'get_global_rank',
    'get_country_rank',
]

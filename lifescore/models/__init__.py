"""Data models for the LifeScore engine."""

from .user_record import UserRecord, WealthProfile, KnowledgeProfile, Asset
from .life_score import LifeScoreBreakdown, WealthBreakdown, KnowledgeBreakdown
from .global_standing import GlobalStanding, SurpassedCountry
from .cached_standing import CachedStanding
from .score_level import ScoreLevel
from .leaderboard_entry import LeaderboardEntry

__all__ = [
    'UserRecord',
    'WealthProfile',
    'KnowledgeProfile',
    'Asset',
    'LifeScoreBreakdown',
    'WealthBreakdown',
    'KnowledgeBreakdown',
    'GlobalStanding',
    'SurpassedCountry',
    'CachedStanding',
    'ScoreLevel',
    'LeaderboardEntry',
]

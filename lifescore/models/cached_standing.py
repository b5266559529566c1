"""
CachedStanding model - A standing persisted per user with the score it was
computed for and when.
"""

from .global_standing import GlobalStanding
from .user_record import CamelModel


class CachedStanding(CamelModel):
    standing: GlobalStanding
    timestamp: int  # epoch millis
    score: float

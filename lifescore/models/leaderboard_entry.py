"""
LeaderboardEntry model - One ranked row of a leaderboard.
"""

from typing import Any, Dict

from pydantic import Field

from .user_record import CamelModel


class LeaderboardEntry(CamelModel):
    rank: int = Field(ge=1)
    user_id: str
    name: str = ""
    country: str = ""
    total_life_score: float = Field(ge=0)
    level: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True)

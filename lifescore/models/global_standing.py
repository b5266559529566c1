"""
GlobalStanding model - Where a score places a user among 8 billion people.
"""

from typing import Any, Dict, List

from pydantic import Field

from .user_record import CamelModel
from lifescore.utils.constants import WORLD_POPULATION


class SurpassedCountry(CamelModel):
    name: str
    population: str  # display string, e.g. "165M", "1.38B", "772K"
    flag: str


class GlobalStanding(CamelModel):
    """
    Estimated global standing for a score.

    Attributes:
        percentile: share of the world the score is ahead of (0-100, truncated)
        people_ahead: people the user is ahead of (0 to 8e9)
        facts: display sentences, in a fixed order
        wealth_percentile: percentile from the user's wealth total
        education_percentile: percentile from the user's education level
        surpassed_countries: at most 10 countries, in reference-list order
        global_rank_estimate: "You're ahead of N people globally"
    """

    percentile: int = Field(default=0, ge=0, le=100)
    people_ahead: int = Field(default=0, ge=0, le=WORLD_POPULATION)
    facts: List[str] = Field(default_factory=list)
    wealth_percentile: float = 0
    education_percentile: float = 0
    surpassed_countries: List[SurpassedCountry] = Field(default_factory=list, max_length=10)
    global_rank_estimate: str = ""

    @property
    def global_rank(self) -> int:
        """Position counted from the top: 8 billion minus people behind you."""
        return WORLD_POPULATION - self.people_ahead

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape used by clients and the cache."""
        return self.model_dump(mode='json', by_alias=True)

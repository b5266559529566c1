"""
LifeScoreBreakdown model - A computed score and its line items.

The breakdown is what the dashboard shows under the score; the two
sub-scores are clamped independently before they are summed.
"""

from typing import Any, Dict

from pydantic import Field, model_validator

from .user_record import CamelModel


class WealthBreakdown(CamelModel):
    """Points per wealth source. Divided amounts are rounded for display."""

    income: float = 0
    savings: float = 0
    investments: float = 0
    home: float = 0
    car: float = 0
    business: float = 0
    items: float = 0
    other_assets: float = 0


class KnowledgeBreakdown(CamelModel):
    """Points per knowledge source."""

    education: float = 0
    languages: float = 0
    certificates: float = 0


class ScoreBreakdownDetail(CamelModel):
    wealth: WealthBreakdown = Field(default_factory=WealthBreakdown)
    knowledge: KnowledgeBreakdown = Field(default_factory=KnowledgeBreakdown)


class LifeScoreBreakdown(CamelModel):
    """
    Result of scoring one user.

    Attributes:
        wealth_score: 0 to 20,000
        knowledge_score: 0 to 10,000
        total_life_score: wealth_score + knowledge_score
        breakdown: per-source line items
    """

    wealth_score: float = Field(default=0, ge=0, le=20000)
    knowledge_score: float = Field(default=0, ge=0, le=10000)
    total_life_score: float = Field(default=0, ge=0, le=30000)
    breakdown: ScoreBreakdownDetail = Field(default_factory=ScoreBreakdownDetail)

    @model_validator(mode='after')
    def _check_total(self) -> 'LifeScoreBreakdown':
        if self.total_life_score != self.wealth_score + self.knowledge_score:
            raise ValueError(
                f"total_life_score must equal wealth_score + knowledge_score, "
                f"got {self.total_life_score} != {self.wealth_score} + {self.knowledge_score}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape the dashboard reads."""
        return self.model_dump(mode='json', by_alias=True)

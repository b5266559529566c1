"""
Score calculator for turning a user record into a LifeScore.

Scores wealth (salary, savings, investments, assets) and knowledge
(education, languages, certificates) separately, caps each, and sums
them into the total LifeScore.
"""

from typing import Any, List

from lifescore.models.life_score import (
    KnowledgeBreakdown,
    LifeScoreBreakdown,
    ScoreBreakdownDetail,
    WealthBreakdown,
)
from lifescore.models.user_record import Asset, KnowledgeProfile, UserRecord, WealthProfile
from lifescore.utils.constants import (
    BUSINESS_ASSET_TYPE,
    BUSINESS_POINTS_EACH,
    CAR_ASSET_TYPES,
    CAR_BONUS,
    CERTIFICATE_CAP,
    CERTIFICATE_POINTS_EACH,
    EDUCATION_POINTS,
    HOME_ASSET_TYPES,
    HOME_BONUS,
    INCOME_CAP,
    INCOME_DIVISOR,
    INVESTMENTS_CAP,
    INVESTMENTS_DIVISOR,
    ITEMS_CAP,
    ITEMS_DIVISOR,
    LANGUAGE_CAP,
    LANGUAGE_POINTS_EACH,
    LUXURY_ASSET_TYPES,
    LUXURY_CAP,
    LUXURY_DIVISOR,
    MAX_KNOWLEDGE_SCORE,
    MAX_WEALTH_SCORE,
    NON_ITEM_ASSET_TYPES,
    SAVINGS_CAP,
    SAVINGS_DIVISOR,
)
from lifescore.utils.formatting import format_number, normalize_education_key, round_half_up


class LifeScoreCalculator:
    """
    Calculator for LifeScore breakdowns.

    Never raises: missing or malformed fields in the user record are
    scored as zero/empty.

    Example usage:
        calculator = LifeScoreCalculator()
        breakdown = calculator.calculate(user)
    """

    def calculate(self, user: Any) -> LifeScoreBreakdown:
        """
        Calculate the LifeScore breakdown for a user.

        Args:
            user: UserRecord, or a raw user mapping (camelCase or snake_case)

        Returns:
            LifeScoreBreakdown with both sub-scores and line items
        """
        record = UserRecord.from_raw(user)

        wealth_score, wealth_breakdown = self._score_wealth(record.wealth, record.assets)
        knowledge_score, knowledge_breakdown = self._score_knowledge(record.knowledge)

        return LifeScoreBreakdown(
            wealth_score=wealth_score,
            knowledge_score=knowledge_score,
            total_life_score=wealth_score + knowledge_score,
            breakdown=ScoreBreakdownDetail(
                wealth=wealth_breakdown,
                knowledge=knowledge_breakdown,
            ),
        )

    def _score_wealth(self, wealth: WealthProfile, assets: List[Asset]):
        """
        Score financial data and owned assets.

        Each term is capped on its own, then the sum is capped at 20,000.
        """
        income_points = min(wealth.salary / INCOME_DIVISOR, INCOME_CAP)
        savings_points = min(wealth.savings / SAVINGS_DIVISOR, SAVINGS_CAP)
        investment_points = min(wealth.investments / INVESTMENTS_DIVISOR, INVESTMENTS_CAP)

        has_home = any(a.type in HOME_ASSET_TYPES for a in assets)
        has_car = any(a.type in CAR_ASSET_TYPES for a in assets)
        businesses = sum(1 for a in assets if a.type == BUSINESS_ASSET_TYPE)

        home_points = HOME_BONUS if has_home else 0
        car_points = CAR_BONUS if has_car else 0
        business_points = businesses * BUSINESS_POINTS_EACH

        # Everything that is not a home, car or business, luxury included
        items_value = sum(a.value for a in assets if a.type not in NON_ITEM_ASSET_TYPES)
        item_points = min(items_value / ITEMS_DIVISOR, ITEMS_CAP)

        luxury_value = sum(a.value for a in assets if a.type in LUXURY_ASSET_TYPES)
        luxury_points = min(luxury_value / LUXURY_DIVISOR, LUXURY_CAP)

        wealth_score = min(
            income_points + savings_points + investment_points
            + home_points + car_points + business_points
            + item_points + luxury_points,
            MAX_WEALTH_SCORE,
        )

        breakdown = WealthBreakdown(
            income=round_half_up(income_points),
            savings=round_half_up(savings_points),
            investments=round_half_up(investment_points),
            home=home_points,
            car=car_points,
            business=business_points,
            items=round_half_up(item_points),
            other_assets=round_half_up(luxury_points),
        )
        return wealth_score, breakdown

    def _score_knowledge(self, knowledge: KnowledgeProfile):
        """Score education level, languages and certificates, capped at 10,000."""
        education_key = normalize_education_key(knowledge.education)
        education_points = EDUCATION_POINTS.get(education_key, EDUCATION_POINTS['none'])

        language_points = min(len(knowledge.languages) * LANGUAGE_POINTS_EACH, LANGUAGE_CAP)
        certificate_points = min(
            len(knowledge.certificates) * CERTIFICATE_POINTS_EACH, CERTIFICATE_CAP
        )

        knowledge_score = min(
            education_points + language_points + certificate_points,
            MAX_KNOWLEDGE_SCORE,
        )

        breakdown = KnowledgeBreakdown(
            education=education_points,
            languages=language_points,
            certificates=certificate_points,
        )
        return knowledge_score, breakdown


def calculate_life_score(user: Any) -> LifeScoreBreakdown:
    """
    Calculate the LifeScore breakdown for a user.

    Convenience function using default calculator.

    Args:
        user: UserRecord or raw user mapping

    Returns:
        LifeScoreBreakdown
    """
    calculator = LifeScoreCalculator()
    return calculator.calculate(user)


def update_user_life_score(user: Any) -> UserRecord:
    """
    Return a copy of the user with `life_score` set to the computed total.

    The input record is not modified.
    """
    record = UserRecord.from_raw(user)
    breakdown = calculate_life_score(record)
    return record.model_copy(
        update={'life_score': breakdown.total_life_score}, deep=True
    )


def format_score_breakdown(breakdown: LifeScoreBreakdown) -> str:
    """
    One-line summary of a breakdown.

    Example:
        "LifeScore: 9,630.03 XP (Wealth: 6,130.03, Knowledge: 3,500)"
    """
    return (
        f"LifeScore: {format_number(breakdown.total_life_score)} XP "
        f"(Wealth: {format_number(breakdown.wealth_score)}, "
        f"Knowledge: {format_number(breakdown.knowledge_score)})"
    )

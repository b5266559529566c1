"""
Global standing estimator for placing a LifeScore among 8 billion people.

Maps a total score to a percentile on a concave curve, counts the people
the user is ahead of, picks the countries whose average citizen the score
beats, and assembles display facts.
"""

import math
import re
from typing import Any, List, Optional, Tuple

from lifescore.models.global_standing import GlobalStanding, SurpassedCountry
from lifescore.models.user_record import UserRecord, coerce_amount
from lifescore.utils.constants import (
    BAND_FACTS,
    COUNTRIES,
    DEFAULT_EDUCATION_PERCENTILE,
    EDUCATION_FACT_THRESHOLD,
    EDUCATION_PERCENTILES,
    MAX_LIFE_SCORE,
    MAX_SURPASSED_COUNTRIES,
    PERCENTILE_CURVE_EXPONENT,
    SCORE_BANDS,
    TOP_WEALTH_PERCENTILE,
    WEALTH_FACT_THRESHOLD,
    WEALTH_PERCENTILE_BREAKPOINTS,
    WORLD_POPULATION,
)
from lifescore.utils.formatting import format_percentile, normalize_education_key


class GlobalStandingEstimator:
    """
    Estimator for a user's global standing.

    Deterministic given its inputs; never mutates the user record.

    Example usage:
        estimator = GlobalStandingEstimator()
        standing = estimator.estimate(breakdown.total_life_score, user)
    """

    def estimate(self, total_score: float, user: Any = None) -> GlobalStanding:
        """
        Estimate the global standing for a score.

        Args:
            total_score: Total LifeScore (0-30,000)
            user: UserRecord, raw user mapping, or None for score-only estimates

        Returns:
            GlobalStanding with percentile, rank, countries and facts
        """
        total_score = coerce_amount(total_score)
        record = UserRecord.from_raw(user)

        percentile = self._curved_percentile(total_score)
        people_ahead = math.floor(percentile * WORLD_POPULATION)
        percentile_display = math.floor(percentile * 100)

        wealth_percentile = self._wealth_percentile(record.wealth.total)
        education_percentile = self._education_percentile(record.knowledge.education)

        surpassed = self._surpassed_countries(total_score)

        facts = self._build_facts(
            total_score, wealth_percentile, education_percentile, surpassed
        )

        return GlobalStanding(
            percentile=percentile_display,
            people_ahead=people_ahead,
            facts=facts,
            wealth_percentile=wealth_percentile,
            education_percentile=education_percentile,
            surpassed_countries=[
                SurpassedCountry(name=name, population=population, flag=flag)
                for name, population, flag, _ in surpassed[:MAX_SURPASSED_COUNTRIES]
            ],
            global_rank_estimate=f"You're ahead of {people_ahead:,} people globally",
        )

    def _curved_percentile(self, total_score: float) -> float:
        """
        Map a score to a 0-1 percentile.

        Formula: p = min(score / 30000, 1) ^ 0.7

        The exponent below 1 makes high percentiles harder to reach than a
        linear mapping would.
        """
        raw = min(total_score / MAX_LIFE_SCORE, 1)
        return raw ** PERCENTILE_CURVE_EXPONENT

    def _wealth_percentile(self, wealth_total: float) -> float:
        """Step function over fixed USD breakpoints."""
        for upper_bound, percentile in WEALTH_PERCENTILE_BREAKPOINTS:
            if wealth_total < upper_bound:
                return percentile
        return TOP_WEALTH_PERCENTILE

    def _education_percentile(self, education: str) -> float:
        key = normalize_education_key(education)
        return EDUCATION_PERCENTILES.get(key, DEFAULT_EDUCATION_PERCENTILE)

    def _surpassed_countries(self, total_score: float) -> List[Tuple[str, str, str, int]]:
        """
        All reference countries with a threshold strictly below the score.

        Kept in reference-list order, untruncated.
        """
        return [country for country in COUNTRIES if total_score > country[3]]

    def _build_facts(
        self,
        total_score: float,
        wealth_percentile: float,
        education_percentile: float,
        surpassed: List[Tuple[str, str, str, int]],
    ) -> List[str]:
        """
        Assemble display facts in their fixed order.

        1. The narrative pair for the score's band
        2. A wealth fact above the 90th wealth percentile
        3. An education fact above the 85th education percentile
        4. Country count and combined population, if any were surpassed
        """
        facts = list(self._band_facts(total_score))

        if wealth_percentile > WEALTH_FACT_THRESHOLD:
            facts.append(
                f"Your wealth puts you in the top {100 - wealth_percentile:.1f}% globally"
            )

        if education_percentile > EDUCATION_FACT_THRESHOLD:
            facts.append(
                f"Your education level exceeds {format_percentile(education_percentile)}% "
                f"of the world's population"
            )

        if surpassed:
            combined_millions = sum(
                self._population_in_millions(population)
                for _, population, _, _ in surpassed
            )
            facts.append(f"You outrank the average citizen of {len(surpassed)} countries")
            facts.append(f"Combined population surpassed: {combined_millions:.1f}M+ people")

        return facts

    @staticmethod
    def _band_facts(total_score: float) -> Tuple[str, str]:
        for (upper_bound, _, _, _), pair in zip(SCORE_BANDS, BAND_FACTS):
            if total_score < upper_bound:
                return pair
        return BAND_FACTS[-1]

    @staticmethod
    def _population_in_millions(population: str) -> float:
        """
        Parse a population display string to millions.

        "165M" -> 165, "1.38B" -> 1380. The K suffix is not scaled, so
        "772K" counts as 772.
        """
        digits = re.sub(r'[^\d.]', '', population)
        try:
            value = float(digits)
        except ValueError:
            return 0.0
        return value * 1000 if 'B' in population else value


def estimate_global_standing(total_score: float, user: Optional[Any] = None) -> GlobalStanding:
    """
    Estimate global standing for a score.

    Convenience function using default estimator.

    Args:
        total_score: Total LifeScore
        user: UserRecord or raw user mapping (wealth total and education are read)

    Returns:
        GlobalStanding
    """
    estimator = GlobalStandingEstimator()
    return estimator.estimate(total_score, user)

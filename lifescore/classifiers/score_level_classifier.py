"""
Score level classifier for labelling a LifeScore with a named tier.

Uses the same breakpoints as the estimator's narrative facts, so a score's
tier and its band facts always agree.
"""

from typing import List

from lifescore.models.score_level import ScoreLevel
from lifescore.models.user_record import coerce_amount
from lifescore.utils.constants import SCORE_BANDS


class ScoreLevelClassifier:
    """
    Classifier mapping a total score to one of seven tiers.

    Tiers: Developing, Emerging, Established, Advanced, Elite,
    Exceptional, Legendary.

    Example usage:
        classifier = ScoreLevelClassifier()
        level = classifier.classify(12500)  # ScoreLevel(level='Advanced', ...)
    """

    def __init__(self) -> None:
        self._bands = [
            (upper_bound, ScoreLevel(level=level, color=color, description=description))
            for upper_bound, level, color, description in SCORE_BANDS
        ]

    def classify(self, score: float) -> ScoreLevel:
        """
        Classify a score.

        Args:
            score: Total LifeScore. Coerced like any amount, so NaN and
                unparseable values classify as the lowest tier.

        Returns:
            ScoreLevel for the first band whose upper bound exceeds the score
        """
        score = coerce_amount(score)
        for upper_bound, level in self._bands:
            if score < upper_bound:
                return level
        return self._bands[-1][1]

    @property
    def levels(self) -> List[str]:
        """Tier names from lowest to highest."""
        return [level.level for _, level in self._bands]


def get_score_level(score: float) -> ScoreLevel:
    """
    Get the score level for a score.

    Convenience function using default classifier.
    """
    classifier = ScoreLevelClassifier()
    return classifier.classify(score)

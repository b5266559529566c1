"""Score level classification."""

from .score_level_classifier import ScoreLevelClassifier, get_score_level

__all__ = [
    'ScoreLevelClassifier',
    'get_score_level',
]

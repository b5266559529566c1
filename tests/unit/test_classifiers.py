"""
Unit tests for classifiers.

Tests cover:
- Score level band boundaries
- Level colors and descriptions
- Agreement with the estimator's band facts
"""

import pytest

from lifescore.classifiers import ScoreLevelClassifier, get_score_level
from lifescore.scoring.standing_estimator import GlobalStandingEstimator
from lifescore.utils.constants import BAND_FACTS


# =============================================================================
# ScoreLevelClassifier Tests
# =============================================================================

class TestScoreLevelClassifier:
    """Tests for score level classification."""

    @pytest.fixture
    def classifier(self):
        return ScoreLevelClassifier()

    @pytest.mark.parametrize("score,expected", [
        (0, 'Developing'),
        (2999.99, 'Developing'),
        (3000, 'Emerging'),
        (5999, 'Emerging'),
        (6000, 'Established'),
        (9630.03, 'Established'),
        (9999, 'Established'),
        (10000, 'Advanced'),
        (14999, 'Advanced'),
        (15000, 'Elite'),
        (19999, 'Elite'),
        (20000, 'Exceptional'),
        (24999.9, 'Exceptional'),
        (25000, 'Legendary'),
        (30000, 'Legendary'),
    ])
    def test_band_boundaries(self, classifier, score, expected):
        """Test lower bounds are inclusive, upper bounds exclusive."""
        assert classifier.classify(score).level == expected

    def test_levels_in_order(self, classifier):
        assert classifier.levels == [
            'Developing', 'Emerging', 'Established', 'Advanced',
            'Elite', 'Exceptional', 'Legendary',
        ]

    def test_level_details(self, classifier):
        """Test color tokens and descriptions."""
        elite = classifier.classify(17000)
        legendary = classifier.classify(29000)

        assert elite.color == 'text-blue-400'
        assert elite.description == 'Top tier globally'
        assert legendary.color == 'text-pink-400'
        assert legendary.description == 'Global top 1%'

    def test_above_max_is_legendary(self, classifier):
        assert classifier.classify(1_000_000).level == 'Legendary'

    def test_convenience_function(self):
        assert get_score_level(4500).level == 'Emerging'
        assert get_score_level(4500) == ScoreLevelClassifier().classify(4500)

    def test_agrees_with_band_facts(self, classifier):
        """Test a score's level and its narrative facts come from the same band."""
        estimator = GlobalStandingEstimator()
        for score in range(0, 30001, 500):
            band = classifier.levels.index(classifier.classify(score).level)
            assert estimator.estimate(score).facts[:2] == list(BAND_FACTS[band])

    @pytest.mark.parametrize("score,expected", [
        (float('nan'), 'Developing'),
        (None, 'Developing'),
        ('abc', 'Developing'),
        (-500, 'Developing'),
        ('12,500', 'Advanced'),
        (float('inf'), 'Legendary'),
        (10**400, 'Legendary'),
    ])
    def test_coerces_score(self, classifier, score, expected):
        assert classifier.classify(score).level == expected
        assert get_score_level(score).level == expected

    @pytest.mark.parametrize("score", [float('nan'), float('inf'), None, 'abc'])
    def test_unusual_scores_agree_with_band_facts(self, classifier, score):
        estimator = GlobalStandingEstimator()
        band = classifier.levels.index(classifier.classify(score).level)
        assert estimator.estimate(score).facts[:2] == list(BAND_FACTS[band])

"""
Unit tests for data models.

Tests cover:
- UserRecord: coercion, aliases, degraded input
- LifeScoreBreakdown: bounds, total invariant
- GlobalStanding: bounds, rank, serialization
- CachedStanding, ScoreLevel, LeaderboardEntry
"""

import dataclasses
import json
import sys

import pytest
from pydantic import ValidationError

from lifescore.models import (
    Asset,
    CachedStanding,
    GlobalStanding,
    KnowledgeProfile,
    LeaderboardEntry,
    LifeScoreBreakdown,
    ScoreLevel,
    SurpassedCountry,
    UserRecord,
    WealthProfile,
)
from lifescore.models.user_record import coerce_amount, coerce_string_list


# =============================================================================
# Coercion Helper Tests
# =============================================================================

class TestCoercion:
    """Tests for amount and list coercion."""

    @pytest.mark.parametrize("raw,expected", [
        (5000, 5000.0),
        (5000.5, 5000.5),
        ("5000", 5000.0),
        ("$5,000.00", 5000.0),
        (" 1 200 ", 1200.0),
        (None, 0.0),
        (True, 0.0),
        ("", 0.0),
        ("-", 0.0),
        ("abc", 0.0),
        (-250, 0.0),
        ("-250", 0.0),
        (float('nan'), 0.0),
        (float('-inf'), 0.0),
        (-10**400, 0.0),
        ([1, 2], 0.0),
    ])
    def test_coerce_amount(self, raw, expected):
        assert coerce_amount(raw) == expected

    def test_coerce_amount_keeps_large_values(self):
        """Test infinite and overflowing amounts stay large instead of dropping to 0."""
        assert coerce_amount(float('inf')) == float('inf')
        assert coerce_amount("1e400") == float('inf')
        assert coerce_amount(json.loads('{"salary": 1e400}')["salary"]) == float('inf')
        assert coerce_amount(10**400) == sys.float_info.max

    def test_coerce_string_list(self):
        assert coerce_string_list(None) == []
        assert coerce_string_list("") == []
        assert coerce_string_list("English") == ["English"]
        assert coerce_string_list(["a", None, 3, "a"]) == ["a", "3", "a"]
        assert coerce_string_list(("x",)) == ["x"]
        assert coerce_string_list({"a": 1}) == []


# =============================================================================
# UserRecord Tests
# =============================================================================

class TestUserRecord:
    """Tests for UserRecord model."""

    def test_camel_case_input(self):
        """Test the application's camelCase shape is accepted."""
        user = UserRecord.from_raw({
            'id': 'u1',
            'lifeScore': 1234,
            'wealth': {'salary': 1000},
        })

        assert user.id == 'u1'
        assert user.life_score == 1234
        assert user.wealth.salary == 1000

    def test_snake_case_input(self):
        """Test Python-side field names are accepted."""
        user = UserRecord(id='u1', life_score=99)
        assert user.life_score == 99

    def test_defaults(self):
        """Test an empty record."""
        user = UserRecord()

        assert user.id == ""
        assert user.wealth == WealthProfile()
        assert user.knowledge == KnowledgeProfile()
        assert user.assets == []
        assert user.wealth.currency == "USD"

    def test_null_fields_coalesce(self):
        """Test nulls become defaults instead of errors."""
        user = UserRecord.from_raw({
            'id': None,
            'wealth': {'salary': None, 'currency': None},
            'knowledge': {'education': None, 'certificates': None, 'languages': None},
            'assets': None,
        })

        assert user.id == ""
        assert user.wealth.salary == 0
        assert user.wealth.currency == "USD"
        assert user.knowledge.education == ""
        assert user.knowledge.certificates == []
        assert user.assets == []

    def test_non_mapping_sections(self):
        """Test wealth or knowledge given as scalars are ignored."""
        user = UserRecord.from_raw({'wealth': 5, 'knowledge': 'phd', 'assets': 'house'})

        assert user.wealth == WealthProfile()
        assert user.knowledge == KnowledgeProfile()
        assert user.assets == []

    def test_non_dict_assets_dropped(self):
        """Test junk entries in the asset list are skipped."""
        user = UserRecord.from_raw({'assets': [None, 'x', 7, {'type': 'car', 'value': 1}]})

        assert len(user.assets) == 1
        assert user.assets[0].type == 'car'

    def test_numeric_id_stringified(self):
        user = UserRecord.from_raw({'id': 42})
        assert user.id == '42'

    def test_extra_fields_ignored(self):
        """Test unmodelled fields of the application document are ignored."""
        user = UserRecord.from_raw({'id': 'u1', 'badges': ['x'], 'avatarUrl': 'http://x'})
        assert user.id == 'u1'
        assert 'badges' not in user.to_dict()

    def test_from_raw_passthrough(self):
        """Test an existing record is returned as-is."""
        user = UserRecord(id='u1')
        assert UserRecord.from_raw(user) is user

    @pytest.mark.parametrize("raw", [None, "garbage", 12, ["u1"]])
    def test_from_raw_non_mapping(self, raw):
        """Test unusable input degrades to an empty record."""
        assert UserRecord.from_raw(raw) == UserRecord()

    def test_to_dict_camel_case(self):
        """Test serialization uses the wire field names."""
        data = UserRecord(id='u1', life_score=10).to_dict()

        assert data['lifeScore'] == 10
        assert 'life_score' not in data
        assert set(data['wealth']) == {'salary', 'savings', 'investments', 'total', 'currency'}


class TestAsset:
    """Tests for Asset model."""

    def test_type_defaults_to_other(self):
        assert Asset().type == 'other'
        assert Asset(type=None).type == 'other'
        assert Asset(type='').type == 'other'

    def test_type_kept_verbatim(self):
        """Test the asset type is not normalized."""
        assert Asset(type='Home').type == 'Home'

    def test_value_coerced(self):
        assert Asset(value='$300,000').value == 300000
        assert Asset(value=-5).value == 0

    def test_verified_only_when_true(self):
        assert Asset(verified=True).verified is True
        assert Asset(verified='yes').verified is False
        assert Asset(verified=None).verified is False


# =============================================================================
# LifeScoreBreakdown Tests
# =============================================================================

class TestLifeScoreBreakdown:
    """Tests for LifeScoreBreakdown model."""

    def test_valid_breakdown(self):
        breakdown = LifeScoreBreakdown(wealth_score=100, knowledge_score=50, total_life_score=150)
        assert breakdown.total_life_score == 150

    def test_total_must_match(self):
        """Test the total invariant is enforced."""
        with pytest.raises(ValidationError, match="must equal"):
            LifeScoreBreakdown(wealth_score=100, knowledge_score=50, total_life_score=200)

    def test_wealth_bounds(self):
        with pytest.raises(ValidationError):
            LifeScoreBreakdown(wealth_score=20001, knowledge_score=0, total_life_score=20001)

    def test_knowledge_bounds(self):
        with pytest.raises(ValidationError):
            LifeScoreBreakdown(wealth_score=0, knowledge_score=-1, total_life_score=-1)

    def test_to_dict_camel_case(self):
        data = LifeScoreBreakdown().to_dict()

        assert set(data) == {'wealthScore', 'knowledgeScore', 'totalLifeScore', 'breakdown'}
        assert 'otherAssets' in data['breakdown']['wealth']


# =============================================================================
# GlobalStanding Tests
# =============================================================================

class TestGlobalStanding:
    """Tests for GlobalStanding model."""

    def test_global_rank(self):
        standing = GlobalStanding(percentile=50, people_ahead=3_000_000_000)
        assert standing.global_rank == 5_000_000_000

    def test_percentile_bounds(self):
        with pytest.raises(ValidationError):
            GlobalStanding(percentile=101)
        with pytest.raises(ValidationError):
            GlobalStanding(percentile=-1)

    def test_people_ahead_bounds(self):
        with pytest.raises(ValidationError):
            GlobalStanding(people_ahead=8_000_000_001)

    def test_surpassed_countries_limit(self):
        """Test at most 10 countries are carried."""
        country = SurpassedCountry(name='Chad', population='16.4M', flag='🇹🇩')
        with pytest.raises(ValidationError):
            GlobalStanding(surpassed_countries=[country] * 11)

    def test_to_dict_camel_case(self):
        data = GlobalStanding(global_rank_estimate="You're ahead of 0 people globally").to_dict()

        assert set(data) == {
            'percentile', 'peopleAhead', 'facts', 'wealthPercentile',
            'educationPercentile', 'surpassedCountries', 'globalRankEstimate',
        }


# =============================================================================
# CachedStanding Tests
# =============================================================================

class TestCachedStanding:
    """Tests for CachedStanding model."""

    def test_json_shape(self):
        """Test the persisted JSON layout."""
        entry = CachedStanding(
            standing=GlobalStanding(percentile=45, people_ahead=3_600_000_000),
            timestamp=1_700_000_000_000,
            score=9630.03,
        )
        data = json.loads(entry.model_dump_json(by_alias=True))

        assert data['timestamp'] == 1_700_000_000_000
        assert data['score'] == 9630.03
        assert data['standing']['peopleAhead'] == 3_600_000_000

    def test_reads_camel_case_json(self):
        """Test entries written by other clients in camelCase are readable."""
        raw = json.dumps({
            'standing': {
                'percentile': 12,
                'peopleAhead': 960000000,
                'facts': ['a'],
                'wealthPercentile': 30,
                'educationPercentile': 50,
                'surpassedCountries': [{'name': 'Chad', 'population': '16.4M', 'flag': '🇹🇩'}],
                'globalRankEstimate': "You're ahead of 960,000,000 people globally",
            },
            'timestamp': 1,
            'score': 2100,
        })
        entry = CachedStanding.model_validate_json(raw)

        assert entry.standing.people_ahead == 960000000
        assert entry.standing.surpassed_countries[0].name == 'Chad'


# =============================================================================
# ScoreLevel / LeaderboardEntry Tests
# =============================================================================

class TestScoreLevel:
    """Tests for ScoreLevel dataclass."""

    def test_frozen(self):
        level = ScoreLevel(level='Elite', color='text-blue-400', description='Top tier globally')
        with pytest.raises(dataclasses.FrozenInstanceError):
            level.level = 'Legendary'

    def test_to_dict(self):
        level = ScoreLevel(level='Elite', color='text-blue-400', description='Top tier globally')
        assert level.to_dict() == {
            'level': 'Elite',
            'color': 'text-blue-400',
            'description': 'Top tier globally',
        }


class TestLeaderboardEntry:
    """Tests for LeaderboardEntry model."""

    def test_rank_starts_at_one(self):
        with pytest.raises(ValidationError):
            LeaderboardEntry(rank=0, user_id='u1', total_life_score=0, level='Developing')

    def test_to_dict(self):
        entry = LeaderboardEntry(rank=1, user_id='u1', total_life_score=10, level='Developing')
        data = entry.to_dict()

        assert data['userId'] == 'u1'
        assert data['totalLifeScore'] == 10

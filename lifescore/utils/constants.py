"""
Constants for the LifeScore engine.

This module contains all caps, divisors, breakpoints and static reference
tables used throughout the engine. Centralizing these makes the scoring
curve easier to tune without touching the calculation code.
"""

from typing import Dict, FrozenSet, Tuple


# =============================================================================
# SCORE CAPS
# =============================================================================

MAX_WEALTH_SCORE = 20000
MAX_KNOWLEDGE_SCORE = 10000
MAX_LIFE_SCORE = MAX_WEALTH_SCORE + MAX_KNOWLEDGE_SCORE  # 30,000


# =============================================================================
# WEALTH POINTS
# =============================================================================
# Each term is (divisor, cap): points = min(amount / divisor, cap)

INCOME_DIVISOR = 5
INCOME_CAP = 4000            # $20,000 salary reaches the cap

SAVINGS_DIVISOR = 200
SAVINGS_CAP = 3000           # $600,000

INVESTMENTS_DIVISOR = 333
INVESTMENTS_CAP = 3000       # ~$1M

ITEMS_DIVISOR = 100
ITEMS_CAP = 2000             # $200,000 of other assets

LUXURY_DIVISOR = 200
LUXURY_CAP = 3000            # $600,000 of luxury assets

HOME_BONUS = 2000
CAR_BONUS = 500
BUSINESS_POINTS_EACH = 2000

# Asset types (matched exactly)
HOME_ASSET_TYPES: FrozenSet[str] = frozenset({'home', 'property'})
CAR_ASSET_TYPES: FrozenSet[str] = frozenset({'car', 'vehicle'})
BUSINESS_ASSET_TYPE = 'business'
LUXURY_ASSET_TYPES: FrozenSet[str] = frozenset({'jewelry', 'art', 'collectibles', 'luxury'})

# Types that never count toward the "items" sum. Luxury types are NOT
# excluded, so luxury value counts both as items and as luxury.
NON_ITEM_ASSET_TYPES: FrozenSet[str] = (
    HOME_ASSET_TYPES | CAR_ASSET_TYPES | frozenset({BUSINESS_ASSET_TYPE})
)


# =============================================================================
# KNOWLEDGE POINTS
# =============================================================================
# Keys are normalized education keys: lower-cased, letters a-z only.

EDUCATION_POINTS: Dict[str, int] = {
    'none': 0,
    'highschool': 1000,
    'associates': 1500,
    'bachelors': 2000,
    'masters': 2500,
    'doctorate': 3000,
    'phd': 3000,
    'other': 800,
}

LANGUAGE_POINTS_EACH = 250
LANGUAGE_CAP = 2000          # 8+ languages

CERTIFICATE_POINTS_EACH = 1000
CERTIFICATE_CAP = 3000       # 3+ certificates


# =============================================================================
# GLOBAL STANDING
# =============================================================================

WORLD_POPULATION = 8_000_000_000

# Exponent < 1 bends the curve so top percentiles need scores close to max
PERCENTILE_CURVE_EXPONENT = 0.7

# (upper bound exclusive, percentile); totals at or above the last bound
# fall through to TOP_WEALTH_PERCENTILE
WEALTH_PERCENTILE_BREAKPOINTS: Tuple[Tuple[int, float], ...] = (
    (1000, 10),
    (10000, 30),
    (50000, 60),
    (100000, 80),
    (250000, 90),
    (500000, 95),
    (1000000, 98),
)
TOP_WEALTH_PERCENTILE = 99.5

EDUCATION_PERCENTILES: Dict[str, float] = {
    'none': 20,
    'highschool': 50,
    'associates': 70,
    'bachelors': 85,
    'masters': 95,
    'doctorate': 99,
    'phd': 99.5,
}
DEFAULT_EDUCATION_PERCENTILE = 20

# Facts are only added above these percentiles
WEALTH_FACT_THRESHOLD = 90
EDUCATION_FACT_THRESHOLD = 85

MAX_SURPASSED_COUNTRIES = 10

# (name, population display string, flag, XP threshold)
# Source order matters: truncation keeps the first entries of this list,
# which is NOT sorted by threshold.
COUNTRIES: Tuple[Tuple[str, str, str, int], ...] = (
    ('Chad', '16.4M', '🇹🇩', 2000),
    ('Madagascar', '28.4M', '🇲🇬', 2500),
    ('Afghanistan', '39.8M', '🇦🇫', 3000),
    ('Nepal', '29.1M', '🇳🇵', 4000),
    ('Cambodia', '16.7M', '🇰🇭', 4500),
    ('Bangladesh', '165M', '🇧🇩', 5000),
    ('Myanmar', '54.4M', '🇲🇲', 5500),
    ('Laos', '7.3M', '🇱🇦', 6000),
    ('Bolivia', '11.7M', '🇧🇴', 7000),
    ('Honduras', '10.0M', '🇭🇳', 7500),
    ('Nicaragua', '6.6M', '🇳🇮', 8000),
    ('Moldova', '2.6M', '🇲🇩', 8500),
    ('Ukraine', '44.1M', '🇺🇦', 9000),
    ('Philippines', '109M', '🇵🇭', 10000),
    ('India', '1.38B', '🇮🇳', 11000),
    ('Indonesia', '273M', '🇮🇩', 12000),
    ('Brazil', '215M', '🇧🇷', 13000),
    ('Mexico', '128M', '🇲🇽', 14000),
    ('Turkey', '84.3M', '🇹🇷', 15000),
    ('Russia', '146M', '🇷🇺', 16000),
    ('Poland', '38.0M', '🇵🇱', 17000),
    ('South Korea', '51.8M', '🇰🇷', 18000),
    ('Spain', '47.4M', '🇪🇸', 19000),
    ('Italy', '60.4M', '🇮🇹', 20000),
    ('France', '67.4M', '🇫🇷', 21000),
    ('United Kingdom', '67.9M', '🇬🇧', 22000),
    ('Germany', '83.2M', '🇩🇪', 23000),
    ('Japan', '125M', '🇯🇵', 24000),
    ('Canada', '38.2M', '🇨🇦', 25000),
    ('Australia', '25.7M', '🇦🇺', 26000),
    ('Bhutan', '772K', '🇧🇹', 6500),
    ('Fiji', '896K', '🇫🇯', 7200),
    ('Iceland', '368K', '🇮🇸', 27000),
    ('Luxembourg', '634K', '🇱🇺', 28000),
)


# =============================================================================
# SCORE BANDS
# =============================================================================
# Shared by the narrative facts and the score level classifier.
# (upper bound exclusive, level, color token, description); the final band
# has no upper bound.

SCORE_BANDS: Tuple[Tuple[float, str, str, str], ...] = (
    (3000, 'Developing', 'text-red-400', 'Building your foundation'),
    (6000, 'Emerging', 'text-orange-400', 'Making progress'),
    (10000, 'Established', 'text-yellow-400', 'Solid standing'),
    (15000, 'Advanced', 'text-green-400', 'Above average globally'),
    (20000, 'Elite', 'text-blue-400', 'Top tier globally'),
    (25000, 'Exceptional', 'text-purple-400', 'Global top 5%'),
    (float('inf'), 'Legendary', 'text-pink-400', 'Global top 1%'),
)

# One narrative pair per band, same order as SCORE_BANDS
BAND_FACTS: Tuple[Tuple[str, str], ...] = (
    (
        "You're building your foundation - ahead of citizens in the least developed regions",
        "Your score puts you above subsistence-level economies",
    ),
    (
        "You're ahead of average citizens in developing nations like Chad and Madagascar",
        "Your wealth and education exceed most rural populations globally",
    ),
    (
        "You surpass the average citizen in countries like Bolivia, Nepal, and Cambodia",
        "Your combined wealth and knowledge exceed 60% of the global population",
    ),
    (
        "You're ahead of most people in major countries like India, Philippines, and Indonesia",
        "Your lifestyle exceeds the average in emerging economies",
    ),
    (
        "You outrank average citizens in developed nations like Brazil, Mexico, and Turkey",
        "You're in the global upper-middle class tier",
    ),
    (
        "You exceed the average in wealthy countries like South Korea, Spain, and Italy",
        "You're in the top 5% globally - ahead of most developed nation citizens",
    ),
    (
        "You're in the global elite - ahead of average citizens even in the wealthiest nations",
        "Your LifeScore puts you in the top 1% of all humans currently alive",
    ),
)


# =============================================================================
# COUNTRY RANK
# =============================================================================

COUNTRY_POPULATIONS: Dict[str, int] = {
    'United States': 331000000,
    'China': 1440000000,
    'India': 1380000000,
    'Brazil': 215000000,
    'United Kingdom': 67000000,
    'Germany': 83000000,
    'France': 68000000,
    'Canada': 38000000,
    'Australia': 26000000,
    'Singapore': 6000000,
    'Spain': 47000000,
    'Italy': 60000000,
    'Japan': 125000000,
    'South Korea': 52000000,
    'Georgia': 4000000,
}
DEFAULT_COUNTRY_POPULATION = 50000000


# =============================================================================
# STANDING CACHE
# =============================================================================

CACHE_KEY_PREFIX = "lifescore_standing_"
CACHE_DURATION_MS = 24 * 60 * 60 * 1000  # 24 hours
CACHE_SCORE_TOLERANCE = 100              # |stored - current| must be below this


# =============================================================================
# USER CSV IMPORT
# =============================================================================

CSV_COLUMN_USER_ID = "user_id"
CSV_LIST_SEPARATOR = ";"
CSV_ASSET_VALUE_SEPARATOR = ":"

CSV_OPTIONAL_COLUMNS: Tuple[str, ...] = (
    "name",
    "country",
    "city",
    "salary",
    "savings",
    "investments",
    "wealth_total",
    "currency",
    "education",
    "certificates",
    "languages",
    "assets",
)

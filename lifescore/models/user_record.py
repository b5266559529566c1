"""
UserRecord model - The user data the engine scores.

Uses Pydantic v2. The record shape is owned by the application, so every
field is coalesced to a safe default instead of being rejected: a missing,
null or malformed value never stops a score from being computed.
"""

import logging
import math
import re
import sys
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)


def coerce_amount(value: Any) -> float:
    """
    Coerce a user-supplied amount to float.

    Handles formats like:
    - 5000 / 5000.0 (numeric)
    - "5000"
    - "$5,000.00"

    None, booleans, unparseable strings, NaN and negative amounts become 0.
    Positive infinity is kept and integers too large for a float clamp to
    the largest float, so callers' caps still apply.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = re.sub(r'[$,\s]', '', value)
        if not value or value == '-':
            return 0.0

    try:
        amount = float(value)
    except OverflowError:
        return sys.float_info.max if value > 0 else 0.0
    except (TypeError, ValueError):
        return 0.0

    if math.isnan(amount) or amount < 0:
        return 0.0
    return amount


def coerce_string_list(value: Any) -> List[str]:
    """Coerce a list-ish value to a list of strings, keeping order and duplicates."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return []


class CamelModel(BaseModel):
    """Base for engine models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WealthProfile(CamelModel):
    """Self-reported finances. `total` is trusted as supplied."""

    salary: float = 0.0
    savings: float = 0.0
    investments: float = 0.0
    total: float = 0.0
    currency: str = "USD"

    @field_validator('salary', 'savings', 'investments', 'total', mode='before')
    @classmethod
    def _coerce_amount(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator('currency', mode='before')
    @classmethod
    def _coerce_currency(cls, v: Any) -> str:
        return str(v) if v else "USD"


class KnowledgeProfile(CamelModel):
    """Self-reported education, certificates and languages."""

    education: str = ""
    certificates: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    total: float = 0.0

    @field_validator('education', mode='before')
    @classmethod
    def _coerce_education(cls, v: Any) -> str:
        return str(v) if v is not None else ""

    @field_validator('certificates', 'languages', mode='before')
    @classmethod
    def _coerce_list(cls, v: Any) -> List[str]:
        return coerce_string_list(v)

    @field_validator('total', mode='before')
    @classmethod
    def _coerce_total(cls, v: Any) -> float:
        return coerce_amount(v)


class Asset(CamelModel):
    """A single owned asset. Type is matched exactly by the calculator."""

    id: str = ""
    type: str = "other"
    name: str = ""
    value: float = 0.0
    verified: bool = False

    @field_validator('id', 'name', mode='before')
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        return str(v) if v is not None else ""

    @field_validator('type', mode='before')
    @classmethod
    def _coerce_type(cls, v: Any) -> str:
        return str(v) if v else "other"

    @field_validator('value', mode='before')
    @classmethod
    def _coerce_value(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator('verified', mode='before')
    @classmethod
    def _coerce_verified(cls, v: Any) -> bool:
        return v is True


class UserRecord(CamelModel):
    """
    A user as seen by the scoring engine.

    Only the fields the engine reads are modelled; anything else in the
    application's user document is ignored.
    """

    id: str = ""
    name: str = ""
    country: str = ""
    city: str = ""
    life_score: float = 0.0
    wealth: WealthProfile = Field(default_factory=WealthProfile)
    knowledge: KnowledgeProfile = Field(default_factory=KnowledgeProfile)
    assets: List[Asset] = Field(default_factory=list)

    @field_validator('id', 'name', 'country', 'city', mode='before')
    @classmethod
    def _coerce_text(cls, v: Any) -> str:
        return str(v) if v is not None else ""

    @field_validator('life_score', mode='before')
    @classmethod
    def _coerce_life_score(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator('wealth', 'knowledge', mode='before')
    @classmethod
    def _coerce_profile(cls, v: Any) -> Any:
        if isinstance(v, (dict, BaseModel)):
            return v
        return {}

    @field_validator('assets', mode='before')
    @classmethod
    def _coerce_assets(cls, v: Any) -> List[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, Asset))]

    @classmethod
    def from_raw(cls, data: Optional[Any]) -> 'UserRecord':
        """
        Build a UserRecord from whatever the caller holds.

        Accepts an existing UserRecord, a mapping in either camelCase or
        snake_case, or None. Never raises: input that still fails
        validation degrades to an empty record.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return cls()

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Unusable user record, scoring as empty: {e}")
            return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the application's camelCase JSON shape."""
        return self.model_dump(mode='json', by_alias=True)

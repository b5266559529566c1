"""
ScoreLevel model - The named tier a score falls into.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ScoreLevel:
    """
    Display tier for a LifeScore.

    Attributes:
        level: Tier name, e.g. "Elite"
        color: Display color token, e.g. "text-blue-400"
        description: One-line description, e.g. "Top tier globally"
    """

    level: str
    color: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'level': self.level,
            'color': self.color,
            'description': self.description,
        }

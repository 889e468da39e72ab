from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Recommendation(str, Enum):
    FINISH = "FINISH"
    PAUSE = "PAUSE"
    ABANDON = "ABANDON"


@dataclass(frozen=True)
class GameInputs:
    hours_played: float
    hours_remaining: float
    enjoyment: int
    backlog_pressure: int
    completionist: bool

    @property
    def total_hours(self) -> float:
        return self.hours_played + self.hours_remaining

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hoursPlayed": self.hours_played,
            "hoursRemaining": self.hours_remaining,
            "enjoyment": self.enjoyment,
            "backlogPressure": self.backlog_pressure,
            "completionist": self.completionist,
        }


@dataclass(frozen=True)
class BreakdownItem:
    label: str
    value: int
    calculation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "calculation": self.calculation,
        }


@dataclass(frozen=True)
class DecisionResult:
    score: int
    recommendation: Recommendation
    explanation: str
    breakdown: List[BreakdownItem] = field(default_factory=list)

    @property
    def raw_score(self) -> int:
        """Sum of the breakdown terms before clamping."""
        return sum(item.value for item in self.breakdown)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "recommendation": self.recommendation.value,
            "explanation": self.explanation,
            "breakdown": [item.to_dict() for item in self.breakdown],
        }

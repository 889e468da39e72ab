from __future__ import annotations

from typing import Any, Dict, List

from worth_finishing.core.decision_types import DecisionResult, Recommendation


_ICONS: Dict[Recommendation, str] = {
    Recommendation.FINISH: "✅",
    Recommendation.PAUSE: "⏸️",
    Recommendation.ABANDON: "🚪",
}


def recommendation_icon(recommendation: Recommendation) -> str:
    return _ICONS.get(Recommendation(recommendation), "")


def signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def value_tone(value: int) -> str:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return "neutral"


def breakdown_rows(result: DecisionResult) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for item in result.breakdown:
        rows.append(
            {
                "Factor": item.label,
                "Points": signed(item.value),
                "Calculation": item.calculation,
            }
        )
    return rows

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from worth_finishing.core.config import DEFAULT_CONFIG, EngineConfig
from worth_finishing.core.decision_types import BreakdownItem, GameInputs


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Decimal(float) is exact, so 2.5 and -2.5 round to 3 and -3 regardless
    of how the platform formats floats.
    """
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    v = float(value)
    if v.is_integer() and abs(v) < 1e15:
        return str(int(v))
    return f"{v:g}"


class BasicScorer:
    """Weighted term model. Each term is rounded on its own before summing."""

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config

    def base_score(self, inputs: GameInputs) -> BreakdownItem:
        weight = self.config.weights.base_enjoyment
        return BreakdownItem(
            label="Base enjoyment score",
            value=round_half_away(inputs.enjoyment * weight),
            calculation=f"{inputs.enjoyment} × {format_number(weight)}",
        )

    def time_investment(self, inputs: GameInputs) -> Optional[BreakdownItem]:
        total = inputs.total_hours
        if total <= 0:
            return None

        if math.isinf(total):
            # both hours finite but their sum overflows; compare them on a shared scale
            scale = max(inputs.hours_played, inputs.hours_remaining)
            played = inputs.hours_played / scale
            ratio = played / (played + inputs.hours_remaining / scale)
        else:
            ratio = inputs.hours_played / total
        bonus = self.config.weights.time_investment_bonus
        return BreakdownItem(
            label="Time investment modifier",
            value=round_half_away((ratio - 0.5) * bonus * 2),
            calculation=f"{round_half_away(ratio * 100)}% invested",
        )

    def remaining_time_penalty(self, inputs: GameInputs) -> Optional[BreakdownItem]:
        rule = self.config.remaining_time
        if not (inputs.hours_remaining > rule.hours_trigger and inputs.enjoyment < rule.enjoyment_cutoff):
            return None

        hours_factor = min(inputs.hours_remaining / rule.hours_cap, 1.0)
        # cutoff - 1 is the width of the low-enjoyment band (6 - 1 = 5 with defaults)
        enjoyment_factor = (rule.enjoyment_cutoff - inputs.enjoyment) / max(1, rule.enjoyment_cutoff - 1)
        penalty = -round_half_away(hours_factor * enjoyment_factor * self.config.weights.remaining_time_penalty)
        return BreakdownItem(
            label="Long remaining time penalty",
            value=penalty,
            calculation=f"{format_number(inputs.hours_remaining)}hrs left, enjoyment {inputs.enjoyment}/10",
        )

    def backlog_penalty(self, inputs: GameInputs) -> BreakdownItem:
        pressure = (inputs.backlog_pressure - 1) / 9
        return BreakdownItem(
            label="Backlog pressure penalty",
            value=-round_half_away(pressure * self.config.weights.backlog_penalty_max),
            calculation=f"Pressure level: {inputs.backlog_pressure}/10",
        )

    def completionist_bonus(self, inputs: GameInputs) -> Optional[BreakdownItem]:
        if not inputs.completionist:
            return None
        return BreakdownItem(
            label="Completionist bonus",
            value=round_half_away(self.config.weights.completionist_bonus),
            calculation="Enabled",
        )

    def score(self, inputs: GameInputs) -> List[BreakdownItem]:
        """Return the triggered terms in their fixed display order."""
        breakdown: List[BreakdownItem] = [self.base_score(inputs)]

        for optional in (self.time_investment(inputs), self.remaining_time_penalty(inputs)):
            if optional is not None:
                breakdown.append(optional)

        breakdown.append(self.backlog_penalty(inputs))

        bonus = self.completionist_bonus(inputs)
        if bonus is not None:
            breakdown.append(bonus)

        return breakdown


def clamp_score(raw: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, int(raw)))

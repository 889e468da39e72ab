from __future__ import annotations

from typing import Callable, Dict, List

from worth_finishing.core.decision_types import GameInputs, Recommendation
from worth_finishing.engine.scorer import format_number


def _finish_sentences(inputs: GameInputs) -> List[str]:
    sentences: List[str] = []

    if inputs.enjoyment >= 8:
        sentences.append(f"You're having a great time ({inputs.enjoyment}/10 enjoyment).")
    elif inputs.enjoyment >= 6:
        sentences.append(f"You're enjoying this reasonably well ({inputs.enjoyment}/10).")

    if inputs.hours_played > inputs.hours_remaining:
        sentences.append("You're past the halfway point; the finish line is closer than the start.")

    if inputs.completionist:
        sentences.append("As a completionist, you'll appreciate the closure.")

    if inputs.hours_remaining <= 5:
        sentences.append(
            f"With only ~{format_number(inputs.hours_remaining)} hours left, you're almost there."
        )

    sentences.append("Finishing this game will likely feel rewarding.")
    return sentences


def _pause_sentences(inputs: GameInputs) -> List[str]:
    sentences: List[str] = [
        "Your situation is balanced, neither strongly for nor against finishing."
    ]

    if 5 <= inputs.enjoyment <= 7:
        sentences.append("You're having an okay time, but nothing exceptional.")

    if inputs.backlog_pressure >= 5:
        sentences.append("Your backlog is calling, but this game isn't a lost cause.")

    if inputs.hours_remaining > 15:
        sentences.append("There's still significant time investment ahead.")

    sentences.append(
        "Consider taking a break and revisiting later. You might return with fresh "
        "enthusiasm, or realize you don't miss it."
    )
    return sentences


def _abandon_sentences(inputs: GameInputs) -> List[str]:
    sentences: List[str] = []

    if inputs.enjoyment <= 4:
        sentences.append(f"With enjoyment at {inputs.enjoyment}/10, you're not having much fun.")

    if inputs.hours_remaining > 20:
        sentences.append(
            f"There are still {format_number(inputs.hours_remaining)}+ hours ahead, "
            "which is a lot of time for something you're not enjoying."
        )

    if inputs.backlog_pressure >= 7:
        sentences.append("Your backlog is substantial, and there are probably games you'd enjoy more.")

    if inputs.hours_played > 0:
        sentences.append(
            f"The {format_number(inputs.hours_played)} hours you've played aren't wasted; "
            "they taught you what you don't want."
        )

    sentences.append("Life's too short for mediocre games. Move on without guilt.")
    return sentences


_TEMPLATES: Dict[Recommendation, Callable[[GameInputs], List[str]]] = {
    Recommendation.FINISH: _finish_sentences,
    Recommendation.PAUSE: _pause_sentences,
    Recommendation.ABANDON: _abandon_sentences,
}


class BasicExplainability:
    def sentences(self, recommendation: Recommendation, inputs: GameInputs) -> List[str]:
        return _TEMPLATES[Recommendation(recommendation)](inputs)

    def explain(self, recommendation: Recommendation, inputs: GameInputs) -> str:
        return " ".join(self.sentences(recommendation, inputs))

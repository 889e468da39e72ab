from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Protocol, Union

from worth_finishing.core.config import DEFAULT_CONFIG, EngineConfig
from worth_finishing.core.decision_types import (
    BreakdownItem,
    DecisionResult,
    GameInputs,
    Recommendation,
)
from worth_finishing.engine.classifier import BasicClassifier
from worth_finishing.engine.explainability import BasicExplainability
from worth_finishing.engine.scorer import BasicScorer, clamp_score
from worth_finishing.engine.validation import validate_inputs

logger = logging.getLogger(__name__)


class ScoringComponent(Protocol):
    def score(self, inputs: GameInputs) -> List[BreakdownItem]:
        raise NotImplementedError


class ClassificationComponent(Protocol):
    def classify(self, score: int) -> Recommendation:
        raise NotImplementedError


class ExplainabilityComponent(Protocol):
    def explain(self, recommendation: Recommendation, inputs: GameInputs) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class DecisionEngine:
    config: EngineConfig = DEFAULT_CONFIG
    scorer: Optional[ScoringComponent] = None
    classifier: Optional[ClassificationComponent] = None
    explainability: ExplainabilityComponent = field(default_factory=BasicExplainability)

    def __post_init__(self) -> None:
        # frozen: components derived from config are filled in via object.__setattr__
        if self.scorer is None:
            object.__setattr__(self, "scorer", BasicScorer(self.config))
        if self.classifier is None:
            object.__setattr__(self, "classifier", BasicClassifier(self.config.thresholds))

    def evaluate(self, inputs: Union[GameInputs, Mapping[str, Any]]) -> DecisionResult:
        valid = validate_inputs(inputs)

        breakdown = list(self.scorer.score(valid))
        raw_score = sum(item.value for item in breakdown)
        score = clamp_score(raw_score)

        recommendation = self.classifier.classify(score)
        explanation = self.explainability.explain(recommendation, valid)

        logger.debug(
            "Evaluated inputs: raw=%s score=%s recommendation=%s",
            raw_score,
            score,
            recommendation.value,
        )

        return DecisionResult(
            score=score,
            recommendation=recommendation,
            explanation=explanation,
            breakdown=breakdown,
        )


_DEFAULT_ENGINE = DecisionEngine()


def evaluate(inputs: Union[GameInputs, Mapping[str, Any]]) -> DecisionResult:
    return _DEFAULT_ENGINE.evaluate(inputs)

from __future__ import annotations

from worth_finishing.core.config import DEFAULT_CONFIG, Thresholds
from worth_finishing.core.decision_types import Recommendation


class BasicClassifier:
    """
    Maps a clamped score to a recommendation with two cut points:
    score >= finish -> FINISH, score >= pause -> PAUSE, otherwise ABANDON.
    """
    def __init__(self, thresholds: Thresholds = DEFAULT_CONFIG.thresholds):
        self.finish_threshold = float(thresholds.finish)
        self.pause_threshold = float(thresholds.pause)

        if self.pause_threshold >= self.finish_threshold:
            raise ValueError("Invalid thresholds: require pause < finish")

    def classify(self, score: int) -> Recommendation:
        s = float(score)

        if s >= self.finish_threshold:
            return Recommendation.FINISH
        if s >= self.pause_threshold:
            return Recommendation.PAUSE
        return Recommendation.ABANDON

"""
scoring/level_classifier.py

Maps an overall score to a performance level using configurable
inclusive upper bounds.

    thresholds (sorted ascending):  Bajo ≤ 4 < Medio ≤ 7 < Alto ≤ 10
    classify(4)    -> Bajo
    classify(4.01) -> Medio
    classify(10.5) -> Indeterminado

classify() never validates its thresholds; edit-time validation lives in
validate_thresholds() and is applied by the settings endpoint.
"""

import logging
from typing import List, Sequence

from talentflow.core.exceptions import InvalidThresholdsException
from talentflow.models.enumerations import EvaluationLevel
from talentflow.models.evaluation import LevelThreshold

logger = logging.getLogger(__name__)

INDETERMINATE = EvaluationLevel.INDETERMINATE

DEFAULT_THRESHOLDS: List[LevelThreshold] = [
    LevelThreshold(name=EvaluationLevel.LOW, threshold=4),
    LevelThreshold(name=EvaluationLevel.MEDIUM, threshold=7),
    LevelThreshold(name=EvaluationLevel.HIGH, threshold=10),
]


class LevelClassifier:
    """Classify overall scores into EvaluationLevel buckets."""

    def classify(
        self,
        score: float,
        thresholds: Sequence[LevelThreshold],
    ) -> EvaluationLevel:
        """
        Return the name of the smallest threshold >= score.

        Thresholds are sorted ascending (stable, so equal values keep input
        order) and scanned first-match-wins. A score above every threshold
        is INDETERMINATE.
        """
        for level in sorted(thresholds, key=lambda t: t.threshold):
            if score <= level.threshold:
                return level.name
        return INDETERMINATE


def classify(score: float, thresholds: Sequence[LevelThreshold]) -> EvaluationLevel:
    """Module-level shortcut for LevelClassifier().classify()."""
    return LevelClassifier().classify(score, thresholds)


def validate_thresholds(
    thresholds: Sequence[LevelThreshold],
    score_max: float,
) -> None:
    """
    Edit-time validation for a new threshold configuration.

    Rules:
      - INDETERMINATE is reserved and cannot be configured
      - thresholds must be strictly increasing in the given order
      - the last level always reaches the top of the scale (score_max)

    Raises:
        InvalidThresholdsException describing the first violation.
    """
    if not thresholds:
        raise InvalidThresholdsException("At least one level threshold is required")

    for level in thresholds:
        if level.name == INDETERMINATE:
            raise InvalidThresholdsException(
                f'"{INDETERMINATE.value}" is reserved and cannot be configured'
            )

    for current, following in zip(thresholds, thresholds[1:]):
        if current.threshold >= following.threshold:
            raise InvalidThresholdsException(
                f'El umbral para "{current.name.value}" debe ser menor '
                f'que el de "{following.name.value}".'
            )

    if thresholds[-1].threshold != score_max:
        raise InvalidThresholdsException(
            f"The last level must reach {score_max:g}, got {thresholds[-1].threshold:g}"
        )

    logger.debug(f"Level thresholds validated: {[(t.name.value, t.threshold) for t in thresholds]}")

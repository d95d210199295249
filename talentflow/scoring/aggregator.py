# talentflow/scoring/aggregator.py
"""
Score Aggregator
----------------
Turns raw per-characteristic ratings plus a weighted criteria tree into
per-factor and overall weighted averages.

Formula:
    factor_score = Σ (weight × raw) / Σ weight          over one factor
    overall      = Σ (weight × raw) / Σ weight          over every characteristic

The overall score is NOT the mean of factor scores: factors carrying more
total weight pull it harder.

Missing ratings count as 0 and still add their weight to the denominator.
A non-positive denominator yields 0.
"""
import structlog
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from talentflow.models.criteria import Factor
from talentflow.models.evaluation import (
    CalculatedFactorScore,
    CalculatedScores,
    EvaluationScore,
)
from talentflow.scoring.utils import to_decimal, weighted_mean

logger = structlog.get_logger(__name__)

_ZERO = Decimal("0")


class ScoreAggregator:
    """Compute CalculatedScores from raw ratings and a criteria snapshot."""

    @staticmethod
    def build_lookup(scores: Iterable[EvaluationScore]) -> Dict[str, Decimal]:
        """
        Map characteristic id -> raw rating.

        When a characteristic is rated more than once the first entry wins.
        """
        lookup: Dict[str, Decimal] = {}
        for entry in scores:
            lookup.setdefault(entry.characteristic_id, to_decimal(entry.score))
        return lookup

    def aggregate(
        self,
        scores: Iterable[EvaluationScore],
        criteria: Sequence[Factor],
    ) -> CalculatedScores:
        """
        Args:
            scores: Raw ratings, any order. Unknown characteristic ids are ignored.
            criteria: Ordered factors; output factors keep this order.

        Returns:
            CalculatedScores with overall and one entry per factor.

        Examples:
            >>> a = Factor(id="A", name="A", characteristics=[
            ...     Characteristic(id="a1", name="a1", weight=1),
            ...     Characteristic(id="a2", name="a2", weight=1)])
            >>> b = Factor(id="B", name="B", characteristics=[
            ...     Characteristic(id="b1", name="b1", weight=2)])
            >>> raw = [EvaluationScore(characteristic_id="a1", score=8),
            ...        EvaluationScore(characteristic_id="a2", score=6),
            ...        EvaluationScore(characteristic_id="b1", score=10)]
            >>> ScoreAggregator().aggregate(raw, [a, b]).overall
            8.5
        """
        lookup = self.build_lookup(scores)

        all_values: List[Decimal] = []
        all_weights: List[Decimal] = []
        factor_scores: List[CalculatedFactorScore] = []

        for factor in criteria:
            values = [lookup.get(char.id, _ZERO) for char in factor.characteristics]
            weights = [to_decimal(char.weight) for char in factor.characteristics]

            factor_score = weighted_mean(values, weights, places=None)
            factor_scores.append(
                CalculatedFactorScore(
                    factor_id=factor.id,
                    factor_name=factor.name,
                    score=float(factor_score),
                )
            )

            all_values.extend(values)
            all_weights.extend(weights)

        overall = weighted_mean(all_values, all_weights, places=None)

        logger.debug(
            "scores_aggregated",
            factor_count=len(factor_scores),
            characteristic_count=len(all_values),
            rated_count=len(lookup),
            overall=float(overall),
        )

        return CalculatedScores(overall=float(overall), factors=factor_scores)


def aggregate(
    scores: Iterable[EvaluationScore],
    criteria: Sequence[Factor],
) -> CalculatedScores:
    """Module-level shortcut for ScoreAggregator().aggregate()."""
    return ScoreAggregator().aggregate(scores, criteria)

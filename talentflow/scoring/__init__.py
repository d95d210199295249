"""
scoring/ — Evaluation Scoring Engine

Modules:
    utils.py             - Decimal utilities
    aggregator.py        - Weighted per-factor / overall score aggregation
    level_classifier.py  - Threshold-based performance level classification
    history.py           - Latest-evaluation selection and grouping
    talent_matrix.py     - 9-box potential × performance grid
    promotions.py        - Per-department performance ranking
    dashboard.py         - Global dashboard KPIs
    comparison.py        - Side-by-side profile comparison
    flight_risk.py       - Flight-risk feature extraction and banding
"""

from talentflow.scoring.aggregator import ScoreAggregator, aggregate
from talentflow.scoring.level_classifier import (
    DEFAULT_THRESHOLDS,
    INDETERMINATE,
    LevelClassifier,
    classify,
    validate_thresholds,
)

__all__ = [
    "ScoreAggregator",
    "aggregate",
    "DEFAULT_THRESHOLDS",
    "INDETERMINATE",
    "LevelClassifier",
    "classify",
    "validate_thresholds",
]

"""
Evaluation history helpers shared by the analytics calculators.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from talentflow.models.enumerations import PersonType
from talentflow.models.evaluation import EvaluationResult


def filter_by_type(
    evaluations: Iterable[EvaluationResult],
    person_type: Optional[PersonType] = None,
) -> List[EvaluationResult]:
    if person_type is None:
        return list(evaluations)
    return [ev for ev in evaluations if ev.person_type == person_type]


def latest_by_person(evaluations: Iterable[EvaluationResult]) -> Dict[str, EvaluationResult]:
    """
    Most recent evaluation per person, keyed by person id.

    On identical timestamps the first one seen is kept.
    """
    latest: Dict[str, EvaluationResult] = {}
    for ev in evaluations:
        existing = latest.get(ev.person_id)
        if existing is None or ev.evaluated_at > existing.evaluated_at:
            latest[ev.person_id] = ev
    return latest


def group_by_person(evaluations: Iterable[EvaluationResult]) -> Dict[str, List[EvaluationResult]]:
    """Evaluations per person, each list sorted oldest first."""
    grouped: Dict[str, List[EvaluationResult]] = defaultdict(list)
    for ev in evaluations:
        grouped[ev.person_id].append(ev)
    return {
        person_id: sorted(evals, key=lambda e: e.evaluated_at)
        for person_id, evals in grouped.items()
    }

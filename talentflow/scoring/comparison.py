"""
scoring/comparison.py — Profile Comparison

Lines up the latest evaluations of several people (employees or applicants)
factor by factor. Factors are the union over the compared evaluations, in
first-seen order; a person whose evaluation lacks a factor scores 0 on it.
"""

import logging
from typing import Dict, List, Sequence, Union

from talentflow.models.analytics import ComparedPerson, FactorComparisonRow, ProfileComparison
from talentflow.models.evaluation import EvaluationResult
from talentflow.models.person import Applicant, Employee
from talentflow.scoring.history import latest_by_person

logger = logging.getLogger(__name__)

Person = Union[Employee, Applicant]


class ProfileComparator:
    """Side-by-side factor comparison of selected profiles."""

    def compare(
        self,
        person_ids: Sequence[str],
        people: Sequence[Person],
        evaluations: Sequence[EvaluationResult],
    ) -> ProfileComparison:
        """
        Args:
            person_ids: Selected people, in display order.
            people: Employees and applicants to resolve names from.
            evaluations: All evaluations.

        Returns:
            ProfileComparison; people without any evaluation are skipped.
        """
        people_by_id: Dict[str, Person] = {p.id: p for p in people}
        selected = set(person_ids)
        latest = latest_by_person(ev for ev in evaluations if ev.person_id in selected)

        compared: List[ComparedPerson] = []
        compared_evals: List[EvaluationResult] = []
        for person_id in person_ids:
            person = people_by_id.get(person_id)
            ev = latest.get(person_id)
            if person is None or ev is None:
                continue
            compared.append(
                ComparedPerson(
                    person_id=person_id,
                    name=person.name,
                    evaluation_id=ev.id,
                    overall=ev.calculated_scores.overall,
                    level=ev.level,
                )
            )
            compared_evals.append(ev)

        factor_names: Dict[str, str] = {}
        for ev in compared_evals:
            for factor in ev.calculated_scores.factors:
                factor_names.setdefault(factor.factor_id, factor.factor_name)

        rows = []
        for factor_id, factor_name in factor_names.items():
            scores = {}
            for ev in compared_evals:
                match = next(
                    (f for f in ev.calculated_scores.factors if f.factor_id == factor_id),
                    None,
                )
                scores[ev.person_id] = match.score if match else 0.0
            rows.append(
                FactorComparisonRow(factor_id=factor_id, factor_name=factor_name, scores=scores)
            )

        logger.info(f"Compared {len(compared)} profiles over {len(rows)} factors")
        return ProfileComparison(people=compared, factors=rows)

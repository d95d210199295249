"""
scoring/promotions.py — Promotions Ranking

Ranks employees inside each department by their average overall score.

    average_score = mean(overall) over all of the employee's evaluations
    latest_score  = overall of the most recent evaluation
    trend         = (evaluated_at, overall) oldest first

Employees without a department, or whose department is not in the known
list, are not ranked.
"""

import logging
from typing import Dict, List, Optional, Sequence

from talentflow.models.analytics import EmployeePerformance, PromotionsRanking, TrendPoint
from talentflow.models.enumerations import PersonType
from talentflow.models.evaluation import EvaluationResult
from talentflow.models.person import Employee
from talentflow.scoring.history import filter_by_type, group_by_person

logger = logging.getLogger(__name__)


class PromotionsRanker:
    """Per-department performance ranking."""

    def employee_performance(
        self,
        employee: Employee,
        evaluations: Sequence[EvaluationResult],
    ) -> EmployeePerformance:
        """Summarize one employee's history; ``evaluations`` sorted oldest first."""
        overall_scores = [ev.calculated_scores.overall for ev in evaluations]
        return EmployeePerformance(
            employee_id=employee.id,
            name=employee.name,
            role=employee.role,
            department=employee.department,
            average_score=sum(overall_scores) / len(overall_scores),
            latest_score=overall_scores[-1],
            evaluation_count=len(overall_scores),
            trend=[
                TrendPoint(evaluated_at=ev.evaluated_at, score=ev.calculated_scores.overall)
                for ev in evaluations
            ],
        )

    def rank(
        self,
        evaluations: Sequence[EvaluationResult],
        employees: Sequence[Employee],
        departments: Sequence[str],
        department: Optional[str] = None,
    ) -> PromotionsRanking:
        """
        Args:
            evaluations: All evaluations (applicant ones are ignored).
            employees: Known employees.
            departments: Department names to report, in display order.
            department: Optional single-department filter.

        Returns:
            PromotionsRanking mapping each department to its sorted ranking.
        """
        employees_by_id: Dict[str, Employee] = {e.id: e for e in employees}
        history = group_by_person(filter_by_type(evaluations, PersonType.EMPLOYEE))

        by_department: Dict[str, List[EmployeePerformance]] = {d: [] for d in departments}

        for employee_id, evals in history.items():
            employee = employees_by_id.get(employee_id)
            if employee is None or not employee.department:
                continue
            if employee.department not in by_department:
                continue
            by_department[employee.department].append(
                self.employee_performance(employee, evals)
            )

        for ranking in by_department.values():
            ranking.sort(key=lambda p: p.average_score, reverse=True)

        if department is not None:
            by_department = {d: r for d, r in by_department.items() if d == department}

        logger.info(
            f"Promotions ranking: {sum(len(r) for r in by_department.values())} employees "
            f"across {len(by_department)} departments"
        )
        return PromotionsRanking(departments=by_department)

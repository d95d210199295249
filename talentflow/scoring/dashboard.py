"""
scoring/dashboard.py — Global Dashboard KPIs

KPIs are computed over each employee's LATEST evaluation, optionally
filtered by department or by level. Department averages always use the
unfiltered latest evaluations; the monthly trend uses every (filtered)
evaluation.

Potential is averaged numerically (Bajo=1, Medio=2, Alto=3) and mapped back
to a label by rounding half up.
"""

from collections import Counter, defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

import structlog

from talentflow.models.analytics import DashboardSummary, DepartmentAverage, MonthlyTrend
from talentflow.models.enumerations import EvaluationLevel, PersonType, PotentialLevel
from talentflow.models.evaluation import EvaluationResult
from talentflow.models.person import Employee
from talentflow.scoring.history import filter_by_type, latest_by_person
from talentflow.scoring.utils import round_score

logger = structlog.get_logger(__name__)

POTENTIAL_VALUES: Dict[PotentialLevel, int] = {
    PotentialLevel.LOW: 1,
    PotentialLevel.MEDIUM: 2,
    PotentialLevel.HIGH: 3,
}

NO_POTENTIAL_LABEL = "N/A"


class DashboardCalculator:
    """Organization-wide evaluation KPIs."""

    def average_potential_label(self, evaluations: Sequence[EvaluationResult]) -> str:
        if not evaluations:
            return NO_POTENTIAL_LABEL
        mean = Decimal(sum(POTENTIAL_VALUES[ev.potential] for ev in evaluations)) / len(evaluations)
        index = int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        labels = list(POTENTIAL_VALUES)
        return labels[index - 1].value

    def department_averages(
        self,
        latest: Sequence[EvaluationResult],
        employees_by_id: Dict[str, Employee],
    ) -> List[DepartmentAverage]:
        totals: Dict[str, List[float]] = defaultdict(list)
        for ev in latest:
            employee = employees_by_id.get(ev.person_id)
            if employee is not None and employee.department:
                totals[employee.department].append(ev.calculated_scores.overall)
        return [
            DepartmentAverage(
                department=name,
                average_score=round_score(sum(scores) / len(scores)),
                evaluated_count=len(scores),
            )
            for name, scores in totals.items()
        ]

    def monthly_trend(self, evaluations: Sequence[EvaluationResult]) -> List[MonthlyTrend]:
        months: Dict[str, List[float]] = defaultdict(list)
        for ev in evaluations:
            months[ev.evaluated_at.strftime("%Y-%m")].append(ev.calculated_scores.overall)
        return [
            MonthlyTrend(
                month=month,
                average_score=round_score(sum(scores) / len(scores)),
                evaluation_count=len(scores),
            )
            for month, scores in sorted(months.items())
        ]

    def summarize(
        self,
        evaluations: Sequence[EvaluationResult],
        employees: Sequence[Employee],
        department: Optional[str] = None,
        level: Optional[EvaluationLevel] = None,
    ) -> DashboardSummary:
        """
        Args:
            evaluations: All evaluations (applicant ones are ignored).
            employees: Known employees.
            department: Optional department filter (takes precedence over level).
            level: Optional level filter applied to latest evaluations.
        """
        employees_by_id = {e.id: e for e in employees}
        employee_evals = filter_by_type(evaluations, PersonType.EMPLOYEE)
        latest = list(latest_by_person(employee_evals).values())

        filtered_latest = latest
        filtered_all = employee_evals
        if department is not None:
            ids = {e.id for e in employees if e.department == department}
            filtered_latest = [ev for ev in latest if ev.person_id in ids]
            filtered_all = [ev for ev in employee_evals if ev.person_id in ids]
        elif level is not None:
            filtered_latest = [ev for ev in latest if ev.level == level]
            ids = {ev.person_id for ev in filtered_latest}
            filtered_all = [ev for ev in employee_evals if ev.person_id in ids]

        count = len(filtered_latest)
        average = (
            sum(ev.calculated_scores.overall for ev in filtered_latest) / count if count else 0.0
        )
        distribution = Counter(ev.level.value for ev in filtered_latest)

        summary = DashboardSummary(
            evaluated_count=count,
            average_score=average,
            average_potential=self.average_potential_label(filtered_latest),
            level_distribution=dict(distribution),
            department_averages=self.department_averages(latest, employees_by_id),
            monthly_trend=self.monthly_trend(filtered_all),
        )

        logger.info(
            "dashboard_summarized",
            department=department,
            level=level.value if level else None,
            evaluated_count=count,
            average_score=average,
        )
        return summary

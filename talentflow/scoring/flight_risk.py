"""
scoring/flight_risk.py — Flight Risk

Extracts retention-risk features for employees with at least two
evaluations and bands an externally produced risk score.

Features:
    tenure_months       = floor(days since hire / 30.44), 0 without hire date
    absences / lates    = attendance records in the last ``window_days``
    recent_scores       = last 3 overall scores, most recent first
    evaluation_trend    = ascendente / descendente / estable (two most recent)

Banding of the 0-100 risk score:
    > 70 → Alto,  > 40 → Medio,  otherwise Bajo

The risk score itself comes from an injected RiskScorer (an opaque external
model). A returned score of -1 means the scorer failed; the employee is
dropped from the results.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, List, Optional, Sequence

import structlog

from talentflow.models.activity import AttendanceRecord
from talentflow.models.analytics import FlightRiskFactors, FlightRiskResult
from talentflow.models.enumerations import (
    AttendanceStatus,
    EvaluationTrend,
    FlightRiskLevel,
)
from talentflow.models.evaluation import EvaluationResult
from talentflow.models.person import Employee

logger = structlog.get_logger(__name__)

DAYS_PER_MONTH = 30.44
MIN_EVALUATIONS = 2
RECENT_SCORES = 3
SCORER_FAILED = -1


@dataclass
class RiskAssessment:
    """Output of a RiskScorer."""
    risk_score: float  # 0-100, or -1 on failure
    summary: str


RiskScorer = Callable[[FlightRiskFactors], RiskAssessment]


def risk_level(risk_score: float) -> FlightRiskLevel:
    if risk_score > 70:
        return FlightRiskLevel.HIGH
    if risk_score > 40:
        return FlightRiskLevel.MEDIUM
    return FlightRiskLevel.LOW


def evaluation_trend(recent_scores: Sequence[float]) -> EvaluationTrend:
    """Trend from the two most recent scores (most recent first)."""
    if len(recent_scores) < 2:
        return EvaluationTrend.STABLE
    if recent_scores[0] < recent_scores[1]:
        return EvaluationTrend.FALLING
    if recent_scores[0] > recent_scores[1]:
        return EvaluationTrend.RISING
    return EvaluationTrend.STABLE


def tenure_months(hire_date: Optional[date], today: date) -> int:
    if hire_date is None:
        return 0
    return math.floor((today - hire_date).days / DAYS_PER_MONTH)


class FlightRiskCalculator:
    """Feature extraction and banding for flight-risk analysis."""

    def __init__(self, window_days: int = 90):
        self.window_days = window_days

    def extract_factors(
        self,
        employee: Employee,
        evaluations: Sequence[EvaluationResult],
        attendance: Sequence[AttendanceRecord],
        today: date,
    ) -> Optional[FlightRiskFactors]:
        """
        Returns:
            FlightRiskFactors, or None when the employee has fewer than two
            evaluations (no trend can be established).
        """
        history = sorted(
            (ev for ev in evaluations if ev.person_id == employee.id),
            key=lambda ev: ev.evaluated_at,
            reverse=True,
        )
        if len(history) < MIN_EVALUATIONS:
            return None

        window_start = today - timedelta(days=self.window_days)
        recent_attendance = [
            r for r in attendance
            if r.employee_id == employee.id and r.date >= window_start
        ]
        recent_scores = [ev.calculated_scores.overall for ev in history[:RECENT_SCORES]]

        return FlightRiskFactors(
            evaluation_trend=evaluation_trend(recent_scores),
            absences_last_window=sum(
                1 for r in recent_attendance if r.status == AttendanceStatus.ABSENT
            ),
            lates_last_window=sum(
                1 for r in recent_attendance if r.status == AttendanceStatus.LATE
            ),
            tenure_months=tenure_months(employee.hire_date, today),
            recent_scores=recent_scores,
        )

    def extract_all(
        self,
        employees: Sequence[Employee],
        evaluations: Sequence[EvaluationResult],
        attendance: Sequence[AttendanceRecord],
        today: date,
    ) -> Dict[str, FlightRiskFactors]:
        """Features for every employee with enough history, keyed by id."""
        features = {}
        for employee in employees:
            factors = self.extract_factors(employee, evaluations, attendance, today)
            if factors is not None:
                features[employee.id] = factors
        return features

    def analyze(
        self,
        employees: Sequence[Employee],
        evaluations: Sequence[EvaluationResult],
        attendance: Sequence[AttendanceRecord],
        scorer: RiskScorer,
        today: date,
    ) -> List[FlightRiskResult]:
        """
        Score every eligible employee, highest risk first.
        """
        results = []
        for employee_id, factors in self.extract_all(
            employees, evaluations, attendance, today
        ).items():
            assessment = scorer(factors)
            if assessment.risk_score == SCORER_FAILED:
                logger.warning("flight_risk_scorer_failed", employee_id=employee_id)
                continue
            results.append(
                FlightRiskResult(
                    employee_id=employee_id,
                    risk_score=assessment.risk_score,
                    risk_level=risk_level(assessment.risk_score),
                    summary=assessment.summary,
                    factors=factors,
                )
            )

        results.sort(key=lambda r: r.risk_score, reverse=True)
        logger.info("flight_risk_analyzed", employees=len(employees), scored=len(results))
        return results

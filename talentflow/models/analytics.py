"""
Response models for the read-only analytics views
(talent matrix, promotions, dashboard, comparison, flight risk).
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from talentflow.models.enumerations import (
    EvaluationLevel,
    EvaluationTrend,
    FlightRiskLevel,
    PotentialLevel,
)


# Talent matrix (9-box)

class MatrixCandidate(BaseModel):
    employee_id: str
    name: str
    role: str
    department: Optional[str] = None
    score: float


class MatrixBox(BaseModel):
    title: str
    description: str
    potential: PotentialLevel
    performance: EvaluationLevel
    candidates: List[MatrixCandidate] = Field(default_factory=list)


class TalentMatrix(BaseModel):
    department: Optional[str] = None
    total_evaluated: int
    grid: List[List[MatrixBox]]  # rows = potential (Bajo..Alto), cols = performance


# Promotions ranking

class TrendPoint(BaseModel):
    evaluated_at: datetime
    score: float


class EmployeePerformance(BaseModel):
    employee_id: str
    name: str
    role: str
    department: str
    average_score: float
    latest_score: float
    evaluation_count: int
    trend: List[TrendPoint] = Field(default_factory=list)


class PromotionsRanking(BaseModel):
    departments: Dict[str, List[EmployeePerformance]]


# Global dashboard

class DepartmentAverage(BaseModel):
    department: str
    average_score: float
    evaluated_count: int


class MonthlyTrend(BaseModel):
    month: str  # YYYY-MM
    average_score: float
    evaluation_count: int


class DashboardSummary(BaseModel):
    evaluated_count: int
    average_score: float
    average_potential: str
    level_distribution: Dict[str, int]
    department_averages: List[DepartmentAverage]
    monthly_trend: List[MonthlyTrend]


# Profile comparison

class ComparedPerson(BaseModel):
    person_id: str
    name: str
    evaluation_id: str
    overall: float
    level: EvaluationLevel


class FactorComparisonRow(BaseModel):
    factor_id: str
    factor_name: str
    scores: Dict[str, float]  # person_id -> factor score


class ProfileComparison(BaseModel):
    people: List[ComparedPerson]
    factors: List[FactorComparisonRow]


# Flight risk

class FlightRiskFactors(BaseModel):
    evaluation_trend: EvaluationTrend
    absences_last_window: int
    lates_last_window: int
    tenure_months: int
    recent_scores: List[float]


class FlightRiskResult(BaseModel):
    employee_id: str
    risk_score: float
    risk_level: FlightRiskLevel
    summary: str
    factors: FlightRiskFactors

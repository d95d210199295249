"""
Analytics Router - TalentFlow
talentflow/routers/analytics.py

Read-only views derived from stored evaluations:
  GET /api/v1/analytics/talent-matrix        — 9-box grid
  GET /api/v1/analytics/promotions           — per-department ranking
  GET /api/v1/analytics/dashboard            — global KPIs
  GET /api/v1/analytics/comparison           — side-by-side profiles
  GET /api/v1/analytics/flight-risk/factors  — retention-risk features
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from talentflow.config import settings
from talentflow.core.dependencies import (
    get_applicant_repository,
    get_attendance_repository,
    get_department_repository,
    get_employee_repository,
    get_evaluation_repository,
)
from talentflow.models.analytics import (
    DashboardSummary,
    FlightRiskFactors,
    ProfileComparison,
    PromotionsRanking,
    TalentMatrix,
)
from talentflow.models.enumerations import EvaluationLevel
from talentflow.repositories.evaluation_repository import EvaluationRepository
from talentflow.repositories.people_repository import (
    ApplicantRepository,
    DepartmentRepository,
    EmployeeRepository,
)
from talentflow.repositories.settings_repository import AttendanceRepository
from talentflow.scoring.comparison import ProfileComparator
from talentflow.scoring.dashboard import DashboardCalculator
from talentflow.scoring.flight_risk import FlightRiskCalculator
from talentflow.scoring.promotions import PromotionsRanker
from talentflow.scoring.talent_matrix import TalentMatrixCalculator

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/analytics", tags=["Analytics"])


@router.get("/talent-matrix", response_model=TalentMatrix, summary="9-box talent matrix")
async def talent_matrix(
    department: Optional[str] = Query(None),
    evaluations: EvaluationRepository = Depends(get_evaluation_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> TalentMatrix:
    return TalentMatrixCalculator().build(
        evaluations.get_all(), employees.get_all(), department=department
    )


@router.get("/promotions", response_model=PromotionsRanking, summary="Promotions ranking")
async def promotions(
    department: Optional[str] = Query(None),
    evaluations: EvaluationRepository = Depends(get_evaluation_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
    departments: DepartmentRepository = Depends(get_department_repository),
) -> PromotionsRanking:
    return PromotionsRanker().rank(
        evaluations.get_all(),
        employees.get_all(),
        departments.names(),
        department=department,
    )


@router.get("/dashboard", response_model=DashboardSummary, summary="Global dashboard KPIs")
async def dashboard(
    department: Optional[str] = Query(None),
    level: Optional[EvaluationLevel] = Query(None),
    evaluations: EvaluationRepository = Depends(get_evaluation_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> DashboardSummary:
    return DashboardCalculator().summarize(
        evaluations.get_all(), employees.get_all(), department=department, level=level
    )


@router.get("/comparison", response_model=ProfileComparison, summary="Profile comparison")
async def comparison(
    person_ids: List[str] = Query(...),
    evaluations: EvaluationRepository = Depends(get_evaluation_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
    applicants: ApplicantRepository = Depends(get_applicant_repository),
) -> ProfileComparison:
    people = [*employees.get_all(), *applicants.get_all()]
    return ProfileComparator().compare(person_ids, people, evaluations.get_all())


@router.get(
    "/flight-risk/factors",
    response_model=Dict[str, FlightRiskFactors],
    summary="Flight-risk features",
    description="Features per employee with at least two evaluations, keyed by employee id.",
)
async def flight_risk_factors(
    evaluations: EvaluationRepository = Depends(get_evaluation_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
    attendance: AttendanceRepository = Depends(get_attendance_repository),
) -> Dict[str, FlightRiskFactors]:
    calculator = FlightRiskCalculator(window_days=settings.FLIGHT_RISK_WINDOW_DAYS)
    return calculator.extract_all(
        employees.get_all(), evaluations.get_all(), attendance.get_all(), date.today()
    )

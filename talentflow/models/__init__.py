"""
Models Package - TalentFlow
talentflow/models/__init__.py

Pydantic models for stored records, requests and analytics responses.
"""

from talentflow.models.activity import ActivityLogEntry, AttendanceRecord
from talentflow.models.criteria import (
    Characteristic,
    CriteriaTemplate,
    CriteriaTemplateCreate,
    Factor,
)
from talentflow.models.evaluation import (
    CalculatedFactorScore,
    CalculatedScores,
    EvaluationCreate,
    EvaluationResult,
    EvaluationScore,
    LevelThreshold,
    LevelThresholdsUpdate,
)
from talentflow.models.person import Applicant, ApplicantCreate, Employee, EmployeeCreate

__all__ = [
    "ActivityLogEntry",
    "AttendanceRecord",
    "Characteristic",
    "CriteriaTemplate",
    "CriteriaTemplateCreate",
    "Factor",
    "CalculatedFactorScore",
    "CalculatedScores",
    "EvaluationCreate",
    "EvaluationResult",
    "EvaluationScore",
    "LevelThreshold",
    "LevelThresholdsUpdate",
    "Applicant",
    "ApplicantCreate",
    "Employee",
    "EmployeeCreate",
]

"""
Dependencies - TalentFlow
talentflow/core/dependencies.py

FastAPI dependency injection for the storage backend, repositories and
services. Every provider is cached so the whole app shares one backend.
"""

from functools import lru_cache

from talentflow.config import get_settings
from talentflow.repositories.backends import StorageBackend, create_backend
from talentflow.repositories.evaluation_repository import (
    CriteriaTemplateRepository,
    EvaluationRepository,
)
from talentflow.repositories.people_repository import (
    ApplicantRepository,
    DepartmentRepository,
    EmployeeRepository,
)
from talentflow.repositories.settings_repository import (
    ActivityLogRepository,
    AttendanceRepository,
    SettingsRepository,
)
from talentflow.services.evaluation_service import EvaluationService
from talentflow.services.feedback import FeedbackGenerator, StaticFeedbackGenerator


@lru_cache()
def get_backend() -> StorageBackend:
    """Get the cached storage backend selected by STORAGE_BACKEND."""
    return create_backend(get_settings())


@lru_cache()
def get_employee_repository() -> EmployeeRepository:
    """Get cached EmployeeRepository instance."""
    return EmployeeRepository(get_backend())


@lru_cache()
def get_applicant_repository() -> ApplicantRepository:
    """Get cached ApplicantRepository instance."""
    return ApplicantRepository(get_backend())


@lru_cache()
def get_department_repository() -> DepartmentRepository:
    """Get cached DepartmentRepository instance."""
    return DepartmentRepository(get_backend())


@lru_cache()
def get_criteria_template_repository() -> CriteriaTemplateRepository:
    """Get cached CriteriaTemplateRepository instance."""
    return CriteriaTemplateRepository(get_backend())


@lru_cache()
def get_evaluation_repository() -> EvaluationRepository:
    """Get cached EvaluationRepository instance."""
    return EvaluationRepository(get_backend())


@lru_cache()
def get_settings_repository() -> SettingsRepository:
    """Get cached SettingsRepository instance."""
    return SettingsRepository(get_backend())


@lru_cache()
def get_activity_log_repository() -> ActivityLogRepository:
    """Get cached ActivityLogRepository instance."""
    return ActivityLogRepository(get_backend())


@lru_cache()
def get_attendance_repository() -> AttendanceRepository:
    """Get cached AttendanceRepository instance."""
    return AttendanceRepository(get_backend())


@lru_cache()
def get_feedback_generator() -> FeedbackGenerator:
    """Get the feedback generator used when completing evaluations."""
    return StaticFeedbackGenerator()


@lru_cache()
def get_evaluation_service() -> EvaluationService:
    """Get cached EvaluationService wired to the shared repositories."""
    return EvaluationService(
        employees=get_employee_repository(),
        applicants=get_applicant_repository(),
        templates=get_criteria_template_repository(),
        evaluations=get_evaluation_repository(),
        settings_repo=get_settings_repository(),
        activity_log=get_activity_log_repository(),
        feedback=get_feedback_generator(),
        settings=get_settings(),
    )

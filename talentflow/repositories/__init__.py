"""
Repositories Package - TalentFlow
talentflow/repositories/__init__.py

Data access layer over an injectable storage backend.
"""

from talentflow.repositories.backends import (
    InMemoryBackend,
    JsonFileBackend,
    RedisBackend,
    StorageBackend,
    create_backend,
)
from talentflow.repositories.base import BaseRepository
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

__all__ = [
    "InMemoryBackend",
    "JsonFileBackend",
    "RedisBackend",
    "StorageBackend",
    "create_backend",
    "BaseRepository",
    "CriteriaTemplateRepository",
    "EvaluationRepository",
    "ApplicantRepository",
    "DepartmentRepository",
    "EmployeeRepository",
    "ActivityLogRepository",
    "AttendanceRepository",
    "SettingsRepository",
]

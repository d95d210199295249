"""
Settings & Audit Repositories - TalentFlow
talentflow/repositories/settings_repository.py

Level thresholds, activity log and attendance records.
"""

from typing import List, Optional

from talentflow.models.activity import ActivityLogEntry, AttendanceRecord
from talentflow.models.evaluation import LevelThreshold
from talentflow.repositories.backends import StorageBackend
from talentflow.repositories.base import BaseRepository
from talentflow.scoring.level_classifier import DEFAULT_THRESHOLDS


class SettingsRepository:
    """Organization-wide settings stored as plain collections."""

    THRESHOLDS_COLLECTION = "levelThresholds"

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    def get_level_thresholds(self) -> List[LevelThreshold]:
        """
        Stored thresholds in stored order; the defaults when none are stored.
        """
        records = self.backend.load(self.THRESHOLDS_COLLECTION)
        if not records:
            return [t.model_copy() for t in DEFAULT_THRESHOLDS]
        return [LevelThreshold.model_validate(r) for r in records]

    def set_level_thresholds(self, thresholds: List[LevelThreshold]) -> List[LevelThreshold]:
        """Replace the thresholds. Callers validate first."""
        self.backend.save(
            self.THRESHOLDS_COLLECTION,
            [t.model_dump(mode="json", by_alias=True) for t in thresholds],
        )
        return thresholds


class ActivityLogRepository(BaseRepository[ActivityLogEntry]):
    """Append-only activity log."""

    COLLECTION = "activityLog"
    MODEL = ActivityLogEntry
    ENTITY_NAME = "Activity log entry"

    def log(
        self,
        action: str,
        details: str,
        user_id: str,
        user_name: str,
        organization_id: str,
        target_id: Optional[str] = None,
    ) -> ActivityLogEntry:
        entry = ActivityLogEntry(
            action=action,
            details=details,
            user_id=user_id,
            user_name=user_name,
            organization_id=organization_id,
            target_id=target_id,
        )
        return self.add(entry)

    def recent(self, limit: int = 100) -> List[ActivityLogEntry]:
        """Newest entries first."""
        entries = sorted(self._load(), key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]


class AttendanceRepository(BaseRepository[AttendanceRecord]):
    """Repository for AttendanceRecord entries."""

    COLLECTION = "attendanceRecords"
    MODEL = AttendanceRecord
    ENTITY_NAME = "Attendance record"

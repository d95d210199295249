"""
Activity Log Router - TalentFlow
talentflow/routers/activity.py
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from talentflow.config import settings
from talentflow.core.dependencies import get_activity_log_repository
from talentflow.models.activity import ActivityLogEntry
from talentflow.repositories.settings_repository import ActivityLogRepository

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Activity Log"])


@router.get(
    "/activity-log",
    response_model=List[ActivityLogEntry],
    summary="Activity log, newest first",
)
async def activity_log(
    limit: int = Query(100, ge=1, le=1000),
    repo: ActivityLogRepository = Depends(get_activity_log_repository),
) -> List[ActivityLogEntry]:
    return repo.recent(limit=limit)

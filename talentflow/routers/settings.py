"""
Settings Router - TalentFlow
talentflow/routers/settings.py

Organization-wide level thresholds. Reads return the stored thresholds (or
the defaults); replacements are validated before they are stored.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from talentflow.config import settings
from talentflow.core.dependencies import get_activity_log_repository, get_settings_repository
from talentflow.core.exceptions import InvalidThresholdsException
from talentflow.models.evaluation import LevelThreshold, LevelThresholdsUpdate
from talentflow.repositories.settings_repository import ActivityLogRepository, SettingsRepository
from talentflow.routers.errors import raise_invalid_thresholds
from talentflow.scoring.level_classifier import validate_thresholds

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/settings", tags=["Settings"])


@router.get(
    "/level-thresholds",
    response_model=List[LevelThreshold],
    summary="Get level thresholds",
)
async def get_level_thresholds(
    settings_repo: SettingsRepository = Depends(get_settings_repository),
) -> List[LevelThreshold]:
    return settings_repo.get_level_thresholds()


@router.put(
    "/level-thresholds",
    response_model=List[LevelThreshold],
    summary="Replace level thresholds",
    description="Thresholds must be strictly increasing and the last one must equal the top of the scale.",
)
async def update_level_thresholds(
    update: LevelThresholdsUpdate,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    settings_repo: SettingsRepository = Depends(get_settings_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> List[LevelThreshold]:
    try:
        validate_thresholds(update.thresholds, settings.SCORE_MAX)
    except InvalidThresholdsException as e:
        raise_invalid_thresholds(e.message)

    saved = settings_repo.set_level_thresholds(update.thresholds)
    activity_log.log(
        action="UPDATE_LEVEL_THRESHOLDS",
        details="Se actualizaron los umbrales de nivel de evaluación.",
        user_id=user_id,
        user_name=user_name,
        organization_id=settings.ORGANIZATION_ID,
    )
    logger.info(f"Level thresholds updated: {[(t.name.value, t.threshold) for t in saved]}")
    return saved

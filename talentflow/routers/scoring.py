"""
Scoring API Router
talentflow/routers/scoring.py

Stateless access to the scoring core:
  POST /api/v1/scoring/aggregate  — per-factor and overall weighted averages
  POST /api/v1/scoring/classify   — performance level of an overall score
  POST /api/v1/scoring/evaluate   — aggregate + classify in one call

Nothing is persisted. When thresholds are omitted the stored ones are used.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from talentflow.config import settings
from talentflow.core.dependencies import get_evaluation_service, get_settings_repository
from talentflow.models.common import CamelModel
from talentflow.models.criteria import Factor
from talentflow.models.enumerations import EvaluationLevel
from talentflow.models.evaluation import CalculatedScores, EvaluationScore, LevelThreshold
from talentflow.repositories.settings_repository import SettingsRepository
from talentflow.scoring.aggregator import aggregate
from talentflow.scoring.level_classifier import classify
from talentflow.services.evaluation_service import EvaluationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/scoring", tags=["Scoring"])


# =====================================================================
# Request / Response Models
# =====================================================================

class AggregateRequest(CamelModel):
    scores: List[EvaluationScore] = Field(default_factory=list)
    criteria: List[Factor] = Field(default_factory=list)


class ClassifyRequest(CamelModel):
    score: float
    thresholds: Optional[List[LevelThreshold]] = None


class ClassifyResponse(BaseModel):
    score: float
    level: EvaluationLevel


class EvaluateRequest(AggregateRequest):
    thresholds: Optional[List[LevelThreshold]] = None


class EvaluateResponse(CamelModel):
    calculated_scores: CalculatedScores
    level: EvaluationLevel


# =====================================================================
# Routes
# =====================================================================

@router.post(
    "/aggregate",
    response_model=CalculatedScores,
    summary="Aggregate raw ratings over a criteria tree",
)
async def aggregate_scores(request: AggregateRequest) -> CalculatedScores:
    return aggregate(request.scores, request.criteria)


@router.post(
    "/classify",
    response_model=ClassifyResponse,
    summary="Classify an overall score into a performance level",
)
async def classify_score(
    request: ClassifyRequest,
    settings_repo: SettingsRepository = Depends(get_settings_repository),
) -> ClassifyResponse:
    thresholds = request.thresholds
    if thresholds is None:
        thresholds = settings_repo.get_level_thresholds()
    return ClassifyResponse(score=request.score, level=classify(request.score, thresholds))


@router.post(
    "/evaluate",
    response_model=EvaluateResponse,
    summary="Aggregate and classify in one call",
)
async def evaluate_scores(
    request: EvaluateRequest,
    service: EvaluationService = Depends(get_evaluation_service),
) -> EvaluateResponse:
    calculated, level = service.score(request.scores, request.criteria, request.thresholds)
    logger.info(f"Ad-hoc evaluation scored {calculated.overall:.2f} -> {level.value}")
    return EvaluateResponse(calculated_scores=calculated, level=level)

"""
Evaluations Router - TalentFlow
talentflow/routers/evaluations.py

Complete, list, read and delete evaluations. Stored evaluations are
immutable: there is no update endpoint.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.config import settings
from talentflow.core.dependencies import get_evaluation_repository, get_evaluation_service
from talentflow.core.exceptions import DuplicateEntityException, EntityNotFoundException
from talentflow.models.enumerations import PersonType
from talentflow.models.evaluation import EvaluationCreate, EvaluationResult
from talentflow.repositories.evaluation_repository import EvaluationRepository
from talentflow.routers.errors import raise_duplicate, raise_not_found, raise_validation_error
from talentflow.services.evaluation_service import EvaluationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Evaluations"])


@router.post(
    "/evaluations",
    response_model=EvaluationResult,
    status_code=status.HTTP_201_CREATED,
    summary="Complete an evaluation",
    description=(
        "Scores the ratings against the criteria snapshot (explicit or from a template), "
        "classifies the overall score with the stored thresholds and stores the result."
    ),
)
async def complete_evaluation(
    request: EvaluationCreate,
    service: EvaluationService = Depends(get_evaluation_service),
) -> EvaluationResult:
    try:
        return service.evaluate(request)
    except EntityNotFoundException as e:
        raise_not_found(e)
    except DuplicateEntityException as e:
        raise_duplicate(e.message)
    except ValueError as e:
        raise_validation_error(str(e))


@router.get(
    "/evaluations",
    response_model=List[EvaluationResult],
    summary="List evaluations",
    description="Newest first. Optional filters by person and person type.",
)
async def list_evaluations(
    person_id: Optional[str] = Query(None),
    person_type: Optional[PersonType] = Query(None),
    repo: EvaluationRepository = Depends(get_evaluation_repository),
) -> List[EvaluationResult]:
    return repo.search(person_id=person_id, person_type=person_type)


@router.get(
    "/evaluations/{evaluation_id}",
    response_model=EvaluationResult,
    summary="Get an evaluation",
)
async def get_evaluation(
    evaluation_id: str,
    repo: EvaluationRepository = Depends(get_evaluation_repository),
) -> EvaluationResult:
    try:
        return repo.get_or_raise(evaluation_id)
    except EntityNotFoundException as e:
        raise_not_found(e)


@router.delete(
    "/evaluations/{evaluation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an evaluation",
)
async def delete_evaluation(
    evaluation_id: str,
    repo: EvaluationRepository = Depends(get_evaluation_repository),
) -> None:
    try:
        repo.delete(evaluation_id)
    except EntityNotFoundException as e:
        raise_not_found(e)
    logger.info(f"Deleted evaluation {evaluation_id}")

"""
Criteria Template Router - TalentFlow
talentflow/routers/criteria.py

CRUD for reusable evaluation templates. Editing a template never changes
evaluations already stored: each evaluation keeps its own criteria snapshot.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.config import settings
from talentflow.core.dependencies import get_criteria_template_repository
from talentflow.core.exceptions import EntityNotFoundException
from talentflow.models.criteria import CriteriaTemplate, CriteriaTemplateCreate
from talentflow.repositories.evaluation_repository import CriteriaTemplateRepository
from talentflow.routers.errors import raise_not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Criteria Templates"])


@router.get(
    "/criteria-templates",
    response_model=List[CriteriaTemplate],
    summary="List criteria templates",
)
async def list_templates(
    organization_id: Optional[str] = Query(None),
    repo: CriteriaTemplateRepository = Depends(get_criteria_template_repository),
) -> List[CriteriaTemplate]:
    if organization_id:
        return repo.get_by_organization(organization_id)
    return repo.get_all()


@router.post(
    "/criteria-templates",
    response_model=CriteriaTemplate,
    status_code=status.HTTP_201_CREATED,
    summary="Create a criteria template",
)
async def create_template(
    template: CriteriaTemplateCreate,
    repo: CriteriaTemplateRepository = Depends(get_criteria_template_repository),
) -> CriteriaTemplate:
    created = repo.add(CriteriaTemplate(**template.model_dump()))
    logger.info(f"Created criteria template {created.id} ({created.name})")
    return created


@router.get(
    "/criteria-templates/{template_id}",
    response_model=CriteriaTemplate,
    summary="Get a criteria template",
)
async def get_template(
    template_id: str,
    repo: CriteriaTemplateRepository = Depends(get_criteria_template_repository),
) -> CriteriaTemplate:
    try:
        return repo.get_or_raise(template_id)
    except EntityNotFoundException as e:
        raise_not_found(e)


@router.put(
    "/criteria-templates/{template_id}",
    response_model=CriteriaTemplate,
    summary="Replace a criteria template",
)
async def replace_template(
    template_id: str,
    template: CriteriaTemplateCreate,
    repo: CriteriaTemplateRepository = Depends(get_criteria_template_repository),
) -> CriteriaTemplate:
    try:
        return repo.replace(template_id, CriteriaTemplate(id=template_id, **template.model_dump()))
    except EntityNotFoundException as e:
        raise_not_found(e)


@router.delete(
    "/criteria-templates/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a criteria template",
)
async def delete_template(
    template_id: str,
    repo: CriteriaTemplateRepository = Depends(get_criteria_template_repository),
) -> None:
    try:
        repo.delete(template_id)
    except EntityNotFoundException as e:
        raise_not_found(e)
    logger.info(f"Deleted criteria template {template_id}")

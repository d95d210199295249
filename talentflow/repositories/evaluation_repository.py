"""
Evaluation Repository - TalentFlow
talentflow/repositories/evaluation_repository.py

Stored evaluation records and the criteria templates they are taken from.
Evaluations are immutable: there is no replace for them, only add/delete.
"""

from typing import List, Optional

from talentflow.core.exceptions import ImmutableEntityException
from talentflow.models.criteria import CriteriaTemplate
from talentflow.models.enumerations import PersonType
from talentflow.models.evaluation import EvaluationResult
from talentflow.repositories.base import BaseRepository


class EvaluationRepository(BaseRepository[EvaluationResult]):
    """Repository for EvaluationResult records."""

    COLLECTION = "evaluations"
    MODEL = EvaluationResult
    ENTITY_NAME = "Evaluation"

    def search(
        self,
        person_id: Optional[str] = None,
        person_type: Optional[PersonType] = None,
        organization_id: Optional[str] = None,
    ) -> List[EvaluationResult]:
        """
        List evaluations with optional filters, newest first.
        """
        items = self.find(
            lambda ev: (person_id is None or ev.person_id == person_id)
            and (person_type is None or ev.person_type == person_type)
            and (organization_id is None or ev.organization_id == organization_id)
        )
        return sorted(items, key=lambda ev: ev.evaluated_at, reverse=True)

    def list_for_person(self, person_id: str) -> List[EvaluationResult]:
        return self.search(person_id=person_id)

    def replace(self, item_id: str, item: EvaluationResult) -> EvaluationResult:
        raise ImmutableEntityException(self.ENTITY_NAME, item_id)


class CriteriaTemplateRepository(BaseRepository[CriteriaTemplate]):
    """Repository for CriteriaTemplate records."""

    COLLECTION = "criteriaTemplates"
    MODEL = CriteriaTemplate
    ENTITY_NAME = "Criteria template"

    def get_by_organization(self, organization_id: str) -> List[CriteriaTemplate]:
        return self.find(lambda t: t.organization_id == organization_id)

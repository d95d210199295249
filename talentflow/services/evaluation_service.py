"""
Evaluation Service - TalentFlow
talentflow/services/evaluation_service.py

Orchestrates completing an evaluation:

  1. Resolve the person being evaluated (employee or applicant)
  2. Resolve the criteria snapshot (explicit, or copied from a template)
  3. Expand the form ratings to one score per characteristic
  4. Ask the feedback generator for narrative feedback
  5. Aggregate the ratings and classify the overall score
  6. Persist the EvaluationResult and log COMPLETE_EVALUATION
"""

from typing import List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from talentflow.config import Settings
from talentflow.core.exceptions import FeedbackGenerationError
from talentflow.models.criteria import Factor
from talentflow.models.enumerations import EvaluationLevel, EvaluationMode, PersonType, PotentialLevel
from talentflow.models.evaluation import (
    CalculatedScores,
    EvaluationCreate,
    EvaluationResult,
    EvaluationScore,
    LevelThreshold,
)
from talentflow.models.person import Applicant, Employee
from talentflow.repositories.evaluation_repository import (
    CriteriaTemplateRepository,
    EvaluationRepository,
)
from talentflow.repositories.people_repository import ApplicantRepository, EmployeeRepository
from talentflow.repositories.settings_repository import ActivityLogRepository, SettingsRepository
from talentflow.scoring.aggregator import ScoreAggregator
from talentflow.scoring.level_classifier import LevelClassifier
from talentflow.services.feedback import FeedbackGenerator

logger = structlog.get_logger(__name__)

Person = Union[Employee, Applicant]

COMPLETE_EVALUATION = "COMPLETE_EVALUATION"


def build_form_scores(
    criteria: Sequence[Factor],
    ratings: Mapping[str, float],
    default: float,
) -> List[EvaluationScore]:
    """
    One EvaluationScore per characteristic of ``criteria``, in criteria order.

    Characteristics without a rating get ``default``; ratings for ids that
    are not part of the criteria are dropped.
    """
    return [
        EvaluationScore(characteristic_id=char.id, score=ratings.get(char.id, default))
        for factor in criteria
        for char in factor.characteristics
    ]


class EvaluationService:
    """Completes evaluations and scores ad-hoc rating sheets."""

    def __init__(
        self,
        employees: EmployeeRepository,
        applicants: ApplicantRepository,
        templates: CriteriaTemplateRepository,
        evaluations: EvaluationRepository,
        settings_repo: SettingsRepository,
        activity_log: ActivityLogRepository,
        feedback: FeedbackGenerator,
        settings: Settings,
    ):
        self.employees = employees
        self.applicants = applicants
        self.templates = templates
        self.evaluations = evaluations
        self.settings_repo = settings_repo
        self.activity_log = activity_log
        self.feedback = feedback
        self.settings = settings
        self.aggregator = ScoreAggregator()
        self.classifier = LevelClassifier()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_person(self, person_id: str, person_type: PersonType) -> Person:
        """
        Raises:
            EntityNotFoundException: no such employee/applicant
        """
        if person_type == PersonType.EMPLOYEE:
            return self.employees.get_or_raise(person_id)
        return self.applicants.get_or_raise(person_id)

    def resolve_criteria(
        self,
        criteria: Optional[List[Factor]],
        template_id: Optional[str],
    ) -> List[Factor]:
        """Explicit criteria win over the template's."""
        if criteria is not None:
            return criteria
        return self.templates.get_or_raise(template_id).criteria

    def check_score_range(self, scores: Sequence[EvaluationScore]) -> None:
        """
        Raises:
            ValueError: a rating falls outside [SCORE_MIN, SCORE_MAX]
        """
        low, high = self.settings.SCORE_MIN, self.settings.SCORE_MAX
        for entry in scores:
            if not low <= entry.score <= high:
                raise ValueError(
                    f"Score for {entry.characteristic_id} must be between {low:g} and {high:g}"
                )

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def score(
        self,
        scores: Sequence[EvaluationScore],
        criteria: Sequence[Factor],
        thresholds: Optional[Sequence[LevelThreshold]] = None,
    ) -> Tuple[CalculatedScores, EvaluationLevel]:
        """Aggregate and classify without persisting anything."""
        if thresholds is None:
            thresholds = self.settings_repo.get_level_thresholds()
        calculated = self.aggregator.aggregate(scores, criteria)
        return calculated, self.classifier.classify(calculated.overall, thresholds)

    def _generate_feedback(
        self,
        person: Person,
        criteria: Sequence[Factor],
        scores: Sequence[EvaluationScore],
        mode: EvaluationMode,
    ) -> str:
        try:
            return self.feedback.generate(person, criteria, scores, mode)
        except FeedbackGenerationError as e:
            logger.warning("feedback_generation_failed", person_id=person.id, error=str(e))
            return self.settings.FEEDBACK_FALLBACK_MESSAGE

    def complete_evaluation(
        self,
        person_id: str,
        person_type: PersonType,
        scores: List[EvaluationScore],
        mode: EvaluationMode,
        criteria: List[Factor],
        potential: PotentialLevel,
        user_id: str,
        user_name: str,
    ) -> EvaluationResult:
        """
        Score, store and log one evaluation.

        Raises:
            EntityNotFoundException: the person does not exist
        """
        person = self.get_person(person_id, person_type)
        feedback = self._generate_feedback(person, criteria, scores, mode)
        calculated, level = self.score(scores, criteria)

        result = EvaluationResult(
            person_id=person_id,
            person_type=person_type,
            feedback=feedback,
            scores=scores,
            mode=mode,
            criteria=criteria,
            potential=potential,
            level=level,
            calculated_scores=calculated,
            organization_id=person.organization_id,
        )
        self.evaluations.add(result)

        self.activity_log.log(
            action=COMPLETE_EVALUATION,
            details=f"Se completó una evaluación para {person.name} ({person_type.value}).",
            user_id=user_id,
            user_name=user_name,
            organization_id=person.organization_id,
            target_id=result.id,
        )

        logger.info(
            "evaluation_completed",
            evaluation_id=result.id,
            person_id=person_id,
            person_type=person_type.value,
            overall=calculated.overall,
            level=level.value,
        )
        return result

    def evaluate(self, request: EvaluationCreate) -> EvaluationResult:
        """
        Complete an evaluation from an API request.

        Raises:
            EntityNotFoundException: unknown person or template
            ValueError: a rating is outside the configured scale
        """
        criteria = self.resolve_criteria(request.criteria, request.template_id)

        ratings = {}
        for entry in request.scores:
            ratings.setdefault(entry.characteristic_id, entry.score)
        scores = build_form_scores(criteria, ratings, self.settings.DEFAULT_FORM_SCORE)
        self.check_score_range(scores)

        return self.complete_evaluation(
            person_id=request.person_id,
            person_type=request.person_type,
            scores=scores,
            mode=request.mode,
            criteria=criteria,
            potential=request.potential,
            user_id=request.user_id,
            user_name=request.user_name,
        )

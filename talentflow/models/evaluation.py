from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from talentflow.models.common import CamelModel
from talentflow.models.criteria import Factor
from talentflow.models.enumerations import (
    EvaluationLevel,
    EvaluationMode,
    PersonType,
    PotentialLevel,
)


class EvaluationScore(CamelModel):
    """
    One raw rating for one characteristic (expected range 1-10).
    """

    characteristic_id: str = Field(..., description="Characteristic being rated")

    score: float = Field(
        ...,
        allow_inf_nan=False,
        description="Raw rating, not range-checked here"
    )


class CalculatedFactorScore(CamelModel):
    factor_id: str
    factor_name: str
    score: float


class CalculatedScores(CamelModel):
    """
    Derived aggregate for one evaluation. Always recomputed, never edited.
    """

    overall: float
    factors: List[CalculatedFactorScore] = Field(default_factory=list)


class LevelThreshold(CamelModel):
    """
    Inclusive upper bound of a performance level.
    """

    name: EvaluationLevel

    threshold: float


class LevelThresholdsUpdate(BaseModel):
    """
    Payload for replacing the configured thresholds.
    """

    thresholds: List[LevelThreshold] = Field(..., min_length=1)


class EvaluationCreate(CamelModel):
    """
    Request model for completing an evaluation.

    Either ``criteria`` (an explicit snapshot) or ``template_id`` must be given.
    Characteristics missing from ``scores`` are rated with the form default.
    """

    person_id: str = Field(..., min_length=1)

    person_type: PersonType

    scores: List[EvaluationScore] = Field(default_factory=list)

    mode: EvaluationMode = EvaluationMode.MEDIUM

    potential: PotentialLevel = PotentialLevel.MEDIUM

    criteria: Optional[List[Factor]] = None

    template_id: Optional[str] = None

    user_id: str = Field(..., min_length=1, description="Evaluator user id")

    user_name: str = Field(..., min_length=1, description="Evaluator display name")

    @model_validator(mode="after")
    def validate_criteria_source(self):
        """Require a criteria snapshot or a template to take it from."""
        if self.criteria is None and self.template_id is None:
            raise ValueError("Either criteria or template_id must be provided")
        return self


class EvaluationResult(CamelModel):
    """
    Stored, immutable evaluation record.
    """

    id: str = Field(default_factory=lambda: f"eval-{uuid4().hex[:12]}")

    person_id: str

    person_type: PersonType

    feedback: str = ""

    scores: List[EvaluationScore] = Field(default_factory=list)

    mode: EvaluationMode = EvaluationMode.MEDIUM

    evaluated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Completion timestamp (UTC)"
    )

    criteria: List[Factor] = Field(
        default_factory=list,
        description="Criteria snapshot used for this evaluation"
    )

    potential: PotentialLevel = PotentialLevel.MEDIUM

    level: EvaluationLevel

    calculated_scores: CalculatedScores

    organization_id: str

from typing import List
from uuid import uuid4

from pydantic import Field

from talentflow.models.common import CamelModel


class Characteristic(CamelModel):
    """
    A single scorable trait with a relative importance weight.
    """

    id: str = Field(..., min_length=1, description="Characteristic identifier")

    name: str = Field(..., description="Display name (e.g., Calidad del Código)")

    weight: float = Field(
        ...,
        allow_inf_nan=False,
        description="Relative importance, typically in [0, 1]; not enforced"
    )


class Factor(CamelModel):
    """
    Named group of characteristics. Its weight is the sum of its
    characteristics' weights.
    """

    id: str = Field(..., min_length=1, description="Factor identifier")

    name: str = Field(..., description="Display name (e.g., Conocimiento Técnico)")

    characteristics: List[Characteristic] = Field(
        default_factory=list,
        description="Ordered characteristics of this factor"
    )


class CriteriaTemplateBase(CamelModel):
    """
    Base model for a reusable evaluation template.
    """

    name: str = Field(..., min_length=1, max_length=255)

    criteria: List[Factor] = Field(default_factory=list)

    organization_id: str = Field(..., min_length=1)


class CriteriaTemplateCreate(CriteriaTemplateBase):
    """
    Model for creating a new template.
    """
    pass


class CriteriaTemplate(CriteriaTemplateBase):
    """
    Stored template.
    """

    id: str = Field(default_factory=lambda: f"template-{uuid4().hex[:12]}")

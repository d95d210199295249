from uuid import uuid4

from pydantic import Field

from talentflow.models.common import CamelModel


class Department(CamelModel):
    """
    Department of an organization (e.g., Tecnología, Ventas).
    """

    id: str = Field(default_factory=lambda: f"dept-{uuid4().hex[:12]}")

    name: str = Field(..., min_length=1, max_length=100)

    organization_id: str = Field(..., min_length=1)

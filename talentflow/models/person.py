from datetime import date
from typing import Optional
from uuid import uuid4

from pydantic import Field

from talentflow.models.common import CamelModel
from talentflow.models.enumerations import ApplicantStatus


class PersonBase(CamelModel):
    """
    Fields shared by employees and applicants.
    """

    name: str = Field(..., min_length=1, max_length=255)

    email: Optional[str] = Field(default=None, max_length=255)

    phone: Optional[str] = Field(default=None, max_length=50)

    department: Optional[str] = Field(default=None, max_length=100)

    organization_id: str = Field(..., min_length=1)


class EmployeeCreate(PersonBase):
    """
    Model for creating a new employee.
    """

    role: str = Field(..., min_length=1, description="Position inside the company")

    employee_code: Optional[str] = None

    hire_date: Optional[date] = None


class Employee(EmployeeCreate):
    id: str = Field(default_factory=lambda: f"emp-{uuid4().hex[:12]}")


class ApplicantCreate(PersonBase):
    """
    Model for creating a new applicant.
    """

    position_applied: str = Field(..., min_length=1)

    status: ApplicantStatus = ApplicantStatus.NEW

    application_date: date = Field(default_factory=date.today)


class Applicant(ApplicantCreate):
    id: str = Field(default_factory=lambda: f"appl-{uuid4().hex[:12]}")


class ApplicantStatusUpdate(CamelModel):
    status: ApplicantStatus


class HireRequest(CamelModel):
    """
    Position details for an applicant being hired.
    """

    role: str = Field(..., min_length=1)

    department: Optional[str] = Field(default=None, max_length=100)

    employee_code: Optional[str] = None

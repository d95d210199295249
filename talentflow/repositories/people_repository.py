"""
People Repositories - TalentFlow
talentflow/repositories/people_repository.py

Employees, applicants and departments.
"""

from typing import List, Optional

from talentflow.models.enumerations import ApplicantStatus
from talentflow.models.organization import Department
from talentflow.models.person import Applicant, Employee
from talentflow.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for Employee records."""

    COLLECTION = "employees"
    MODEL = Employee
    ENTITY_NAME = "Employee"

    def get_by_department(self, department: str) -> List[Employee]:
        return self.find(lambda e: e.department == department)

    def get_by_organization(self, organization_id: str) -> List[Employee]:
        return self.find(lambda e: e.organization_id == organization_id)


class ApplicantRepository(BaseRepository[Applicant]):
    """Repository for Applicant records."""

    COLLECTION = "applicants"
    MODEL = Applicant
    ENTITY_NAME = "Applicant"

    def get_by_organization(self, organization_id: str) -> List[Applicant]:
        return self.find(lambda a: a.organization_id == organization_id)

    def set_status(self, applicant_id: str, new_status: ApplicantStatus) -> Applicant:
        """
        Raises:
            EntityNotFoundException: no applicant with that id
        """
        applicant = self.get_or_raise(applicant_id)
        return self.replace(applicant_id, applicant.model_copy(update={"status": new_status}))


class DepartmentRepository(BaseRepository[Department]):
    """Repository for Department records."""

    COLLECTION = "departments"
    MODEL = Department
    ENTITY_NAME = "Department"

    def names(self, organization_id: Optional[str] = None) -> List[str]:
        """Department names in insertion order."""
        return [
            d.name for d in self._load()
            if organization_id is None or d.organization_id == organization_id
        ]

"""
People Router - TalentFlow
talentflow/routers/people.py

Employees and applicants: list, create, read, plus the recruitment
workflow (status changes and hiring) and employee edits. Every mutation
is written to the activity log.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.config import settings
from talentflow.core.dependencies import (
    get_activity_log_repository,
    get_applicant_repository,
    get_employee_repository,
)
from talentflow.core.exceptions import EntityNotFoundException
from talentflow.models.enumerations import ApplicantStatus
from talentflow.models.person import (
    Applicant,
    ApplicantCreate,
    ApplicantStatusUpdate,
    Employee,
    EmployeeCreate,
    HireRequest,
)
from talentflow.repositories.people_repository import ApplicantRepository, EmployeeRepository
from talentflow.repositories.settings_repository import ActivityLogRepository
from talentflow.routers.errors import raise_error, raise_not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["People"])


#  Employees


@router.get("/employees", response_model=List[Employee], summary="List employees")
async def list_employees(
    department: Optional[str] = Query(None),
    organization_id: Optional[str] = Query(None),
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> List[Employee]:
    employees = repo.get_by_organization(organization_id) if organization_id else repo.get_all()
    if department:
        employees = [e for e in employees if e.department == department]
    return employees


@router.post(
    "/employees",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
)
async def create_employee(
    employee: EmployeeCreate,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> Employee:
    created = repo.add(Employee(**employee.model_dump()))
    activity_log.log(
        action="CREATE_EMPLOYEE",
        details=f"Se añadió al nuevo empleado: {created.name}",
        user_id=user_id,
        user_name=user_name,
        organization_id=created.organization_id,
        target_id=created.id,
    )
    return created


@router.get("/employees/{employee_id}", response_model=Employee, summary="Get an employee")
async def get_employee(
    employee_id: str,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Employee:
    try:
        return repo.get_or_raise(employee_id)
    except EntityNotFoundException as e:
        raise_not_found(e)


@router.put("/employees/{employee_id}", response_model=Employee, summary="Update an employee")
async def update_employee(
    employee_id: str,
    employee: EmployeeCreate,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> Employee:
    try:
        updated = repo.replace(employee_id, Employee(id=employee_id, **employee.model_dump()))
    except EntityNotFoundException as e:
        raise_not_found(e)
    activity_log.log(
        action="UPDATE_EMPLOYEE",
        details=f"Se actualizaron los datos del empleado: {updated.name}",
        user_id=user_id,
        user_name=user_name,
        organization_id=updated.organization_id,
        target_id=updated.id,
    )
    return updated


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    repo: EmployeeRepository = Depends(get_employee_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> None:
    try:
        employee = repo.get_or_raise(employee_id)
        repo.delete(employee_id)
    except EntityNotFoundException as e:
        raise_not_found(e)
    # Stored evaluations keep pointing at the removed id
    activity_log.log(
        action="DELETE_EMPLOYEE",
        details=f"Se eliminó al empleado: {employee.name}",
        user_id=user_id,
        user_name=user_name,
        organization_id=employee.organization_id,
        target_id=employee_id,
    )


#  Applicants


@router.get("/applicants", response_model=List[Applicant], summary="List applicants")
async def list_applicants(
    organization_id: Optional[str] = Query(None),
    repo: ApplicantRepository = Depends(get_applicant_repository),
) -> List[Applicant]:
    if organization_id:
        return repo.get_by_organization(organization_id)
    return repo.get_all()


@router.post(
    "/applicants",
    response_model=Applicant,
    status_code=status.HTTP_201_CREATED,
    summary="Create an applicant",
)
async def create_applicant(
    applicant: ApplicantCreate,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    repo: ApplicantRepository = Depends(get_applicant_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> Applicant:
    created = repo.add(Applicant(**applicant.model_dump()))
    activity_log.log(
        action="CREATE_APPLICANT",
        details=f"Se añadió al nuevo aspirante: {created.name}",
        user_id=user_id,
        user_name=user_name,
        organization_id=created.organization_id,
        target_id=created.id,
    )
    return created


@router.get("/applicants/{applicant_id}", response_model=Applicant, summary="Get an applicant")
async def get_applicant(
    applicant_id: str,
    repo: ApplicantRepository = Depends(get_applicant_repository),
) -> Applicant:
    try:
        return repo.get_or_raise(applicant_id)
    except EntityNotFoundException as e:
        raise_not_found(e)


@router.patch(
    "/applicants/{applicant_id}/status",
    response_model=Applicant,
    summary="Change an applicant's recruitment status",
)
async def update_applicant_status(
    applicant_id: str,
    update: ApplicantStatusUpdate,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    repo: ApplicantRepository = Depends(get_applicant_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> Applicant:
    try:
        applicant = repo.set_status(applicant_id, update.status)
    except EntityNotFoundException as e:
        raise_not_found(e)
    activity_log.log(
        action="UPDATE_APPLICANT_STATUS",
        details=f"Se cambió el estado de {applicant.name} a {applicant.status.value}.",
        user_id=user_id,
        user_name=user_name,
        organization_id=applicant.organization_id,
        target_id=applicant.id,
    )
    return applicant


@router.post(
    "/applicants/{applicant_id}/hire",
    response_model=Employee,
    status_code=status.HTTP_201_CREATED,
    summary="Hire an applicant as a new employee",
)
async def hire_applicant(
    applicant_id: str,
    hire: HireRequest,
    user_id: str = Query("system"),
    user_name: str = Query("Sistema"),
    applicants: ApplicantRepository = Depends(get_applicant_repository),
    employees: EmployeeRepository = Depends(get_employee_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
) -> Employee:
    """
    Create an Employee from the applicant's contact details and mark the
    applicant as hired. The applicant record is kept.
    """
    try:
        applicant = applicants.get_or_raise(applicant_id)
    except EntityNotFoundException as e:
        raise_not_found(e)
    if applicant.status == ApplicantStatus.HIRED:
        raise_error(
            status.HTTP_409_CONFLICT,
            "APPLICANT_ALREADY_HIRED",
            f"Applicant {applicant_id} has already been hired",
        )

    employee = employees.add(
        Employee(
            name=applicant.name,
            email=applicant.email,
            phone=applicant.phone,
            department=hire.department,
            organization_id=applicant.organization_id,
            role=hire.role,
            employee_code=hire.employee_code,
            hire_date=date.today(),
        )
    )
    applicants.set_status(applicant_id, ApplicantStatus.HIRED)
    logger.info(f"Hired applicant {applicant_id} as employee {employee.id}")

    activity_log.log(
        action="HIRE_APPLICANT",
        details=f"Se contrató a {applicant.name} como {employee.role}.",
        user_id=user_id,
        user_name=user_name,
        organization_id=employee.organization_id,
        target_id=employee.id,
    )
    return employee

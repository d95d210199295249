"""
Seed Data - TalentFlow
talentflow/seed.py

Demo organization loaded into an empty store on startup:
its departments, two criteria templates, a set of employees and applicants
and the default level thresholds.
"""

import logging
from datetime import date
from typing import List

from talentflow.config import settings
from talentflow.models.criteria import Characteristic, CriteriaTemplate, Factor
from talentflow.models.enumerations import ApplicantStatus
from talentflow.models.organization import Department
from talentflow.models.person import Applicant, Employee
from talentflow.repositories.backends import StorageBackend
from talentflow.repositories.evaluation_repository import CriteriaTemplateRepository
from talentflow.repositories.people_repository import (
    ApplicantRepository,
    DepartmentRepository,
    EmployeeRepository,
)
from talentflow.repositories.settings_repository import SettingsRepository
from talentflow.scoring.level_classifier import DEFAULT_THRESHOLDS

logger = logging.getLogger(__name__)

ORGANIZATION_ID = settings.ORGANIZATION_ID

DEPARTMENTS: List[Department] = [
    Department(id="dept-1", name="Tecnología", organization_id=ORGANIZATION_ID),
    Department(id="dept-2", name="Ventas", organization_id=ORGANIZATION_ID),
    Department(id="dept-3", name="Recursos Humanos", organization_id=ORGANIZATION_ID),
    Department(id="dept-4", name="Diseño", organization_id=ORGANIZATION_ID),
    Department(id="dept-5", name="Marketing", organization_id=ORGANIZATION_ID),
    Department(id="dept-6", name="Gestión de Proyectos", organization_id=ORGANIZATION_ID),
]


def _factor(factor_id: str, name: str, *characteristics) -> Factor:
    return Factor(
        id=factor_id,
        name=name,
        characteristics=[
            Characteristic(id=cid, name=cname, weight=weight)
            for cid, cname, weight in characteristics
        ],
    )


CRITERIA_TEMPLATES: List[CriteriaTemplate] = [
    CriteriaTemplate(
        id="template-1",
        name="Evaluación Técnica (Desarrollo)",
        organization_id=ORGANIZATION_ID,
        criteria=[
            _factor(
                "factor-1", "Conocimiento Técnico",
                ("char-1-1", "Calidad del Código", 1.0),
                ("char-1-2", "Resolución de Problemas", 0.9),
                ("char-1-3", "Conocimiento de Frameworks", 0.8),
            ),
            _factor(
                "factor-2", "Habilidades Blandas",
                ("char-2-1", "Comunicación", 0.7),
                ("char-2-2", "Trabajo en Equipo", 0.8),
            ),
        ],
    ),
    CriteriaTemplate(
        id="template-2",
        name="Evaluación de Ventas",
        organization_id=ORGANIZATION_ID,
        criteria=[
            _factor(
                "factor-3", "Rendimiento de Ventas",
                ("char-3-1", "Cumplimiento de Cuotas", 1.0),
                ("char-3-2", "Generación de Leads", 0.8),
            ),
            _factor(
                "factor-4", "Habilidades Interpersonales",
                ("char-4-1", "Negociación", 0.9),
                ("char-4-2", "Relación con el Cliente", 0.9),
            ),
        ],
    ),
]

_EMPLOYEE_ROWS = [
    ("emp-1", "Ana Torres", "Desarrolladora Senior", "Tecnología", "TC001", date(2021, 3, 15)),
    ("emp-2", "Luis Gómez", "Desarrollador Backend", "Tecnología", "TC002", date(2022, 8, 1)),
    ("emp-3", "Sofía Chen", "Desarrolladora Frontend", "Tecnología", "TC003", date(2023, 1, 20)),
    ("emp-4", "David Kim", "Analista QA", "Tecnología", "TC004", date(2022, 11, 5)),
    ("emp-5", "Jorge Nuñez", "Gerente de Ventas", "Ventas", "VN001", date(2020, 5, 10)),
    ("emp-6", "Patricia Morales", "Ejecutiva de Cuentas", "Ventas", "VN002", date(2021, 9, 1)),
    ("emp-7", "Ricardo Palma", "Ejecutivo de Cuentas Jr", "Ventas", "VN003", date(2023, 6, 12)),
    ("emp-8", "Laura Méndez", "Analista de Ventas", "Ventas", "VN004", date(2022, 4, 18)),
    ("emp-9", "Mónica Solano", "Coordinadora de RRHH", "Recursos Humanos", "RH001", date(2019, 10, 1)),
    ("emp-10", "Fernando Rojas", "Reclutador", "Recursos Humanos", "RH002", date(2022, 2, 22)),
    ("emp-11", "Clara Rivas", "Diseñadora UX/UI Senior", "Diseño", "DS001", date(2021, 7, 19)),
    ("emp-12", "Mateo Castillo", "Diseñador Gráfico", "Diseño", "DS002", date(2023, 3, 1)),
]

EMPLOYEES: List[Employee] = [
    Employee(
        id=emp_id,
        name=name,
        role=role,
        department=department,
        employee_code=code,
        hire_date=hired,
        email=f"{name.lower().split()[0]}.{name.lower().split()[-1]}@example.com",
        organization_id=ORGANIZATION_ID,
    )
    for emp_id, name, role, department, code, hired in _EMPLOYEE_ROWS
]

APPLICANTS: List[Applicant] = [
    Applicant(
        id="appl-1", name="Mario Luna", position_applied="Desarrollador Frontend",
        status=ApplicantStatus.IN_PROCESS, application_date=date(2024, 5, 10),
        department="Tecnología", organization_id=ORGANIZATION_ID,
    ),
    Applicant(
        id="appl-2", name="Verónica Saenz", position_applied="Ejecutiva de Cuentas",
        status=ApplicantStatus.NEW, application_date=date(2024, 5, 22),
        department="Ventas", organization_id=ORGANIZATION_ID,
    ),
    Applicant(
        id="appl-3", name="Daniela Soto", position_applied="Diseñadora Gráfica",
        status=ApplicantStatus.OFFER, application_date=date(2024, 4, 28),
        department="Diseño", organization_id=ORGANIZATION_ID,
    ),
]


def seed_store(backend: StorageBackend) -> bool:
    """
    Load the demo data when the store holds no employees yet.

    Returns:
        True if data was written, False if the store was already populated.
    """
    employees = EmployeeRepository(backend)
    if employees.count() > 0:
        logger.info("Store already populated, skipping seed")
        return False

    DepartmentRepository(backend).add_many(DEPARTMENTS)
    CriteriaTemplateRepository(backend).add_many(CRITERIA_TEMPLATES)
    employees.add_many(EMPLOYEES)
    ApplicantRepository(backend).add_many(APPLICANTS)
    SettingsRepository(backend).set_level_thresholds(list(DEFAULT_THRESHOLDS))

    logger.info(
        f"Seeded {len(DEPARTMENTS)} departments, {len(CRITERIA_TEMPLATES)} templates, "
        f"{len(EMPLOYEES)} employees, {len(APPLICANTS)} applicants"
    )
    return True

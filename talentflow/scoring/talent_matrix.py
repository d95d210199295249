"""
scoring/talent_matrix.py — 9-Box Talent Matrix

Places each employee's latest evaluation on a potential × performance grid.

    rows    = potential   (Bajo, Medio, Alto)
    columns = performance (Bajo, Medio, Alto) = classified level

Evaluations classified INDETERMINATE, applicant evaluations and evaluations
of unknown employees are left off the grid.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from talentflow.models.analytics import MatrixBox, MatrixCandidate, TalentMatrix
from talentflow.models.enumerations import EvaluationLevel, PersonType, PotentialLevel
from talentflow.models.evaluation import EvaluationResult
from talentflow.models.person import Employee
from talentflow.scoring.history import filter_by_type, latest_by_person

logger = structlog.get_logger(__name__)

POTENTIAL_ROWS: List[PotentialLevel] = [
    PotentialLevel.LOW,
    PotentialLevel.MEDIUM,
    PotentialLevel.HIGH,
]

PERFORMANCE_COLUMNS: List[EvaluationLevel] = [
    EvaluationLevel.LOW,
    EvaluationLevel.MEDIUM,
    EvaluationLevel.HIGH,
]

# (title, description) per [potential][performance]
BOX_DEFINITIONS: List[List[Tuple[str, str]]] = [
    # Potential: Bajo
    [
        ("Riesgo", "Bajo desempeño y bajo potencial."),
        ("Profesional Cumplidor", "Desempeño adecuado pero bajo potencial de crecimiento."),
        ("Enigma / Dilema", "Alto desempeño pero bajo potencial para roles futuros."),
    ],
    # Potential: Medio
    [
        ("Inconsistente", "Potencial a desarrollar, pero bajo desempeño actual."),
        ("Profesional Sólido", "Pilar del equipo con desempeño y potencial competentes."),
        ("Alto Potencial (a confirmar)", "Alto desempeño actual con potencial para crecer más."),
    ],
    # Potential: Alto
    [
        ("Joya a Pulir", "Muestra gran potencial pero su desempeño actual necesita mejorar."),
        ("Potencial Clave", "Buen desempeño y alto potencial, listos para el siguiente nivel."),
        ("Futura Estrella", "Máximo desempeño y potencial. Líderes del futuro."),
    ],
]


class TalentMatrixCalculator:
    """Build the 9-box grid from stored evaluations."""

    def _empty_grid(self) -> List[List[MatrixBox]]:
        return [
            [
                MatrixBox(
                    title=BOX_DEFINITIONS[row][col][0],
                    description=BOX_DEFINITIONS[row][col][1],
                    potential=potential,
                    performance=performance,
                )
                for col, performance in enumerate(PERFORMANCE_COLUMNS)
            ]
            for row, potential in enumerate(POTENTIAL_ROWS)
        ]

    def build(
        self,
        evaluations: Sequence[EvaluationResult],
        employees: Sequence[Employee],
        department: Optional[str] = None,
    ) -> TalentMatrix:
        """
        Args:
            evaluations: All evaluations (employees and applicants).
            employees: Known employees.
            department: Optional department filter.

        Returns:
            TalentMatrix with a 3×3 grid and the number of evaluated employees.
        """
        employees_by_id: Dict[str, Employee] = {e.id: e for e in employees}

        scoped = filter_by_type(evaluations, PersonType.EMPLOYEE)
        if department is not None:
            department_ids = {e.id for e in employees if e.department == department}
            scoped = [ev for ev in scoped if ev.person_id in department_ids]

        latest = latest_by_person(scoped)
        grid = self._empty_grid()

        for ev in latest.values():
            employee = employees_by_id.get(ev.person_id)
            if employee is None or ev.level not in PERFORMANCE_COLUMNS:
                continue
            row = POTENTIAL_ROWS.index(ev.potential)
            col = PERFORMANCE_COLUMNS.index(ev.level)
            grid[row][col].candidates.append(
                MatrixCandidate(
                    employee_id=employee.id,
                    name=employee.name,
                    role=employee.role,
                    department=employee.department,
                    score=ev.calculated_scores.overall,
                )
            )

        logger.info(
            "talent_matrix_built",
            department=department,
            total_evaluated=len(latest),
        )

        return TalentMatrix(
            department=department,
            total_evaluated=len(latest),
            grid=grid,
        )

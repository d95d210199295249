from enum import Enum

class EvaluationLevel(str, Enum):
    LOW = "Bajo"
    MEDIUM = "Medio"
    HIGH = "Alto"
    INDETERMINATE = "Indeterminado"  # score above every configured threshold

class PotentialLevel(str, Enum):
    LOW = "Bajo"
    MEDIUM = "Medio"
    HIGH = "Alto"

class EvaluationMode(str, Enum):
    LOW = "Bajo"
    MEDIUM = "Medio"
    RIGOROUS = "Riguroso"

class PersonType(str, Enum):
    EMPLOYEE = "employee"
    APPLICANT = "applicant"

class ApplicantStatus(str, Enum):
    NEW = "Nuevo"
    IN_PROCESS = "En Proceso"
    OFFER = "Oferta"
    HIRED = "Contratado"
    REJECTED = "Rechazado"

class AttendanceStatus(str, Enum):
    PRESENT = "Presente"
    ABSENT = "Ausente"
    SICK_LEAVE = "Reposo"
    SCHEDULED_BREAK = "Descanso Programado"
    OFF_SCHEDULE = "Fuera de Horario"
    LATE = "Atrasado"

class FlightRiskLevel(str, Enum):
    LOW = "Bajo"
    MEDIUM = "Medio"
    HIGH = "Alto"

class EvaluationTrend(str, Enum):
    RISING = "ascendente"
    FALLING = "descendente"
    STABLE = "estable"

import datetime as dt
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import Field

from talentflow.models.common import CamelModel
from talentflow.models.enumerations import AttendanceStatus


class ActivityLogEntry(CamelModel):
    """
    Audit trail entry (e.g. COMPLETE_EVALUATION, UPDATE_LEVEL_THRESHOLDS).
    """

    id: str = Field(default_factory=lambda: f"log-{uuid4().hex[:12]}")

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    user_id: str

    user_name: str

    action: str = Field(..., description="Machine-readable action code")

    details: str = Field(..., description="Human-readable description")

    target_id: Optional[str] = None

    organization_id: str


class AttendanceRecord(CamelModel):
    """
    Daily attendance record. Only read by flight-risk feature extraction.
    """

    id: str = Field(default_factory=lambda: f"att-{uuid4().hex[:12]}")

    employee_id: str

    date: dt.date

    status: AttendanceStatus

    organization_id: str

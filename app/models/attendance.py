from typing import Optional
from decimal import Decimal
from datetime import datetime, date
import enum
from pydantic import Field
from app.models.base import CamelModel


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EARLY_LEAVE = "early_leave"


class AttendanceRecord(CamelModel):
    id: int
    employee_id: int
    work_date: date = Field(..., alias="date")
    status: AttendanceStatus
    scheduled_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    notes: Optional[str] = None
    created_at: datetime

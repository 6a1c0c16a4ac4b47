from typing import Optional
from decimal import Decimal
from datetime import datetime
import enum
from app.models.base import CamelModel


class TimeEntryStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PENDING = "pending"


class TimeEntry(CamelModel):
    id: int
    employee_id: int
    clock_in: datetime
    clock_out: Optional[datetime] = None
    break_duration: int = 0  # minutes
    total_hours: Optional[Decimal] = None  # set on clock-out only
    status: TimeEntryStatus = TimeEntryStatus.ACTIVE
    notes: Optional[str] = None
    created_at: datetime

from typing import Optional
from datetime import datetime, date
import enum
from pydantic import Field
from app.models.base import CamelModel


class RecurringPattern(str, enum.Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class Schedule(CamelModel):
    id: int
    employee_id: int
    work_date: date = Field(..., alias="date")
    start_time: str
    end_time: str
    is_recurring: bool = False
    recurring_pattern: Optional[RecurringPattern] = None
    notes: Optional[str] = None
    created_at: datetime

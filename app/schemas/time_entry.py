from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from app.models.base import CamelModel
from app.models.time_entry import TimeEntryStatus
from app.schemas.common import reject_null, to_local_naive


class TimeEntryBase(CamelModel):
    employee_id: int = Field(..., gt=0)
    clock_in: datetime = Field(default_factory=datetime.now)
    clock_out: Optional[datetime] = None
    break_duration: int = Field(0, ge=0)
    status: TimeEntryStatus = TimeEntryStatus.ACTIVE
    notes: Optional[str] = None

    @field_validator("clock_in", mode="before")
    @classmethod
    def default_clock_in(cls, v):
        return datetime.now() if v is None else v

    @field_validator("break_duration", mode="before")
    @classmethod
    def default_break_duration(cls, v):
        return 0 if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v):
        return TimeEntryStatus.ACTIVE if v is None else v

    @field_validator("clock_in", "clock_out")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)


class TimeEntryCreate(TimeEntryBase):
    """Insert payload; totalHours is derived on clock-out and never accepted."""
    pass


class TimeEntryUpdate(CamelModel):
    employee_id: Optional[int] = Field(None, gt=0)
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    break_duration: Optional[int] = Field(None, ge=0)
    status: Optional[TimeEntryStatus] = None
    notes: Optional[str] = None

    @field_validator("employee_id", "clock_in", "break_duration", "status", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)

    @field_validator("clock_in", "clock_out")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)


class ClockOutRequest(CamelModel):
    clock_out: Optional[datetime] = None

    @field_validator("clock_out")
    @classmethod
    def localize(cls, v):
        return to_local_naive(v)

from pydantic import Field, field_validator
from typing import Optional
from decimal import Decimal
from datetime import date
from app.models.base import CamelModel
from app.models.attendance import AttendanceStatus
from app.schemas.common import parse_calendar_date, reject_null


class AttendanceBase(CamelModel):
    employee_id: int = Field(..., gt=0)
    work_date: date = Field(..., alias="date")
    status: AttendanceStatus
    scheduled_hours: Optional[Decimal] = Field(None, ge=0, max_digits=5, decimal_places=2)
    actual_hours: Optional[Decimal] = Field(None, ge=0, max_digits=5, decimal_places=2)
    notes: Optional[str] = None

    @field_validator("work_date", mode="before")
    @classmethod
    def parse_work_date(cls, v):
        return parse_calendar_date(v)


class AttendanceCreate(AttendanceBase):
    pass


class AttendanceUpdate(CamelModel):
    employee_id: Optional[int] = Field(None, gt=0)
    work_date: Optional[date] = Field(None, alias="date")
    status: Optional[AttendanceStatus] = None
    scheduled_hours: Optional[Decimal] = Field(None, ge=0, max_digits=5, decimal_places=2)
    actual_hours: Optional[Decimal] = Field(None, ge=0, max_digits=5, decimal_places=2)
    notes: Optional[str] = None

    @field_validator("employee_id", "work_date", "status", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)

    @field_validator("work_date", mode="before")
    @classmethod
    def parse_work_date(cls, v):
        return parse_calendar_date(v)

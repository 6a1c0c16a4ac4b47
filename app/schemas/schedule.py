from pydantic import Field, field_validator, model_validator
from typing import Optional
from datetime import date
from app.models.base import CamelModel
from app.models.schedule import RecurringPattern
from app.schemas.common import TIME_OF_DAY_PATTERN, parse_calendar_date, reject_null


class ScheduleBase(CamelModel):
    employee_id: int = Field(..., gt=0)
    work_date: date = Field(..., alias="date")
    start_time: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    end_time: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    is_recurring: bool = False
    recurring_pattern: Optional[RecurringPattern] = None
    notes: Optional[str] = None

    @field_validator("work_date", mode="before")
    @classmethod
    def parse_work_date(cls, v):
        return parse_calendar_date(v)

    @field_validator("is_recurring", mode="before")
    @classmethod
    def default_is_recurring(cls, v):
        return False if v is None else v


class ScheduleCreate(ScheduleBase):

    @model_validator(mode="after")
    def drop_pattern_when_not_recurring(self):
        if not self.is_recurring:
            self.recurring_pattern = None
        return self


class ScheduleUpdate(CamelModel):
    employee_id: Optional[int] = Field(None, gt=0)
    work_date: Optional[date] = Field(None, alias="date")
    start_time: Optional[str] = Field(None, pattern=TIME_OF_DAY_PATTERN)
    end_time: Optional[str] = Field(None, pattern=TIME_OF_DAY_PATTERN)
    is_recurring: Optional[bool] = None
    recurring_pattern: Optional[RecurringPattern] = None
    notes: Optional[str] = None

    @field_validator("employee_id", "work_date", "start_time", "end_time", "is_recurring", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)

    @field_validator("work_date", mode="before")
    @classmethod
    def parse_work_date(cls, v):
        return parse_calendar_date(v)


class ScheduleExportRequest(CamelModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_bounds(cls, v):
        return parse_calendar_date(v)

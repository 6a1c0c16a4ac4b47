from datetime import datetime, date
from typing import Annotated
from pydantic import BeforeValidator
from app.models.base import CamelModel

TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


def to_local_naive(value):
    """Convert timezone-aware datetimes to naive local time."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_calendar_date(value):
    """Parse a calendar date, accepting full timestamps as well."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_local_naive(value).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return to_local_naive(datetime.fromisoformat(text.replace("Z", "+00:00"))).date()
        except ValueError:
            raise ValueError("Invalid date format")
    return value


def reject_null(value):
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class MessageResponse(CamelModel):
    message: str


# Query parameters that accept a plain date or a full ISO timestamp.
CalendarDate = Annotated[date, BeforeValidator(parse_calendar_date)]

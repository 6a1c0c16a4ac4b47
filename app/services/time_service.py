from datetime import date, datetime, time, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
import logging
from app.core.errors import BusinessRuleError
from app.core.storage import MemStorage
from app.models import TimeEntry, TimeEntryStatus

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def compute_total_hours(clock_in: datetime, clock_out: datetime, break_minutes: Optional[int]) -> Decimal:
    """
    Worked hours between clock-in and clock-out, minus the break.

    Args:
        clock_in: Start of the entry
        clock_out: End of the entry, not earlier than ``clock_in``
        break_minutes: Unpaid break in minutes (None counts as 0)

    Returns:
        Hours rounded to two places, floored at zero when the break is
        longer than the elapsed time.
    """
    if clock_out < clock_in:
        raise ValueError("Clock-out time cannot be earlier than clock-in time")

    hours_worked = (clock_out - clock_in).total_seconds() / 3600
    total = max(0.0, hours_worked - (break_minutes or 0) / 60)
    return Decimal(str(total)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def parse_time_of_day(value: str) -> time:
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


def calculate_schedule_hours(start_time: str, end_time: str) -> str:
    """Hours between two HH:MM times, one decimal. Overnight shifts wrap to the next day."""
    start = datetime.combine(date.min, parse_time_of_day(start_time))
    end = datetime.combine(date.min, parse_time_of_day(end_time))
    if end < start:
        end += timedelta(days=1)

    hours = (end - start).total_seconds() / 3600
    return f"{hours:.1f}"


def clock_out_entry(storage: MemStorage, entry_id: int, clock_out: Optional[datetime] = None) -> Optional[TimeEntry]:
    """Finalize a time entry. Returns None when the entry does not exist."""
    entry = storage.get_time_entry(entry_id)
    if entry is None:
        return None

    if entry.status != TimeEntryStatus.ACTIVE:
        raise BusinessRuleError(f"Time entry is {entry.status.value}, only active entries can be clocked out", field="status")

    clock_out = clock_out or datetime.now()
    try:
        total_hours = compute_total_hours(entry.clock_in, clock_out, entry.break_duration)
    except ValueError as e:
        raise BusinessRuleError(str(e), field="clockOut")

    updated = storage.complete_time_entry(entry_id, clock_out, total_hours)
    logger.info(f"Time entry {entry_id} clocked out for employee {entry.employee_id}: {total_hours}h")
    return updated

from app.models.employee import Employee
from app.models.time_entry import TimeEntry, TimeEntryStatus
from app.models.schedule import Schedule, RecurringPattern
from app.models.attendance import AttendanceRecord, AttendanceStatus

__all__ = [
    "Employee",
    "TimeEntry",
    "TimeEntryStatus",
    "Schedule",
    "RecurringPattern",
    "AttendanceRecord",
    "AttendanceStatus",
]

from app.schemas.common import CalendarDate, MessageResponse
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.schemas.time_entry import TimeEntryCreate, TimeEntryUpdate, ClockOutRequest
from app.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleExportRequest
from app.schemas.attendance import AttendanceCreate, AttendanceUpdate
from app.schemas.analytics import DashboardStats, ExportResult

__all__ = [
    "MessageResponse",
    "EmployeeCreate", "EmployeeUpdate",
    "TimeEntryCreate", "TimeEntryUpdate", "ClockOutRequest",
    "ScheduleCreate", "ScheduleUpdate", "ScheduleExportRequest",
    "AttendanceCreate", "AttendanceUpdate",
    "DashboardStats", "ExportResult",
]

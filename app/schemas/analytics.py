from app.models.base import CamelModel


class DashboardStats(CamelModel):
    total_employees: int
    active_employees: int
    present_today: int
    attendance_rate: int
    avg_hours: float
    overtime_hours: int


class ExportResult(CamelModel):
    message: str
    spreadsheet_url: str
    record_count: int

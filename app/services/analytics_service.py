from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from app.core.config import settings
from app.core.storage import MemStorage
from app.schemas.analytics import DashboardStats


def round_half_up(value: float, places: int = 0) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def get_dashboard_stats(
    storage: MemStorage,
    now: Optional[datetime] = None,
    overtime_threshold: Optional[float] = None,
    window_days: Optional[int] = None,
) -> DashboardStats:
    """
    Summary numbers for the dashboard, recomputed from the store on every call.

    Nothing is written back to the store.
    """
    now = now or datetime.now()
    if overtime_threshold is None:
        overtime_threshold = settings.OVERTIME_THRESHOLD_HOURS
    if window_days is None:
        window_days = settings.OVERTIME_WINDOW_DAYS

    employees = storage.get_employees()
    time_entries = storage.get_time_entries()

    total_employees = len(employees)
    active_employees = sum(1 for e in employees if e.is_active)

    today_start = datetime(now.year, now.month, now.day)
    today_end = today_start + timedelta(days=1)
    present_today = sum(1 for t in time_entries if today_start <= t.clock_in < today_end)

    completed = [t for t in time_entries if t.total_hours is not None and t.clock_out is not None]
    avg_hours = (
        sum(float(t.total_hours) for t in completed) / len(completed)
        if completed else 0
    )

    week_start = now - timedelta(days=window_days)
    overtime_hours = sum(
        max(0.0, float(t.total_hours) - overtime_threshold)
        for t in time_entries
        if t.clock_in >= week_start and t.total_hours is not None
    )

    attendance_rate = (
        int(round_half_up(present_today / total_employees * 100))
        if total_employees > 0 else 0
    )

    return DashboardStats(
        total_employees=total_employees,
        active_employees=active_employees,
        present_today=present_today,
        attendance_rate=attendance_rate,
        avg_hours=round_half_up(avg_hours, 1),
        overtime_hours=int(round_half_up(overtime_hours)),
    )

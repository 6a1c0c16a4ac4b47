import pandas as pd
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from io import BytesIO
from datetime import date, datetime
import logging
import time
from app.models import Employee, Schedule
from app.services.time_service import calculate_schedule_hours

logger = logging.getLogger(__name__)

EMPLOYEE_COLUMNS = [
    "Employee ID", "First Name", "Last Name", "Full Name", "Email", "Department",
    "Position", "Hourly Rate", "Status", "Created Date", "Created Time",
]

SCHEDULE_COLUMNS = [
    "Date", "Employee", "Department", "Start Time", "End Time", "Total Hours", "Notes", "Recurring",
]


def format_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def format_time(value: datetime) -> str:
    return value.strftime("%I:%M:%S %p").lstrip("0")


def build_employee_rows(employees: List[Employee]) -> List[dict]:
    """Spreadsheet rows for the employee directory."""
    return [
        {
            "Employee ID": e.id,
            "First Name": e.first_name,
            "Last Name": e.last_name,
            "Full Name": e.full_name,
            "Email": e.email,
            "Department": e.department,
            "Position": e.position,
            "Hourly Rate": f"${e.hourly_rate}" if e.hourly_rate is not None else "N/A",
            "Status": "Active" if e.is_active else "Inactive",
            "Created Date": format_date(e.created_at),
            "Created Time": format_time(e.created_at),
        }
        for e in employees
    ]


def build_schedule_rows(schedules: List[Schedule], employees: List[Employee]) -> List[dict]:
    """Spreadsheet rows for schedules, joined with the employee directory."""
    by_id: Dict[int, Employee] = {e.id: e for e in employees}
    rows = []
    for s in schedules:
        employee = by_id.get(s.employee_id)
        rows.append({
            "Date": format_date(s.work_date),
            "Employee": employee.full_name if employee else "Unknown",
            "Department": employee.department if employee else "N/A",
            "Start Time": s.start_time,
            "End Time": s.end_time,
            "Total Hours": calculate_schedule_hours(s.start_time, s.end_time),
            "Notes": s.notes or "",
            "Recurring": "Yes" if s.is_recurring else "No",
        })
    return rows


def spreadsheet_title(start_date: Optional[date], end_date: Optional[date], title: Optional[str] = None) -> str:
    if title:
        return title
    if start_date and end_date:
        return f"Work Schedule - {format_date(start_date)} to {format_date(end_date)}"
    return "HR Data Export"


class SpreadsheetExporter(ABC):
    """Narrow interface to the external spreadsheet service."""

    @abstractmethod
    def export(
        self,
        rows: List[dict],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        title: Optional[str] = None,
    ) -> str:
        """Publish ``rows`` and return the spreadsheet URL."""


class MockSpreadsheetExporter(SpreadsheetExporter):
    """
    Development stand-in for the spreadsheet service.

    Logs what would be exported and returns a placeholder URL. Nothing is
    sent anywhere and nothing is stored.
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def export(self, rows, start_date=None, end_date=None, title=None) -> str:
        spreadsheet_id = f"mock-spreadsheet-id-{int(time.time() * 1000)}"
        range_label = (
            f"{format_date(start_date) if start_date else ''} - {format_date(end_date) if end_date else ''}"
        )
        logger.info(
            f"Exporting '{spreadsheet_title(start_date, end_date, title)}' to spreadsheet: "
            f"range={range_label} records={len(rows)} sample={rows[:5]}"
        )
        return f"{self.base_url}/{spreadsheet_id}/edit"


class ExportService:
    """Service for exporting data to downloadable formats."""

    @staticmethod
    def _frame(data: List[dict], columns: Optional[List[str]] = None) -> pd.DataFrame:
        df = pd.DataFrame(data, columns=columns)

        # Convert datetime columns to string
        for col in df.columns:
            if pd.api.types.is_datetime64_any_dtype(df[col]):
                df[col] = df[col].dt.strftime('%Y-%m-%d %H:%M:%S')
        return df

    @staticmethod
    def export_to_csv(data: List[dict], columns: Optional[List[str]] = None) -> BytesIO:
        """
        Export data to CSV format.

        Args:
            data: List of dictionaries to export
            columns: Column order; also used as header when ``data`` is empty

        Returns:
            BytesIO object containing CSV data
        """
        df = ExportService._frame(data, columns)

        buffer = BytesIO()
        df.to_csv(buffer, index=False, encoding='utf-8')
        buffer.seek(0)

        return buffer

    @staticmethod
    def export_to_excel(data: List[dict], columns: Optional[List[str]] = None, sheet_name: str = "Data") -> BytesIO:
        """
        Export data to Excel format.

        Args:
            data: List of dictionaries to export
            columns: Column order; also used as header when ``data`` is empty
            sheet_name: Worksheet title

        Returns:
            BytesIO object containing Excel data
        """
        df = ExportService._frame(data, columns)

        buffer = BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)

        buffer.seek(0)
        return buffer


# Singleton instance
export_service = ExportService()

from datetime import date
from decimal import Decimal
from app.schemas import ScheduleCreate
from app.services.export_service import (
    EMPLOYEE_COLUMNS, MockSpreadsheetExporter, build_employee_rows, build_schedule_rows,
    export_service, spreadsheet_title,
)


def test_employee_rows(make_employee):
    alice = make_employee(first_name="Alice", hourly_rate=Decimal("75.00"))
    bob = make_employee(first_name="Bob", is_active=False)

    rows = build_employee_rows([alice, bob])

    assert list(rows[0]) == EMPLOYEE_COLUMNS
    assert rows[0]["Full Name"] == "Alice Smith"
    assert rows[0]["Hourly Rate"] == "$75.00"
    assert rows[0]["Status"] == "Active"
    assert rows[1]["Hourly Rate"] == "N/A"
    assert rows[1]["Status"] == "Inactive"


def test_schedule_rows_join_employees(storage, make_employee):
    alice = make_employee(department="Engineering")
    known = storage.create_schedule(ScheduleCreate(
        employee_id=alice.id, work_date=date(2024, 5, 15), start_time="09:00", end_time="17:00",
        is_recurring=True, recurring_pattern="weekly", notes="Regular shift",
    ))
    orphan = storage.create_schedule(ScheduleCreate(
        employee_id=99, work_date=date(2024, 5, 16), start_time="22:00", end_time="06:00",
    ))

    rows = build_schedule_rows([known, orphan], storage.get_employees())

    assert rows[0] == {
        "Date": "5/15/2024",
        "Employee": "Alice Smith",
        "Department": "Engineering",
        "Start Time": "09:00",
        "End Time": "17:00",
        "Total Hours": "8.0",
        "Notes": "Regular shift",
        "Recurring": "Yes",
    }
    assert rows[1]["Employee"] == "Unknown"
    assert rows[1]["Department"] == "N/A"
    assert rows[1]["Notes"] == ""
    assert rows[1]["Recurring"] == "No"


def test_mock_exporter_returns_placeholder_url():
    exporter = MockSpreadsheetExporter("https://sheets.example.test/d/")
    url = exporter.export([{"a": 1}], date(2024, 5, 1), date(2024, 5, 7))

    assert url.startswith("https://sheets.example.test/d/mock-spreadsheet-id-")
    assert url.endswith("/edit")


def test_spreadsheet_title():
    assert spreadsheet_title(None, None, "Employee Directory") == "Employee Directory"
    assert spreadsheet_title(date(2024, 5, 1), date(2024, 5, 7)) == "Work Schedule - 5/1/2024 to 5/7/2024"
    assert spreadsheet_title(date(2024, 5, 1), None) == "HR Data Export"


def test_csv_export_writes_header_for_empty_data():
    content = export_service.export_to_csv([], EMPLOYEE_COLUMNS).getvalue().decode("utf-8")
    assert content.splitlines()[0] == ",".join(EMPLOYEE_COLUMNS)


def test_excel_export_produces_workbook(make_employee):
    buffer = export_service.export_to_excel(build_employee_rows([make_employee()]), EMPLOYEE_COLUMNS)
    # xlsx files are zip archives
    assert buffer.getvalue()[:2] == b"PK"

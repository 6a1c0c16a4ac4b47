from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from typing import List
from datetime import datetime
from app.api.deps import get_storage, get_spreadsheet_exporter
from app.core.errors import BusinessRuleError
from app.core.storage import MemStorage
from app.models import Employee
from app.schemas import EmployeeCreate, EmployeeUpdate, MessageResponse, ExportResult
from app.services.export_service import (
    EMPLOYEE_COLUMNS, SpreadsheetExporter, build_employee_rows, export_service
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


def ensure_unique_email(storage: MemStorage, email: str, employee_id: int = None):
    existing = storage.find_employee_by_email(email)
    if existing and existing.id != employee_id:
        raise BusinessRuleError("Employee with this email already exists", field="email")


@router.get("", response_model=List[Employee])
async def list_employees(storage: MemStorage = Depends(get_storage)):
    """List employees in insertion order."""
    return storage.get_employees()


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Create a new employee."""
    ensure_unique_email(storage, employee_data.email)

    employee = storage.create_employee(employee_data)
    logger.info(f"Employee {employee.id} created ({employee.email})")
    return employee


@router.post("/export-google-sheets", response_model=ExportResult)
async def export_employees_to_spreadsheet(
    storage: MemStorage = Depends(get_storage),
    exporter: SpreadsheetExporter = Depends(get_spreadsheet_exporter)
):
    """Export the employee directory to a spreadsheet."""
    employees = storage.get_employees()
    spreadsheet_url = exporter.export(build_employee_rows(employees), title="Employee Directory")

    return ExportResult(
        message="Employee data exported successfully",
        spreadsheet_url=spreadsheet_url,
        record_count=len(employees),
    )


@router.get("/export")
async def export_employees_file(
    format: str = Query("csv", pattern="^(csv|xlsx)$"),
    storage: MemStorage = Depends(get_storage)
):
    """Download the employee directory as CSV or Excel."""
    rows = build_employee_rows(storage.get_employees())
    stamp = datetime.now().strftime('%Y%m%d')

    if format == "xlsx":
        return StreamingResponse(
            export_service.export_to_excel(rows, EMPLOYEE_COLUMNS, sheet_name="Employees"),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename=employees_{stamp}.xlsx"}
        )

    return StreamingResponse(
        export_service.export_to_csv(rows, EMPLOYEE_COLUMNS),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=employees_{stamp}.csv"}
    )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Get employee by ID."""
    employee = storage.get_employee(employee_id)

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    return employee


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update employee fields that are present in the body."""
    if not storage.get_employee(employee_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    if employee_data.email is not None:
        ensure_unique_email(storage, employee_data.email, employee_id)

    return storage.update_employee(employee_id, employee_data)


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Delete employee."""
    if not storage.delete_employee(employee_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found"
        )

    logger.info(f"Employee {employee_id} deleted")
    return MessageResponse(message="Employee deleted successfully")

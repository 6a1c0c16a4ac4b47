from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from typing import List, Optional
from datetime import datetime
from app.api.deps import get_storage, get_spreadsheet_exporter
from app.core.storage import MemStorage
from app.models import Schedule
from app.schemas import (
    CalendarDate, ScheduleCreate, ScheduleUpdate, ScheduleExportRequest, MessageResponse, ExportResult
)
from app.services.export_service import (
    SCHEDULE_COLUMNS, SpreadsheetExporter, build_schedule_rows, export_service
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])


@router.get("", response_model=List[Schedule])
async def list_schedules(
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    on_date: Optional[CalendarDate] = Query(None, alias="date"),
    storage: MemStorage = Depends(get_storage)
):
    """List schedules, by employee or by calendar day."""
    if employee_id is not None:
        return storage.get_schedules_by_employee(employee_id)
    if on_date is not None:
        return storage.get_schedules_by_date(on_date)
    return storage.get_schedules()


@router.post("", response_model=Schedule, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    data: ScheduleCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Create a new schedule."""
    schedule = storage.create_schedule(data)
    logger.info(f"Schedule {schedule.id} created for employee {schedule.employee_id} on {schedule.work_date}")
    return schedule


@router.post("/export-google-sheets", response_model=ExportResult)
async def export_schedules_to_spreadsheet(
    data: Optional[ScheduleExportRequest] = Body(None),
    storage: MemStorage = Depends(get_storage),
    exporter: SpreadsheetExporter = Depends(get_spreadsheet_exporter)
):
    """Export schedules within an inclusive date range to a spreadsheet."""
    data = data or ScheduleExportRequest()
    schedules = storage.get_schedules_by_date_range(data.start_date, data.end_date)
    rows = build_schedule_rows(schedules, storage.get_employees())

    spreadsheet_url = exporter.export(rows, data.start_date, data.end_date)

    return ExportResult(
        message="Schedule exported successfully",
        spreadsheet_url=spreadsheet_url,
        record_count=len(schedules),
    )


@router.get("/export")
async def export_schedules_file(
    format: str = Query("csv", pattern="^(csv|xlsx)$"),
    start_date: Optional[CalendarDate] = Query(None, alias="startDate"),
    end_date: Optional[CalendarDate] = Query(None, alias="endDate"),
    storage: MemStorage = Depends(get_storage)
):
    """Download schedules as CSV or Excel."""
    schedules = storage.get_schedules_by_date_range(start_date, end_date)
    rows = build_schedule_rows(schedules, storage.get_employees())
    stamp = datetime.now().strftime('%Y%m%d')

    if format == "xlsx":
        return StreamingResponse(
            export_service.export_to_excel(rows, SCHEDULE_COLUMNS, sheet_name="Schedules"),
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": f"attachment; filename=schedules_{stamp}.xlsx"}
        )

    return StreamingResponse(
        export_service.export_to_csv(rows, SCHEDULE_COLUMNS),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=schedules_{stamp}.csv"}
    )


@router.get("/{schedule_id}", response_model=Schedule)
async def get_schedule(
    schedule_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Get schedule by ID."""
    schedule = storage.get_schedule(schedule_id)

    if not schedule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found"
        )

    return schedule


@router.put("/{schedule_id}", response_model=Schedule)
async def update_schedule(
    schedule_id: int,
    data: ScheduleUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update schedule fields that are present in the body."""
    schedule = storage.update_schedule(schedule_id, data)

    if not schedule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found"
        )

    return schedule


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_schedule(
    schedule_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Delete schedule."""
    if not storage.delete_schedule(schedule_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found"
        )

    return MessageResponse(message="Schedule deleted successfully")

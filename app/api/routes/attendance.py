from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from app.api.deps import get_storage
from app.core.storage import MemStorage
from app.models import AttendanceRecord
from app.schemas import AttendanceCreate, AttendanceUpdate, CalendarDate

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.get("", response_model=List[AttendanceRecord])
async def list_attendance(
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    start_date: Optional[CalendarDate] = Query(None, alias="startDate"),
    end_date: Optional[CalendarDate] = Query(None, alias="endDate"),
    storage: MemStorage = Depends(get_storage)
):
    """List attendance records, by employee or by inclusive date range."""
    if employee_id is not None:
        return storage.get_attendance_by_employee(employee_id)
    if start_date is not None and end_date is not None:
        return storage.get_attendance_by_date_range(start_date, end_date)
    return storage.get_attendance_records()


@router.post("", response_model=AttendanceRecord, status_code=status.HTTP_201_CREATED)
async def create_attendance_record(
    data: AttendanceCreate,
    storage: MemStorage = Depends(get_storage)
):
    return storage.create_attendance_record(data)


@router.get("/{record_id}", response_model=AttendanceRecord)
async def get_attendance_record(
    record_id: int,
    storage: MemStorage = Depends(get_storage)
):
    record = storage.get_attendance_record(record_id)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Attendance record not found"
        )

    return record


@router.put("/{record_id}", response_model=AttendanceRecord)
async def update_attendance_record(
    record_id: int,
    data: AttendanceUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update attendance fields that are present in the body."""
    record = storage.update_attendance_record(record_id, data)

    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Attendance record not found"
        )

    return record

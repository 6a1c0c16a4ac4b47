from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from typing import List, Optional
from app.api.deps import get_storage
from app.core.errors import BusinessRuleError
from app.core.storage import MemStorage
from app.models import TimeEntry, TimeEntryStatus
from app.schemas import TimeEntryCreate, TimeEntryUpdate, ClockOutRequest
from app.services.time_service import clock_out_entry
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/time-entries", tags=["Time Entries"])


@router.get("", response_model=List[TimeEntry])
async def list_time_entries(
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    storage: MemStorage = Depends(get_storage)
):
    """List time entries, optionally for one employee."""
    if employee_id is not None:
        return storage.get_time_entries_by_employee(employee_id)
    return storage.get_time_entries()


@router.post("", response_model=TimeEntry, status_code=status.HTTP_201_CREATED)
async def create_time_entry(
    data: TimeEntryCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Clock in (create a time entry)."""
    if data.status == TimeEntryStatus.ACTIVE and storage.get_active_time_entry(data.employee_id):
        raise BusinessRuleError(
            "Employee already has an active time entry. Please clock out first.",
            field="employeeId"
        )

    entry = storage.create_time_entry(data)
    logger.info(f"Time entry {entry.id} created for employee {entry.employee_id}")
    return entry


@router.get("/active/{employee_id}", response_model=Optional[TimeEntry])
async def get_active_time_entry(
    employee_id: int,
    storage: MemStorage = Depends(get_storage)
):
    """Get the employee's active time entry (if any)."""
    return storage.get_active_time_entry(employee_id)


@router.put("/{entry_id}/clock-out", response_model=TimeEntry)
async def clock_out(
    entry_id: int,
    data: Optional[ClockOutRequest] = Body(None),
    storage: MemStorage = Depends(get_storage)
):
    """Clock out: compute total hours and complete the entry."""
    entry = clock_out_entry(storage, entry_id, data.clock_out if data else None)

    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Time entry not found"
        )

    return entry


@router.put("/{entry_id}", response_model=TimeEntry)
async def update_time_entry(
    entry_id: int,
    data: TimeEntryUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update time entry fields that are present in the body."""
    entry = storage.update_time_entry(entry_id, data)

    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Time entry not found"
        )

    return entry

import threading
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from app.models import (
    Employee, TimeEntry, TimeEntryStatus, Schedule, AttendanceRecord
)
from app.schemas import (
    EmployeeCreate, EmployeeUpdate,
    TimeEntryCreate, TimeEntryUpdate,
    ScheduleCreate, ScheduleUpdate,
    AttendanceCreate, AttendanceUpdate,
)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Assigned on create, never overwritten by an update.
SERVER_FIELDS = ("id", "created_at")


def merge_record(record: RecordT, changes: dict) -> RecordT:
    """
    Shallow-merge ``changes`` onto ``record``.

    Fields present in ``changes`` overwrite the stored value, absent fields
    keep it. Cross-field rules are not re-checked.
    """
    unknown = set(changes) - set(type(record).model_fields)
    if unknown:
        raise ValueError(f"Unknown fields for {type(record).__name__}: {sorted(unknown)}")

    update = {k: v for k, v in changes.items() if k not in SERVER_FIELDS}
    return record.model_copy(update=update)


class Collection(Generic[RecordT]):
    """Identifier-to-record mapping with a monotonically increasing id counter."""

    def __init__(self, record_type: Type[RecordT]):
        self._record_type = record_type
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[RecordT]:
        return list(self._records.values())

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._records.get(record_id)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [record for record in self._records.values() if predicate(record)]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        return next((record for record in self._records.values() if predicate(record)), None)

    def create(self, fields: dict) -> RecordT:
        with self._lock:
            record = self._record_type(id=self._next_id, created_at=datetime.now(), **fields)
            self._next_id += 1
            self._records[record.id] = record
        return record

    def update(self, record_id: int, changes: dict) -> Optional[RecordT]:
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = merge_record(existing, changes)
            self._records[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class MemStorage:
    """In-memory repository for employees, time entries, schedules and attendance."""

    def __init__(self):
        self._employees: Collection[Employee] = Collection(Employee)
        self._time_entries: Collection[TimeEntry] = Collection(TimeEntry)
        self._schedules: Collection[Schedule] = Collection(Schedule)
        self._attendance_records: Collection[AttendanceRecord] = Collection(AttendanceRecord)

    # Employee operations

    def get_employees(self) -> List[Employee]:
        return self._employees.list()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def find_employee_by_email(self, email: str) -> Optional[Employee]:
        email = email.lower()
        return self._employees.find(lambda e: e.email.lower() == email)

    def create_employee(self, data: EmployeeCreate) -> Employee:
        return self._employees.create(data.model_dump())

    def update_employee(self, employee_id: int, data: EmployeeUpdate) -> Optional[Employee]:
        return self._employees.update(employee_id, data.model_dump(exclude_unset=True))

    def delete_employee(self, employee_id: int) -> bool:
        return self._employees.delete(employee_id)

    # Time entry operations

    def get_time_entries(self) -> List[TimeEntry]:
        return self._time_entries.list()

    def get_time_entry(self, entry_id: int) -> Optional[TimeEntry]:
        return self._time_entries.get(entry_id)

    def get_time_entries_by_employee(self, employee_id: int) -> List[TimeEntry]:
        return self._time_entries.filter(lambda t: t.employee_id == employee_id)

    def get_active_time_entry(self, employee_id: int) -> Optional[TimeEntry]:
        return self._time_entries.find(
            lambda t: t.employee_id == employee_id and t.status == TimeEntryStatus.ACTIVE
        )

    def create_time_entry(self, data: TimeEntryCreate) -> TimeEntry:
        fields = data.model_dump()
        fields["total_hours"] = None
        return self._time_entries.create(fields)

    def update_time_entry(self, entry_id: int, data: TimeEntryUpdate) -> Optional[TimeEntry]:
        return self._time_entries.update(entry_id, data.model_dump(exclude_unset=True))

    def complete_time_entry(
        self, entry_id: int, clock_out: datetime, total_hours: Decimal
    ) -> Optional[TimeEntry]:
        return self._time_entries.update(entry_id, {
            "clock_out": clock_out,
            "total_hours": total_hours,
            "status": TimeEntryStatus.COMPLETED,
        })

    # Schedule operations

    def get_schedules(self) -> List[Schedule]:
        return self._schedules.list()

    def get_schedule(self, schedule_id: int) -> Optional[Schedule]:
        return self._schedules.get(schedule_id)

    def get_schedules_by_employee(self, employee_id: int) -> List[Schedule]:
        return self._schedules.filter(lambda s: s.employee_id == employee_id)

    def get_schedules_by_date(self, on_date: date) -> List[Schedule]:
        return self._schedules.filter(lambda s: s.work_date == on_date)

    def get_schedules_by_date_range(
        self, start_date: Optional[date], end_date: Optional[date]
    ) -> List[Schedule]:
        return self._schedules.filter(lambda s: _within(s.work_date, start_date, end_date))

    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        fields = data.model_dump()
        if not fields.get("is_recurring"):
            fields["recurring_pattern"] = None
        return self._schedules.create(fields)

    def update_schedule(self, schedule_id: int, data: ScheduleUpdate) -> Optional[Schedule]:
        return self._schedules.update(schedule_id, data.model_dump(exclude_unset=True))

    def delete_schedule(self, schedule_id: int) -> bool:
        return self._schedules.delete(schedule_id)

    # Attendance operations

    def get_attendance_records(self) -> List[AttendanceRecord]:
        return self._attendance_records.list()

    def get_attendance_record(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._attendance_records.get(record_id)

    def get_attendance_by_employee(self, employee_id: int) -> List[AttendanceRecord]:
        return self._attendance_records.filter(lambda a: a.employee_id == employee_id)

    def get_attendance_by_date_range(self, start_date: date, end_date: date) -> List[AttendanceRecord]:
        return self._attendance_records.filter(lambda a: _within(a.work_date, start_date, end_date))

    def create_attendance_record(self, data: AttendanceCreate) -> AttendanceRecord:
        return self._attendance_records.create(data.model_dump())

    def update_attendance_record(
        self, record_id: int, data: AttendanceUpdate
    ) -> Optional[AttendanceRecord]:
        return self._attendance_records.update(record_id, data.model_dump(exclude_unset=True))


def _within(value: date, start: Optional[date], end: Optional[date]) -> bool:
    """Inclusive range check; a missing bound is open."""
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True

from datetime import date, timedelta
from typing import Optional
import logging
from app.core.storage import MemStorage
from app.schemas import EmployeeCreate, ScheduleCreate

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"firstName": "Alice", "lastName": "Smith", "email": "alice.smith@company.com", "department": "Engineering", "position": "Software Engineer", "hourlyRate": "75.00", "isActive": True},
    {"firstName": "Bob", "lastName": "Johnson", "email": "bob.johnson@company.com", "department": "Marketing", "position": "Marketing Manager", "hourlyRate": "65.00", "isActive": True},
    {"firstName": "Carol", "lastName": "Williams", "email": "carol.williams@company.com", "department": "Sales", "position": "Sales Representative", "hourlyRate": "50.00", "isActive": True},
    {"firstName": "David", "lastName": "Brown", "email": "david.brown@company.com", "department": "Operations", "position": "Operations Manager", "hourlyRate": "70.00", "isActive": True},
    {"firstName": "Emma", "lastName": "Davis", "email": "emma.davis@company.com", "department": "HR", "position": "HR Specialist", "hourlyRate": "55.00", "isActive": True},
    {"firstName": "Frank", "lastName": "Wilson", "email": "frank.wilson@company.com", "department": "Finance", "position": "Financial Analyst", "hourlyRate": "60.00", "isActive": False},
]

# (employee index, day offset, start, end, notes, recurring pattern)
SAMPLE_SCHEDULES = [
    (0, 0, "09:00", "17:00", "Regular shift", "weekly"),
    (1, 0, "10:00", "18:00", "Marketing hours", None),
    (2, 1, "08:00", "16:00", "Early shift", None),
    (3, 1, "12:00", "20:00", "Afternoon shift", "daily"),
]


def seed_sample_data(storage: MemStorage, today: Optional[date] = None) -> None:
    """Populate an empty store with demo employees and schedules."""
    today = today or date.today()

    employees = [
        storage.create_employee(EmployeeCreate.model_validate(data))
        for data in SAMPLE_EMPLOYEES
    ]

    for index, offset, start, end, notes, pattern in SAMPLE_SCHEDULES:
        storage.create_schedule(ScheduleCreate(
            employee_id=employees[index].id,
            work_date=today + timedelta(days=offset),
            start_time=start,
            end_time=end,
            notes=notes,
            is_recurring=pattern is not None,
            recurring_pattern=pattern,
        ))

    logger.info(f"Seeded {len(employees)} employees and {len(SAMPLE_SCHEDULES)} schedules")

import pytest
from fastapi.testclient import TestClient
from app.core.storage import MemStorage
from app.schemas import EmployeeCreate, TimeEntryCreate
from main import create_app


@pytest.fixture
def storage():
    """Fresh in-memory store for each test."""
    return MemStorage()


@pytest.fixture
def client(storage):
    """API client bound to the test's store."""
    return TestClient(create_app(storage=storage))


@pytest.fixture
def make_employee(storage):
    """Create employees directly in the store."""
    def _make(first_name="Alice", last_name="Smith", email=None, is_active=True, **kwargs):
        return storage.create_employee(EmployeeCreate(
            first_name=first_name,
            last_name=last_name,
            email=email or f"{first_name.lower()}.{last_name.lower()}@company.com",
            department=kwargs.pop("department", "Engineering"),
            position=kwargs.pop("position", "Software Engineer"),
            is_active=is_active,
            **kwargs
        ))
    return _make


@pytest.fixture
def make_time_entry(storage):
    def _make(employee_id, clock_in, break_duration=0, **kwargs):
        return storage.create_time_entry(TimeEntryCreate(
            employee_id=employee_id,
            clock_in=clock_in,
            break_duration=break_duration,
            **kwargs
        ))
    return _make


@pytest.fixture
def employee_payload():
    return {
        "firstName": "Alice",
        "lastName": "Smith",
        "email": "alice.smith@company.com",
        "department": "Engineering",
        "position": "Software Engineer",
        "hourlyRate": "75.00",
    }

import pytest


def schedule_payload(**overrides):
    payload = {
        "employeeId": 1,
        "date": "2024-05-15",
        "startTime": "09:00",
        "endTime": "17:00",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def schedule(client):
    return client.post("/api/schedules", json=schedule_payload(notes="Regular shift")).json()


def test_create_schedule(client):
    response = client.post("/api/schedules", json=schedule_payload())

    assert response.status_code == 201
    data = response.json()
    assert data["date"] == "2024-05-15"
    assert data["isRecurring"] is False
    assert data["recurringPattern"] is None
    assert data["notes"] is None


def test_pattern_dropped_when_not_recurring(client):
    data = client.post("/api/schedules", json=schedule_payload(
        isRecurring=False, recurringPattern="weekly"
    )).json()
    assert data["recurringPattern"] is None


def test_recurring_schedule_keeps_pattern(client):
    data = client.post("/api/schedules", json=schedule_payload(
        isRecurring=True, recurringPattern="daily"
    )).json()
    assert data["recurringPattern"] == "daily"


def test_timestamp_date_is_reduced_to_day(client):
    data = client.post("/api/schedules", json=schedule_payload(date="2024-05-15T10:30:00")).json()
    assert data["date"] == "2024-05-15"


def test_invalid_time_of_day(client, storage):
    response = client.post("/api/schedules", json=schedule_payload(startTime="25:00"))

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Invalid schedule data"
    assert data["errors"][0]["field"] == "startTime"
    assert storage.get_schedules() == []


def test_invalid_pattern(client):
    response = client.post("/api/schedules", json=schedule_payload(
        isRecurring=True, recurringPattern="yearly"
    ))
    assert response.status_code == 400


def test_filter_by_date(client):
    client.post("/api/schedules", json=schedule_payload(date="2024-05-15"))
    client.post("/api/schedules", json=schedule_payload(date="2024-05-16"))

    response = client.get("/api/schedules?date=2024-05-16")
    assert [s["date"] for s in response.json()] == ["2024-05-16"]


def test_filter_by_date_accepts_timestamp(client):
    client.post("/api/schedules", json=schedule_payload(date="2024-05-15"))
    client.post("/api/schedules", json=schedule_payload(date="2024-05-16"))

    response = client.get("/api/schedules?date=2024-05-15T10:30:00")

    assert response.status_code == 200
    assert [s["date"] for s in response.json()] == ["2024-05-15"]


def test_filter_by_malformed_date(client):
    response = client.get("/api/schedules?date=next-tuesday")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "date"


def test_filter_by_employee(client):
    client.post("/api/schedules", json=schedule_payload(employeeId=1))
    client.post("/api/schedules", json=schedule_payload(employeeId=2))

    response = client.get("/api/schedules?employeeId=2")
    assert [s["employeeId"] for s in response.json()] == [2]


def test_get_update_delete(client, schedule):
    url = f"/api/schedules/{schedule['id']}"
    assert client.get(url).json() == schedule

    updated = client.put(url, json={"endTime": "18:00"}).json()
    assert updated["endTime"] == "18:00"
    assert updated["startTime"] == "09:00"

    assert client.delete(url).json() == {"message": "Schedule deleted successfully"}
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404


def test_update_not_found(client):
    response = client.put("/api/schedules/99", json={"notes": "x"})
    assert response.status_code == 404
    assert response.json() == {"message": "Schedule not found"}


def test_export_schedules_in_range(client):
    client.post("/api/employees", json={
        "firstName": "Alice", "lastName": "Smith", "email": "alice@company.com",
        "department": "Engineering", "position": "Engineer",
    })
    for day in ("2024-05-10", "2024-05-15", "2024-05-20"):
        client.post("/api/schedules", json=schedule_payload(date=day))

    response = client.post("/api/schedules/export-google-sheets", json={
        "startDate": "2024-05-10", "endDate": "2024-05-15",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Schedule exported successfully"
    assert data["recordCount"] == 2
    assert data["spreadsheetUrl"].endswith("/edit")


def test_export_schedules_without_range(client, schedule):
    response = client.post("/api/schedules/export-google-sheets")
    assert response.json()["recordCount"] == 1


def test_export_schedules_csv(client, schedule):
    response = client.get("/api/schedules/export?startDate=2024-05-01&endDate=2024-05-31")

    assert response.status_code == 200
    lines = response.text.splitlines()
    assert lines[0].startswith("Date,Employee,Department")
    assert "Unknown" in lines[1]
    assert "8.0" in lines[1]


def test_export_schedules_csv_with_timestamp_bounds(client, schedule):
    response = client.get(
        "/api/schedules/export?startDate=2024-05-15T00:00:00&endDate=2024-05-15T23:59:59"
    )

    assert response.status_code == 200
    assert len(response.text.splitlines()) == 2

def test_create_employee(client, employee_payload):
    response = client.post("/api/employees", json=employee_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 1
    assert data["firstName"] == "Alice"
    assert data["email"] == "alice.smith@company.com"
    assert data["hourlyRate"] == "75.00"
    assert data["isActive"] is True
    assert "createdAt" in data


def test_create_employee_defaults(client, employee_payload):
    del employee_payload["hourlyRate"]
    data = client.post("/api/employees", json=employee_payload).json()
    assert data["hourlyRate"] is None
    assert data["isActive"] is True


def test_create_employee_without_email_is_rejected(client, storage, employee_payload):
    del employee_payload["email"]
    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Invalid employee data"
    assert "email" in [e["field"] for e in data["errors"]]
    assert storage.get_employees() == []


def test_create_employee_with_invalid_email(client, employee_payload):
    employee_payload["email"] = "not-an-email"
    response = client.post("/api/employees", json=employee_payload)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "email"


def test_duplicate_email_is_rejected(client, storage, employee_payload):
    client.post("/api/employees", json=employee_payload)
    employee_payload["firstName"] = "Alicia"
    response = client.post("/api/employees", json=employee_payload)

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"field": "email", "message": "Employee with this email already exists"}
    ]
    assert len(storage.get_employees()) == 1


def test_list_employees_in_insertion_order(client, employee_payload):
    for i, name in enumerate(["Zoe", "Adam"]):
        client.post("/api/employees", json={**employee_payload, "firstName": name, "email": f"e{i}@company.com"})

    response = client.get("/api/employees")
    assert response.status_code == 200
    assert [e["firstName"] for e in response.json()] == ["Zoe", "Adam"]


def test_get_employee_not_found(client):
    response = client.get("/api/employees/99")
    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}


def test_get_employee_with_bad_id(client):
    response = client.get("/api/employees/abc")
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "employee_id"


def test_partial_update(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()
    response = client.put(f"/api/employees/{created['id']}", json={"department": "Sales"})

    assert response.status_code == 200
    data = response.json()
    assert data["department"] == "Sales"
    assert data["firstName"] == created["firstName"]
    assert data["createdAt"] == created["createdAt"]


def test_empty_update_leaves_employee_unchanged(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()
    response = client.put(f"/api/employees/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json() == created
    assert client.get(f"/api/employees/{created['id']}").json() == created


def test_update_rejects_null_required_field(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()
    response = client.put(f"/api/employees/{created['id']}", json={"firstName": None})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "firstName"


def test_update_to_taken_email_is_rejected(client, employee_payload):
    client.post("/api/employees", json=employee_payload)
    other = client.post("/api/employees", json={**employee_payload, "email": "bob@company.com"}).json()

    response = client.put(f"/api/employees/{other['id']}", json={"email": "alice.smith@company.com"})
    assert response.status_code == 400


def test_update_keeps_own_email(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()
    response = client.put(f"/api/employees/{created['id']}", json={"email": employee_payload["email"]})
    assert response.status_code == 200


def test_update_not_found(client):
    response = client.put("/api/employees/99", json={"department": "Sales"})
    assert response.status_code == 404


def test_delete_employee(client, employee_payload):
    created = client.post("/api/employees", json=employee_payload).json()

    response = client.delete(f"/api/employees/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Employee deleted successfully"}

    assert client.get(f"/api/employees/{created['id']}").status_code == 404
    assert client.delete(f"/api/employees/{created['id']}").status_code == 404


def test_export_employees_to_spreadsheet(client, employee_payload):
    client.post("/api/employees", json=employee_payload)
    response = client.post("/api/employees/export-google-sheets")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee data exported successfully"
    assert data["recordCount"] == 1
    assert "/mock-spreadsheet-id-" in data["spreadsheetUrl"]


def test_export_employees_csv(client, employee_payload):
    client.post("/api/employees", json=employee_payload)
    response = client.get("/api/employees/export?format=csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment; filename=employees_" in response.headers["content-disposition"]
    assert "Alice Smith" in response.text


def test_export_employees_unknown_format(client):
    assert client.get("/api/employees/export?format=pdf").status_code == 400

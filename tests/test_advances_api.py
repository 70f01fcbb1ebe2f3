def _entrepreneur(client, headers, name="Transports Yao"):
    resp = client.post("/entrepreneurs", json={"name": name, "specialty": "Transport"}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_unknown_beneficiary_is_rejected(client, manager_headers):
    resp = client.post(
        "/advances",
        json={"beneficiary": {"kind": "employee", "employee_id": 42}, "date": "2024-05-02", "amount": 500},
        headers=manager_headers,
    )
    assert resp.status_code == 422

    resp = client.post(
        "/advances",
        json={"beneficiary": {"kind": "entrepreneur", "entrepreneur_id": 42}, "date": "2024-05-02", "amount": 500},
        headers=manager_headers,
    )
    assert resp.status_code == 422


def test_beneficiary_kind_is_required(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    resp = client.post(
        "/advances",
        json={"beneficiary": {"employee_id": emp_id}, "date": "2024-05-02", "amount": 500},
        headers=manager_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"


def test_non_positive_amount_is_rejected(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    resp = client.post(
        "/advances",
        json={"beneficiary": {"kind": "employee", "employee_id": emp_id}, "date": "2024-05-02", "amount": 0},
        headers=manager_headers,
    )
    assert resp.status_code == 422


def test_entrepreneur_expense_does_not_touch_worker_balance(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    ent = _entrepreneur(client, manager_headers)
    client.post("/harvests", json={"employee_id": emp_id, "date": "2024-05-02", "weight_kg": 10},
                headers=manager_headers)

    resp = client.post(
        "/advances",
        json={"beneficiary": {"kind": "entrepreneur", "entrepreneur_id": ent["entrepreneur_id"]},
              "date": "2024-05-03", "amount": 20000, "category": "TRANSPORT", "payment_method": "TRANSFER"},
        headers=manager_headers,
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["employee_id"] is None
    assert body["beneficiary"] == {"kind": "entrepreneur", "entrepreneur_id": ent["entrepreneur_id"]}

    balance = client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()
    assert balance["balance"] == 750

    external = client.get("/advances?kind=entrepreneur", headers=manager_headers).json()
    assert [a["amount"] for a in external] == [20000]

    dashboard = client.get("/dashboard", headers=manager_headers).json()
    assert dashboard["recent_expenses"][0]["entrepreneur_name"] == "Transports Yao"


def test_delete_entrepreneur_with_expenses_conflicts(client, admin_headers, manager_headers):
    ent = _entrepreneur(client, manager_headers)
    client.post(
        "/advances",
        json={"beneficiary": {"kind": "entrepreneur", "entrepreneur_id": ent["entrepreneur_id"]},
              "date": "2024-05-03", "amount": 1000},
        headers=manager_headers,
    )
    assert client.delete(f"/entrepreneurs/{ent['entrepreneur_id']}", headers=admin_headers).status_code == 409

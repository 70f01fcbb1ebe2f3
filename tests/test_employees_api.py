from services.common import PRESET_COLORS


def test_new_employee_defaults(client, create_employee):
    first = create_employee(name="Kouassi")
    second = create_employee(name="Aya", crop="CACAO")

    assert first["status"] == "ACTIVE"
    assert first["icon_name"] == "user"
    assert first["color"] == PRESET_COLORS[0]
    assert second["color"] == PRESET_COLORS[1]


def test_blank_name_is_rejected(client, manager_headers):
    resp = client.post("/employees", json={"name": "   ", "crop": "HEVEA"}, headers=manager_headers)
    assert resp.status_code == 422


def test_settlement_zeroes_balance(client, manager_headers, create_employee):
    emp = create_employee()
    emp_id = emp["employee_id"]
    client.post("/harvests", json={"employee_id": emp_id, "date": "2024-05-02", "weight_kg": 100},
                headers=manager_headers)
    client.post("/work_tasks",
                json={"employee_id": emp_id, "date": "2024-05-03", "description": "Désherbage", "amount": 2500},
                headers=manager_headers)

    balance = client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()
    assert balance["balance"] == 10000
    assert balance["settled"] is False
    assert balance["settlement_amount"] == 10000

    settle = client.post(f"/employees/{emp_id}/settle", json={"payment_method": "CASH"}, headers=manager_headers)
    assert settle.status_code == 201, settle.text
    advance = settle.json()
    assert advance["amount"] == 10000
    assert advance["category"] == "ADVANCE"
    assert advance["notes"] == "Liquidación final del saldo"
    assert advance["beneficiary"] == {"kind": "employee", "employee_id": emp_id}

    after = client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()
    assert after["balance"] == 0
    assert after["settled"] is True

    again = client.post(f"/employees/{emp_id}/settle", headers=manager_headers)
    assert again.status_code == 409


def test_activity_lists_newest_first(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    client.post("/harvests", json={"employee_id": emp_id, "date": "2024-05-01", "weight_kg": 10},
                headers=manager_headers)
    client.post("/advances",
                json={"beneficiary": {"kind": "employee", "employee_id": emp_id},
                      "date": "2024-05-04", "amount": 300, "category": "ADVANCE"},
                headers=manager_headers)

    items = client.get(f"/employees/{emp_id}/activity", headers=manager_headers).json()

    assert [i["kind"] for i in items] == ["ADVANCE", "HARVEST"]
    assert [i["amount"] for i in items] == [-300, 750]


def test_delete_referenced_employee_conflicts(client, admin_headers, manager_headers, create_employee):
    used = create_employee(name="Used")["employee_id"]
    unused = create_employee(name="Unused")["employee_id"]
    client.post("/harvests", json={"employee_id": used, "date": "2024-05-02", "weight_kg": 1},
                headers=manager_headers)

    assert client.delete(f"/employees/{used}", headers=admin_headers).status_code == 409
    assert client.delete(f"/employees/{unused}", headers=admin_headers).status_code == 204
    assert client.get(f"/employees/{unused}", headers=admin_headers).status_code == 404


def test_resigned_history_still_counts(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    client.post("/harvests", json={"employee_id": emp_id, "date": "2024-05-02", "weight_kg": 4},
                headers=manager_headers)
    client.patch(f"/employees/{emp_id}/status", json={"status": "RESIGNED"}, headers=manager_headers)

    balance = client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()
    assert balance["balance"] == 300

    active = client.get("/employees?status=ACTIVE", headers=manager_headers).json()
    assert all(e["employee_id"] != emp_id for e in active)


def test_settling_half_unit_balance(client, manager_headers, create_employee):
    emp_id = create_employee()["employee_id"]
    client.post("/harvests", json={"employee_id": emp_id, "date": "2024-05-02", "weight_kg": "10.5"},
                headers=manager_headers)

    assert client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()["balance"] == 788

    settle = client.post(f"/employees/{emp_id}/settle", headers=manager_headers)
    assert settle.status_code == 201
    assert settle.json()["amount"] == 788

    after = client.get(f"/employees/{emp_id}/balance", headers=manager_headers).json()
    assert after["balance"] == 0
    assert after["settled"] is True


def test_update_employee(client, manager_headers, create_employee):
    emp_id = create_employee(name="Kouassi")["employee_id"]

    resp = client.patch(f"/employees/{emp_id}", json={"name": "  Kouassi Yao ", "crop": "CACAO"},
                        headers=manager_headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "Kouassi Yao"
    assert resp.json()["crop"] == "CACAO"

    blank = client.patch(f"/employees/{emp_id}", json={"name": "   "}, headers=manager_headers)
    assert blank.status_code == 422
    assert client.get(f"/employees/{emp_id}", headers=manager_headers).json()["name"] == "Kouassi Yao"

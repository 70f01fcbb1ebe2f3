from decimal import Decimal

from enums.enums import EmployeeStatus
from models.harvest import Harvest


def test_harvest_without_rate_freezes_proposal(client, manager_headers, create_employee):
    emp = create_employee(crop="HEVEA")

    resp = client.post(
        "/harvests",
        json={"employee_id": emp["employee_id"], "date": "2024-05-02", "weight_kg": 100},
        headers=manager_headers,
    )

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["pay_rate"] == 75
    assert body["crop"] == "HEVEA"
    assert body["weight_kg"] == 100


def test_cacao_proposal_and_override(client, manager_headers, create_employee):
    emp = create_employee(crop="CACAO")

    proposed = client.get(f"/harvests/proposed-rate?employee_id={emp['employee_id']}", headers=manager_headers)
    assert proposed.status_code == 200
    assert proposed.json() == {"employee_id": emp["employee_id"], "crop": "CACAO", "proposed_rate": 933}

    resp = client.post(
        "/harvests",
        json={"employee_id": emp["employee_id"], "date": "2024-05-02", "weight_kg": "12.5", "pay_rate": 900},
        headers=manager_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["pay_rate"] == 900


def test_settings_change_keeps_recorded_rate(client, db, admin_headers, manager_headers, create_employee):
    emp = create_employee(crop="HEVEA")
    created = client.post(
        "/harvests",
        json={"employee_id": emp["employee_id"], "date": "2024-05-02", "weight_kg": 100},
        headers=manager_headers,
    ).json()

    before = client.get("/dashboard", headers=admin_headers).json()
    assert before["gross_revenue"] == 36000

    resp = client.put(
        "/settings",
        json={
            "pay_rate_hevea": 90,
            "market_price_hevea": 400,
            "market_price_cacao": 2800,
            "cacao_pay_ratio": 0.3333,
        },
        headers=admin_headers,
    )
    assert resp.status_code == 200

    stored = db.get(Harvest, created["harvest_id"])
    assert stored.pay_rate == Decimal("75")

    after = client.get("/dashboard", headers=admin_headers).json()
    assert after["gross_worker_pay"] == before["gross_worker_pay"] == 7500
    assert after["gross_revenue"] == 40000


def test_resigned_employee_cannot_receive_harvests(client, manager_headers, create_employee):
    emp = create_employee()
    client.patch(
        f"/employees/{emp['employee_id']}/status",
        json={"status": EmployeeStatus.RESIGNED.value},
        headers=manager_headers,
    )

    resp = client.post(
        "/harvests",
        json={"employee_id": emp["employee_id"], "date": "2024-05-02", "weight_kg": 10},
        headers=manager_headers,
    )
    assert resp.status_code == 409


def test_unknown_employee_is_404(client, manager_headers):
    resp = client.post(
        "/harvests",
        json={"employee_id": 999, "date": "2024-05-02", "weight_kg": 10},
        headers=manager_headers,
    )
    assert resp.status_code == 404


def test_non_positive_weight_is_rejected(client, manager_headers, create_employee):
    emp = create_employee()
    resp = client.post(
        "/harvests",
        json={"employee_id": emp["employee_id"], "date": "2024-05-02", "weight_kg": 0},
        headers=manager_headers,
    )
    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"

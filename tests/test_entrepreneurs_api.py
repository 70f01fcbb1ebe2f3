from services.common import PRESET_COLORS


def test_create_assigns_palette_color(client, manager_headers):
    first = client.post("/entrepreneurs", json={"name": "Transports Yao"}, headers=manager_headers)
    second = client.post("/entrepreneurs", json={"name": "Agro Intrants", "specialty": "Engrais"},
                         headers=manager_headers)

    assert first.status_code == 201
    assert first.json()["color"] == PRESET_COLORS[0]
    assert second.json()["color"] == PRESET_COLORS[1]
    assert second.json()["specialty"] == "Engrais"


def test_update_entrepreneur(client, manager_headers):
    ent_id = client.post("/entrepreneurs", json={"name": "Transports Yao"},
                         headers=manager_headers).json()["entrepreneur_id"]

    resp = client.patch(
        f"/entrepreneurs/{ent_id}",
        json={"phone": "+225 07 00 00 00", "color": "#123abc"},
        headers=manager_headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Transports Yao"
    assert body["phone"] == "+225 07 00 00 00"
    assert body["color"] == "#123abc"

    listed = client.get("/entrepreneurs", headers=manager_headers).json()
    assert [e["entrepreneur_id"] for e in listed] == [ent_id]


def test_update_unknown_entrepreneur_is_404(client, manager_headers):
    assert client.patch("/entrepreneurs/99", json={"phone": "1"}, headers=manager_headers).status_code == 404


def test_invalid_color_is_rejected(client, manager_headers):
    ent_id = client.post("/entrepreneurs", json={"name": "Transports Yao"},
                         headers=manager_headers).json()["entrepreneur_id"]
    resp = client.patch(f"/entrepreneurs/{ent_id}", json={"color": "red"}, headers=manager_headers)
    assert resp.status_code == 422

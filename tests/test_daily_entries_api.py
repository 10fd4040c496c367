import pytest

from tests.conftest import AS_OF_DAY

NUTRITION = {
    "protein_intake": "High",
    "fruit_intake": "medium",
    "green_intake": "medium",
    "sugar_intake": "low",
    "junk_intake": "none",
    "water_intake": "high",
    "tobacco_intake": "none",
    "alcohol_intake": "low",
    "pot_intake": "none",
}
LIFEPARAM = {"sleep": 7.5, "office_productivity": "medium", "stress": "LOW"}
INTEREST = {"write": True, "read": True, "social": False}

ENTRIES = [
    ("nutrition", "Nutrition", NUTRITION),
    ("lifeparam", "Lifeparam", LIFEPARAM),
    ("interest", "Interest", INTEREST),
]


@pytest.mark.parametrize("prefix,label,payload", ENTRIES)
def test_ping(client, prefix, label, payload):
    assert client.get(f"/api/{prefix}/test").json() == {"msg": f"{label} works"}


@pytest.mark.parametrize("prefix,label,payload", ENTRIES)
def test_create_once_per_day(client, auth_headers, prefix, label, payload):
    assert client.get(f"/api/{prefix}/today", headers=auth_headers).json() is None

    created = client.post(f"/api/{prefix}/", json=payload, headers=auth_headers)
    assert created.status_code == 201
    assert created.json()["date"] == AS_OF_DAY.isoformat()

    again = client.post(f"/api/{prefix}/", json=payload, headers=auth_headers)
    assert again.status_code == 400
    assert again.json()["message"].startswith(f"{label} details have already been entered for the day")

    today = client.get(f"/api/{prefix}/today", headers=auth_headers).json()
    assert today["id"] == created.json()["id"]


@pytest.mark.parametrize("prefix,label,payload", ENTRIES)
def test_entries_are_private(client, auth_headers, other_headers, prefix, label, payload):
    created = client.post(f"/api/{prefix}/", json=payload, headers=auth_headers).json()

    assert client.get(f"/api/{prefix}/today", headers=other_headers).json() is None
    assert client.get(f"/api/{prefix}/id/{created['id']}", headers=other_headers).status_code == 404
    assert client.post(f"/api/{prefix}/", json=payload, headers=other_headers).status_code == 201


@pytest.mark.parametrize("prefix,label,payload", ENTRIES)
def test_lookup_by_date_and_range(client, auth_headers, prefix, label, payload):
    client.post(f"/api/{prefix}/", json=payload, headers=auth_headers)

    assert client.get(f"/api/{prefix}/date/2019-05-24", headers=auth_headers).json()["date"] == "2019-05-24"
    assert client.get(f"/api/{prefix}/date/2019-05-23", headers=auth_headers).json() is None

    in_range = client.get(f"/api/{prefix}/date/from/2019-05-01/to/2019-05-31", headers=auth_headers)
    assert [e["date"] for e in in_range.json()] == ["2019-05-24"]
    inverted = client.get(f"/api/{prefix}/date/from/2019-05-31/to/2019-05-01", headers=auth_headers)
    assert inverted.status_code == 400


@pytest.mark.parametrize("prefix,label,payload", ENTRIES)
def test_delete_entry(client, auth_headers, prefix, label, payload):
    created = client.post(f"/api/{prefix}/", json=payload, headers=auth_headers).json()

    assert client.delete(f"/api/{prefix}/id/{created['id']}", headers=auth_headers).status_code == 200
    missing = client.get(f"/api/{prefix}/id/{created['id']}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == f"{label} not found"


def test_nutrition_levels_are_normalized(client, auth_headers):
    body = client.post("/api/nutrition/", json=NUTRITION, headers=auth_headers).json()
    assert body["protein_intake"] == "high"


def test_nutrition_rejects_unknown_level(client, auth_headers):
    response = client.post("/api/nutrition/", json={**NUTRITION, "junk_intake": "lots"}, headers=auth_headers)
    assert response.status_code == 422


def test_patch_lifeparam_keeps_unset_fields(client, auth_headers):
    created = client.post("/api/lifeparam/", json=LIFEPARAM, headers=auth_headers).json()
    response = client.patch(
        f"/api/lifeparam/id/{created['id']}", json={"stress": "High", "sleep": None}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert (body["sleep"], body["office_productivity"], body["stress"]) == (7.5, "medium", "high")


def test_lifeparam_sleep_is_bounded(client, auth_headers):
    response = client.post("/api/lifeparam/", json={**LIFEPARAM, "sleep": 30}, headers=auth_headers)
    assert response.status_code == 422


def test_interest_flags_default_to_null(client, auth_headers):
    body = client.post("/api/interest/", json=INTEREST, headers=auth_headers).json()
    assert (body["write"], body["read"], body["social"], body["cook"]) == (True, True, False, None)

from datetime import timedelta

from lifetrack.api.v1.endpoints.activities import DUPLICATE_ACTIVITY_MSG
from tests.conftest import AS_OF_DAY


def test_activities_ping(client):
    assert client.get("/api/activities/test").json() == {"msg": "Activities works"}


def test_log_activity_defaults_to_today(client, auth_headers, make_exercise):
    squat = make_exercise("squat", "weight", "high")
    response = client.post(
        "/api/activities/",
        json={"exercise_id": squat.id, "reps": 12, "sets": 4, "weight": 60},
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["date"] == AS_OF_DAY.isoformat()
    assert (body["reps"], body["sets"], body["weight"]) == (12, 4, 60)
    assert body["exercise"]["name"] == "squat"


def test_log_activity_requires_a_token(client, make_exercise):
    squat = make_exercise("squat")
    assert client.post("/api/activities/", json={"exercise_id": squat.id}).status_code == 401


def test_log_activity_for_unknown_exercise(client, auth_headers):
    response = client.post("/api/activities/", json={"exercise_id": 77}, headers=auth_headers)
    assert response.status_code == 404


def test_negative_measures_are_rejected(client, auth_headers, make_exercise):
    squat = make_exercise("squat")
    response = client.post(
        "/api/activities/", json={"exercise_id": squat.id, "reps": -1}, headers=auth_headers
    )
    assert response.status_code == 422


def test_same_exercise_twice_a_day_is_rejected(client, auth_headers, make_exercise, log_activity):
    squat = make_exercise("squat")
    log_activity(squat.id)
    response = client.post("/api/activities/", json={"exercise_id": squat.id}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == DUPLICATE_ACTIVITY_MSG


def test_same_exercise_on_another_day_is_allowed(client, make_exercise, log_activity):
    squat = make_exercise("squat")
    log_activity(squat.id)
    other = log_activity(squat.id, date=(AS_OF_DAY - timedelta(days=1)).isoformat())
    assert other["date"] == "2019-05-23"


def test_list_activities_by_day_and_range(client, auth_headers, make_exercise, log_activity):
    squat = make_exercise("squat")
    rowing = make_exercise("rowing")
    log_activity(squat.id, date="2019-05-20")
    log_activity(rowing.id, date="2019-05-22")
    log_activity(squat.id)

    today = client.get("/api/activities/today", headers=auth_headers).json()
    assert [a["date"] for a in today] == ["2019-05-24"]

    on_day = client.get("/api/activities/date/2019-05-22", headers=auth_headers).json()
    assert [a["exercise"]["name"] for a in on_day] == ["rowing"]

    in_range = client.get("/api/activities/date/from/2019-05-21/to/2019-05-24", headers=auth_headers).json()
    assert [a["date"] for a in in_range] == ["2019-05-22", "2019-05-24"]


def test_inverted_range_is_rejected(client, auth_headers):
    response = client.get("/api/activities/date/from/2019-05-24/to/2019-05-01", headers=auth_headers)
    assert response.status_code == 400


def test_activities_are_private(client, auth_headers, other_headers, make_exercise, log_activity):
    activity = log_activity(make_exercise("squat").id)

    assert client.get("/api/activities/today", headers=other_headers).json() == []
    response = client.patch(f"/api/activities/id/{activity['id']}", json={"reps": 1}, headers=other_headers)
    assert response.status_code == 404
    assert client.delete(f"/api/activities/id/{activity['id']}", headers=other_headers).status_code == 404


def test_update_activity(client, auth_headers, make_exercise, log_activity):
    activity = log_activity(make_exercise("squat").id, reps=8)
    response = client.patch(
        f"/api/activities/id/{activity['id']}", json={"reps": 10, "sets": None}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["reps"] == 10


def test_update_activity_onto_existing_exercise_is_rejected(client, auth_headers, make_exercise, log_activity):
    squat = make_exercise("squat")
    rowing = make_exercise("rowing")
    log_activity(squat.id)
    second = log_activity(rowing.id)

    response = client.patch(
        f"/api/activities/id/{second['id']}", json={"exercise_id": squat.id}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["message"] == DUPLICATE_ACTIVITY_MSG


def test_delete_activity(client, auth_headers, make_exercise, log_activity):
    activity = log_activity(make_exercise("squat").id)
    response = client.delete(f"/api/activities/id/{activity['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/activities/today", headers=auth_headers).json() == []

def exercise_body(name="Bench Press", exercise_type="weight", pmg="chest", exercise_intensity="high"):
    return {
        "name": name,
        "exercise_type": exercise_type,
        "pmg": pmg,
        "exercise_intensity": exercise_intensity,
    }


def test_exercises_ping(client):
    assert client.get("/api/exercises/test").json() == {"msg": "Exercises works"}


def test_create_exercise_normalizes_case(client, auth_headers):
    response = client.post(
        "/api/exercises/",
        json=exercise_body(name="  Bench Press", exercise_type="WEIGHT", pmg="Chest", exercise_intensity="High"),
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "bench press"
    assert (body["exercise_type"], body["pmg"], body["exercise_intensity"]) == ("weight", "chest", "high")


def test_create_exercise_requires_a_token(client):
    response = client.post("/api/exercises/", json=exercise_body())
    assert response.status_code == 401


def test_duplicate_exercise_name_is_rejected(client, auth_headers):
    client.post("/api/exercises/", json=exercise_body(), headers=auth_headers)
    response = client.post("/api/exercises/", json=exercise_body(name="BENCH PRESS"), headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Exercise already exists"


def test_unknown_exercise_type_is_rejected(client, auth_headers):
    response = client.post("/api/exercises/", json=exercise_body(exercise_type="dance"), headers=auth_headers)
    assert response.status_code == 422


def test_list_and_lookup_exercises(client, make_exercise):
    squat = make_exercise("squat", "weight", "high", pmg="quad")
    make_exercise("rowing", "cardio", "medium", pmg="back")

    names = [e["name"] for e in client.get("/api/exercises/").json()]
    assert names == ["rowing", "squat"]

    assert client.get("/api/exercises/name/Squat").json()["id"] == squat.id
    assert client.get(f"/api/exercises/id/{squat.id}").json()["name"] == "squat"
    assert client.get("/api/exercises/id/999").status_code == 404
    assert client.get("/api/exercises/name/deadlift").status_code == 404


def test_filter_exercises(client, make_exercise):
    make_exercise("squat", "weight", "high", pmg="quad")
    make_exercise("rowing", "cardio", "medium", pmg="back")
    make_exercise("pull up", "body-weight", "high", pmg="back")

    assert [e["name"] for e in client.get("/api/exercises/type/cardio").json()] == ["rowing"]
    assert [e["name"] for e in client.get("/api/exercises/pmg/back").json()] == ["pull up", "rowing"]
    assert [e["name"] for e in client.get("/api/exercises/intensity/high").json()] == ["pull up", "squat"]
    assert client.get("/api/exercises/type/dance").status_code == 422


def test_update_exercise(client, auth_headers, make_exercise):
    squat = make_exercise("squat", "weight", "medium", pmg="quad")
    response = client.patch(
        f"/api/exercises/id/{squat.id}", json={"exercise_intensity": "HIGH"}, headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["exercise_intensity"] == "high"
    assert body["name"] == "squat"


def test_rename_onto_existing_exercise_is_rejected(client, auth_headers, make_exercise):
    make_exercise("squat")
    rowing = make_exercise("rowing")
    response = client.patch(f"/api/exercises/id/{rowing.id}", json={"name": "squat"}, headers=auth_headers)
    assert response.status_code == 400


def test_delete_exercise_keeps_logged_activities(client, auth_headers, make_exercise, log_activity):
    squat = make_exercise("squat", "weight", "high")
    activity = log_activity(squat.id, reps=10, sets=3)

    response = client.delete(f"/api/exercises/id/{squat.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "squat"
    assert client.get(f"/api/exercises/id/{squat.id}").status_code == 404

    today = client.get("/api/activities/today", headers=auth_headers).json()
    assert [a["id"] for a in today] == [activity["id"]]
    assert today[0]["exercise_id"] is None
    assert today[0]["exercise"] is None


def test_delete_missing_exercise(client, auth_headers):
    assert client.delete("/api/exercises/id/42", headers=auth_headers).status_code == 404

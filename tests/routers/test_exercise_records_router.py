from datetime import date, timedelta

import pytest


@pytest.fixture
def headers(user, auth_headers):
    return auth_headers(user)


@pytest.fixture
def exercise(client, headers):
    body = {"name": "Bench press", "type": "WeightAndReps"}
    return client.post("/api/exercises/user-exercises", json=body, headers=headers).json()


def _record(exercise_id, **fields):
    body = {"date": date.today().isoformat(), "exerciseId": exercise_id}
    body.update(fields)
    return body


def test_add_record(client, headers, exercise):
    response = client.post("/api/exercise-records", json=_record(exercise["id"], weight=60, reps=8), headers=headers)
    assert response.status_code == 201, response.text
    record = response.json()
    assert record["exerciseName"] == "Bench press"
    assert record["exerciseType"] == "WeightAndReps"
    assert record["weightType"] == "Kilogram"


def test_missing_fields_for_type(client, headers, exercise):
    response = client.post("/api/exercise-records", json=_record(exercise["id"], weight=60), headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Exercise of type 'WeightAndReps' requires: reps."


def test_future_date_rejected(client, headers, exercise):
    body = _record(exercise["id"], weight=60, reps=8)
    body["date"] = (date.today() + timedelta(days=1)).isoformat()
    response = client.post("/api/exercise-records", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Incorrect date."


def test_other_users_exercise_rejected(client, exercise, other_user, auth_headers):
    body = _record(exercise["id"], weight=60, reps=8)
    response = client.post("/api/exercise-records", json=body, headers=auth_headers(other_user))
    assert response.status_code == 400
    assert response.json()["detail"] == "User does not have permission to use this exercise entry."


def test_list_filters(client, headers, exercise):
    plank = client.post("/api/exercises/user-exercises", json={"name": "Plank", "type": "Time"}, headers=headers).json()
    client.post("/api/exercise-records", json=_record(exercise["id"], weight=60, reps=8), headers=headers)
    client.post("/api/exercise-records", json=_record(plank["id"], timeSeconds=90), headers=headers)

    assert client.get("/api/exercise-records", headers=headers).json()["totalCount"] == 2

    data = client.get(f"/api/exercise-records?exerciseId={plank['id']}", headers=headers).json()
    assert [r["timeSeconds"] for r in data["data"]] == [90]

    data = client.get("/api/exercise-records?exerciseType=WeightAndReps", headers=headers).json()
    assert [r["reps"] for r in data["data"]] == [8]

    first = (date.today() - timedelta(days=10)).isoformat()
    last = (date.today() - timedelta(days=5)).isoformat()
    data = client.get(f"/api/exercise-records?firstDate={first}&lastDate={last}", headers=headers).json()
    assert data["totalCount"] == 0


def test_update_and_delete(client, headers, exercise):
    record = client.post("/api/exercise-records", json=_record(exercise["id"], weight=60, reps=8), headers=headers).json()

    body = _record(exercise["id"], id=record["id"], weight=65, reps=6)
    response = client.put(f"/api/exercise-records/{record['id']}", json=body, headers=headers)
    assert response.status_code == 200
    assert response.json()["weight"] == 65

    assert client.delete(f"/api/exercise-records/{record['id']}", headers=headers).status_code == 204
    assert client.get(f"/api/exercise-records/{record['id']}", headers=headers).status_code == 404

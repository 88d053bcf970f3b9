import pytest


@pytest.fixture
def headers(user, auth_headers):
    return auth_headers(user)


def _add(client, headers, name):
    response = client.post("/api/workouts", json={"name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_add_workout(client, headers, user):
    workout = _add(client, headers, "Push day")
    assert workout["isPinned"] is False
    assert workout["countOfTrainings"] == 0
    assert workout["userId"] == user.id


def test_duplicate_name_rejected(client, headers):
    _add(client, headers, "Push day")
    response = client.post("/api/workouts", json={"name": "Push day"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Workout name must be unique."


def test_same_name_for_other_user(client, headers, other_user, auth_headers):
    _add(client, headers, "Push day")
    response = client.post("/api/workouts", json={"name": "Push day"}, headers=auth_headers(other_user))
    assert response.status_code == 201


def test_pinned_first(client, headers):
    _add(client, headers, "A")
    second = _add(client, headers, "B")
    _add(client, headers, "C")

    response = client.put(f"/api/workouts/{second['id']}/pin", headers=headers)
    assert response.json()["isPinned"] is True

    names = [w["name"] for w in client.get("/api/workouts", headers=headers).json()["data"]]
    assert names[0] == "B"

    client.put(f"/api/workouts/{second['id']}/unpin", headers=headers)
    assert client.get(f"/api/workouts/{second['id']}", headers=headers).json()["isPinned"] is False


def test_complete_counts_trainings(client, headers):
    workout = _add(client, headers, "Legs")
    client.put(f"/api/workouts/{workout['id']}/complete", headers=headers)
    response = client.put(f"/api/workouts/{workout['id']}/complete", headers=headers)
    assert response.json()["countOfTrainings"] == 2

    current = client.get("/api/users/current-user", headers=headers).json()
    assert current["countOfTrainings"] == 2
    assert current["startedWorkingOut"] is not None


def test_update_ids_must_match(client, headers):
    workout = _add(client, headers, "Legs")
    body = {"id": workout["id"] + 1, "name": "Legs 2"}
    response = client.put(f"/api/workouts/{workout['id']}", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Workout IDs do not match."


def test_update_and_lookup_by_name(client, headers):
    workout = _add(client, headers, "Legs")
    body = {"id": workout["id"], "name": "Leg day", "description": "Heavy"}
    assert client.put(f"/api/workouts/{workout['id']}", json=body, headers=headers).status_code == 200

    assert client.get("/api/workouts/by-name/Leg day", headers=headers).json()["description"] == "Heavy"
    assert client.get("/api/workouts/workout-exists-by-name/Legs", headers=headers).json() is False
    assert client.get(f"/api/workouts/workout-exists/{workout['id']}", headers=headers).json() is True


def test_other_user_cannot_modify(client, headers, other_user, auth_headers):
    workout = _add(client, headers, "Legs")
    response = client.delete(f"/api/workouts/{workout['id']}", headers=auth_headers(other_user))
    assert response.status_code == 400
    assert response.json()["detail"] == "User does not have permission to delete this workout entry."


def test_delete(client, headers):
    workout = _add(client, headers, "Legs")
    assert client.delete(f"/api/workouts/{workout['id']}", headers=headers).status_code == 204
    assert client.get(f"/api/workouts/{workout['id']}", headers=headers).status_code == 404

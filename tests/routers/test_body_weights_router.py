from datetime import date, timedelta

import pytest


@pytest.fixture
def headers(user, auth_headers):
    return auth_headers(user)


def _add(client, headers, weight, weight_type="Kilogram", day=None):
    body = {"date": (day or date.today()).isoformat(), "weight": weight, "weightType": weight_type}
    response = client.post("/api/body-weights", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_add_and_get(client, headers):
    added = _add(client, headers, 80)
    response = client.get(f"/api/body-weights/{added['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json()["weightType"] == "Kilogram"


def test_get_missing_is_404(client, headers):
    response = client.get("/api/body-weights/999", headers=headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Body weight not found."


def test_other_users_entry_is_400(client, headers, other_user, auth_headers):
    added = _add(client, headers, 80)
    response = client.get(f"/api/body-weights/{added['id']}", headers=auth_headers(other_user))
    assert response.status_code == 400
    assert response.json()["detail"] == "User does not have permission to get this body weight entry."


def test_in_pounds(client, headers):
    _add(client, headers, 100)
    data = client.get("/api/body-weights/in-pounds", headers=headers).json()
    assert data["data"][0]["weight"] == pytest.approx(220.462)
    assert data["data"][0]["weightType"] == "Pound"
    assert data["pageIndex"] == 0
    assert data["pageSize"] == 10


def test_min_max_current(client, headers):
    _add(client, headers, 80, day=date.today() - timedelta(days=2))
    _add(client, headers, 200, "Pound", day=date.today() - timedelta(days=1))
    _add(client, headers, 75)

    assert client.get("/api/body-weights/max", headers=headers).json()["weight"] == 200
    assert client.get("/api/body-weights/min", headers=headers).json()["weight"] == 75
    assert client.get("/api/body-weights/current", headers=headers).json()["weight"] == 75


def test_current_without_entries_is_404(client, headers):
    assert client.get("/api/body-weights/current", headers=headers).status_code == 404


def test_invalid_paging(client, headers):
    response = client.get("/api/body-weights/in-kilograms?pageIndex=-1", headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid page index or page size."


def test_future_last_date(client, headers):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    response = client.get(f"/api/body-weights/in-kilograms?lastDate={tomorrow}", headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Incorrect date."


def test_unknown_sort_column(client, headers):
    response = client.get("/api/body-weights/in-kilograms?sortColumn=height", headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "ERROR: Property 'height' doesn't exist."


def test_update_and_delete(client, headers):
    added = _add(client, headers, 80)
    body = {"id": added["id"], "date": date.today().isoformat(), "weight": 82}

    response = client.put(f"/api/body-weights/{added['id']}", json=body, headers=headers)
    assert response.status_code == 200
    assert response.json()["weight"] == 82

    response = client.put(f"/api/body-weights/{added['id'] + 1}", json=body, headers=headers)
    assert response.json()["detail"] == "Body weight IDs do not match."

    assert client.delete(f"/api/body-weights/{added['id']}", headers=headers).status_code == 204
    assert client.get(f"/api/body-weights/{added['id']}", headers=headers).status_code == 404


def test_requires_auth(client):
    assert client.get("/api/body-weights/in-kilograms").status_code == 401

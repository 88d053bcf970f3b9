from datetime import date, timedelta

import pytest

from models import Muscle


@pytest.fixture
def headers(user, auth_headers):
    return auth_headers(user)


def _add(client, headers, muscle_id, size, size_type="Centimeter", day=None):
    body = {
        "date": (day or date.today()).isoformat(),
        "size": size,
        "sizeType": size_type,
        "muscleId": muscle_id,
    }
    response = client.post("/api/muscle-sizes", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_add_and_convert(client, headers, measurable_muscle):
    _add(client, headers, measurable_muscle.id, 10, "Inch")

    data = client.get("/api/muscle-sizes/in-centimeters", headers=headers).json()
    assert data["data"][0]["size"] == pytest.approx(25.4)
    assert data["data"][0]["sizeType"] == "Centimeter"

    data = client.get(f"/api/muscle-sizes/in-inches?muscleId={measurable_muscle.id}", headers=headers).json()
    assert data["data"][0]["size"] == pytest.approx(10)


def test_min_max(client, headers, measurable_muscle):
    _add(client, headers, measurable_muscle.id, 40, day=date.today() - timedelta(days=1))
    _add(client, headers, measurable_muscle.id, 15, "Inch")

    assert client.get(f"/api/muscle-sizes/min/{measurable_muscle.id}", headers=headers).json()["size"] == 15
    assert client.get(f"/api/muscle-sizes/max/{measurable_muscle.id}", headers=headers).json()["size"] == 40


def test_not_measurable(client, headers, db):
    back = Muscle(name="Back", is_measurable=False)
    db.add(back)
    db.commit()

    body = {"date": date.today().isoformat(), "size": 100, "muscleId": back.id}
    response = client.post("/api/muscle-sizes", json=body, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Muscle 'Back' is not measurable."

def test_register_and_login(client):
    body = {"userName": "alice", "email": "alice@example.com", "password": "secret123", "confirmPassword": "secret123"}

    response = client.post("/api/account/register", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["token"]["roles"] == ["User"]
    assert data["token"]["tokenStr"]
    assert data["token"]["expirationDays"] == 7

    response = client.post("/api/account/login", json={"userName": "alice", "password": "secret123"})
    assert response.status_code == 200
    assert response.json()["message"] == "Login successful"


def test_register_duplicate_name(client, user):
    body = {"userName": user.user_name, "email": "new@example.com", "password": "secret123", "confirmPassword": "secret123"}
    response = client.post("/api/account/register", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Name already registered."


def test_login_invalid(client, user):
    response = client.post("/api/account/login", json={"userName": user.user_name, "password": "wrong"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Password or/and login invalid"


def test_token_requires_auth(client):
    assert client.get("/api/account/token").status_code == 401

    response = client.get("/api/account/token", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_missing_bearer_header_message(client):
    response = client.get("/api/account/token")

    assert response.json()["detail"] == "Missing Authorization Bearer header"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_token_for_current_user(client, user, auth_headers):
    response = client.get("/api/account/token", headers=auth_headers(user))
    assert response.status_code == 200
    assert response.json()["roles"] == ["User"]


def test_root_and_health(client):
    assert client.get("/").json()["name"] == "Workout Tracker API"
    assert client.get("/health").json()["status"] == "ok"

"""
test_auth_api.py - Demo login, registration and the current-user endpoint
"""


def _login(client, email="demo@gmgn.ai", password="anything"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_returns_tokens(client):
    response = _login(client)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["id"] == "user-1"
    assert data["user"]["displayName"] == "DemoTrader"
    assert data["tokens"]["expiresIn"] == 3600
    assert data["tokens"]["accessToken"] != data["tokens"]["refreshToken"]


def test_login_validation(client):
    missing = client.post("/api/auth/login", json={"email": "demo@gmgn.ai"})
    assert missing.status_code == 400
    assert missing.json()["error"]["message"] == "Missing required fields"

    malformed = _login(client, email="demo")
    assert malformed.json()["error"]["message"] == "Invalid email format"


def test_me(client):
    token = _login(client).json()["data"]["tokens"]["accessToken"]

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "demo@gmgn.ai"

    anonymous = client.get("/api/auth/me")
    assert anonymous.status_code == 401
    assert anonymous.json()["error"] == {"code": "AUTH_ERROR", "message": "No token provided"}


def test_register_then_login(client):
    body = {"email": "new@trader.io", "password": "secret1", "confirmPassword": "secret1"}

    response = client.post("/api/auth/register", json=body)
    assert response.status_code == 201
    user = response.json()["data"]["user"]
    assert user["email"] == "new@trader.io"

    duplicate = client.post("/api/auth/register", json=body)
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == {"code": "CONFLICT", "message": "Email already registered"}

    assert _login(client, "new@trader.io", "secret1").json()["data"]["user"]["id"] == user["id"]
    wrong = _login(client, "new@trader.io", "nope-nope")
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "AUTH_ERROR"


def test_register_password_mismatch(client):
    response = client.post(
        "/api/auth/register",
        json={"email": "bob@example.com", "password": "secret1", "confirmPassword": "secret2"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Passwords do not match"


def test_logout(client):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json()["message"] == "Logged out successfully"

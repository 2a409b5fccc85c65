from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, login
from fixit_admin.services.auth import RESET_ACKNOWLEDGEMENT


def test_login_returns_token_and_stamps_last_login(client, fake_backend):
    response = client.post(
        "/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token"]
    assert data["user"] == {"id": 1, "name": "Ada Admin", "email": ADMIN_EMAIL, "role": "admin"}
    assert "expiresAt" in data
    assert fake_backend.data["users"][0]["lastLogin"].endswith("Z")


def test_email_match_is_case_insensitive(client):
    assert login(client, email="ADMIN@FixIt.com")


def test_wrong_password_is_401(client):
    response = client.post(
        "/api/v1/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong-password"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


def test_unknown_user_gets_the_same_message(client):
    response = client.post(
        "/api/v1/auth/login", json={"email": "nobody@fixit.com", "password": "whatever"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid email or password"


def test_disabled_account_cannot_log_in(client):
    response = client.post(
        "/api/v1/auth/login", json={"email": "disabled@fixit.com", "password": "secret99"}
    )

    assert response.status_code == 401


def test_login_form_validation(client):
    response = client.post("/api/v1/auth/login", json={"email": "not-an-email", "password": "123"})

    assert response.status_code == 422
    fields = response.json()["error"]["fields"]
    assert set(fields) == {"email", "password"}


def test_register_creates_admin_user(client, fake_backend):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "New Admin", "email": "new@fixit.com", "password": "hunter22"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["id"] == 3
    created = fake_backend.data["users"][-1]
    assert created["role"] == "admin"
    assert created["isActive"] is True
    assert created["lastLogin"] is None
    assert login(client, email="new@fixit.com", password="hunter22")


def test_register_existing_email_is_409(client):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "Copy Cat", "email": ADMIN_EMAIL.upper(), "password": "hunter22"},
    )

    assert response.status_code == 409


def test_register_short_name_is_422(client):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "A", "email": "a@fixit.com", "password": "hunter22"},
    )

    assert response.status_code == 422
    assert "name" in response.json()["error"]["fields"]


def test_forgot_password_does_not_reveal_accounts(client):
    known = client.post("/api/v1/auth/forgot-password", json={"email": ADMIN_EMAIL})
    unknown = client.post("/api/v1/auth/forgot-password", json={"email": "ghost@fixit.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json() == {"message": RESET_ACKNOWLEDGEMENT}


def test_me_and_logout(client, auth_headers):
    me = client.get("/api/v1/auth/me", headers=auth_headers)
    assert me.json()["data"]["email"] == ADMIN_EMAIL

    assert client.post("/api/v1/auth/logout", headers=auth_headers).status_code == 204
    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 401


def test_garbage_token_is_401(client):
    response = client.get("/api/v1/dashboard/stats", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401

def test_register_returns_user_without_password(client):
    response = client.post(
        "/api/register",
        json={"name": "Ana Souza", "username": "ana", "password": "secret123", "userType": "teach"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["accessToken"]
    assert body["user"] == {"id": 1, "name": "Ana Souza", "username": "ana", "userType": "teach"}


def test_register_hashes_the_stored_password(client, storage, register_user):
    register_user("bruno", password="plain-text")

    stored = storage._users[1]
    assert stored.password != "plain-text"
    assert stored.password.startswith("$2")


def test_register_rejects_duplicate_username(client, register_user):
    register_user("carla")

    response = client.post(
        "/api/register",
        json={"name": "Outra Carla", "username": "carla", "password": "secret123"},
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Username already exists"}


def test_register_validation_errors_are_itemized(client):
    response = client.post("/api/register", json={"username": "", "userType": "guru"})

    assert response.status_code == 400
    paths = {item["path"] for item in response.json()["error"]}
    assert paths == {"name", "username", "password", "userType"}


def test_login_and_current_user(client, register_user):
    register_user("dani", user_type="both", password="pw-dani")

    response = client.post("/api/login", json={"username": "dani", "password": "pw-dani"})
    assert response.status_code == 200
    token = response.json()["accessToken"]

    me = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["username"] == "dani"
    assert "password" not in me.json()


def test_login_with_wrong_password_is_401(client, register_user):
    register_user("eva", password="right-one")

    response = client.post("/api/login", json={"username": "eva", "password": "wrong-one"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid username or password"}


def test_current_user_requires_a_valid_token(client):
    assert client.get("/api/user").status_code == 401

    response = client.get("/api/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_logout_revokes_the_token(client, storage, register_user):
    _, headers = register_user("fabio")
    assert client.get("/api/user", headers=headers).status_code == 200

    response = client.post("/api/logout", headers=headers)

    assert response.status_code == 200
    assert len(storage.session_store) == 0
    assert client.get("/api/user", headers=headers).status_code == 401


def test_logout_without_session_still_succeeds(client):
    assert client.post("/api/logout").status_code == 200


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_tokens_are_signed_with_the_app_settings(storage, register_user):
    from fastapi.testclient import TestClient
    from jose import jwt

    from conectidade.config import Settings
    from conectidade.main import create_app

    _, default_headers = register_user("gabi")
    other_settings = Settings(SECRET_KEY="another-secret")

    with TestClient(create_app(storage=storage, settings=other_settings)) as other:
        # Same storage and session, but signed with a key this app does not use.
        assert other.get("/api/user", headers=default_headers).status_code == 401

        response = other.post("/api/login", json={"username": "gabi", "password": "secret123"})
        token = response.json()["accessToken"]
        claims = jwt.decode(token, "another-secret", algorithms=[other_settings.ALGORITHM])
        assert claims["sub"] == str(response.json()["user"]["id"])
        assert other.get("/api/user", headers={"Authorization": f"Bearer {token}"}).status_code == 200


def test_importing_main_builds_no_app():
    from conectidade import main

    assert not hasattr(main, "app")
    assert callable(main.create_app)

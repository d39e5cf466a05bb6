"""Tests for the user endpoints."""


class TestCreateUser:
    def test_create_user(self, client):
        response = client.post(
            "/users/create",
            json={"username": "alice", "password": "secret1", "displayName": "Alice"},
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "alice"
        assert user["displayName"] == "Alice"
        assert "userId" in user
        assert "passwordHash" not in user

    def test_missing_fields(self, client):
        response = client.post("/users/create", json={"username": "alice"})

        assert response.status_code == 400
        assert response.json()["error"] == "MISSING_FIELDS"

    def test_short_password(self, client):
        response = client.post(
            "/users/create",
            json={"username": "alice", "password": "123", "displayName": "Alice"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "WEAK_PASSWORD"

    def test_duplicate_username(self, client):
        body = {"username": "alice", "password": "secret1", "displayName": "Alice"}
        client.post("/users/create", json=body)

        response = client.post("/users/create", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "USERNAME_TAKEN"


class TestLogin:
    def test_login(self, client, alice):
        response = client.post("/users/login", json={"username": "alice", "password": "secret1"})

        assert response.status_code == 200
        assert response.json()["user"]["userId"] == alice.user_id

    def test_bad_credentials(self, client, alice):
        response = client.post("/users/login", json={"username": "alice", "password": "nope123"})

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"


class TestResetPassword:
    def test_reset_password(self, client, alice):
        response = client.post(
            "/users/reset-password",
            json={"username": "alice", "newPassword": "brand-new"},
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        login = client.post("/users/login", json={"username": "alice", "password": "brand-new"})
        assert login.status_code == 200

    def test_unknown_user(self, client):
        response = client.post(
            "/users/reset-password",
            json={"username": "nobody", "newPassword": "brand-new"},
        )
        assert response.status_code == 404


class TestGetUser:
    def test_get_user(self, client, bob):
        response = client.get(f"/users/{bob.user_id}")

        assert response.status_code == 200
        assert response.json() == {
            "userId": bob.user_id,
            "username": "bob",
            "displayName": "Bob",
        }

    def test_missing_user(self, client):
        response = client.get("/users/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"

"""End-to-end tests for authentication flow."""

from fastapi.testclient import TestClient

from tests.factories import DEFAULT_PASSWORD, sign_up


class TestAuthFlow:
    """End-to-end tests for email and password sessions."""

    def test_signup_sets_cookie_and_me_returns_user(self, client):
        # Act
        session = sign_up(client, "Reader@Example.com", name="Reader")
        me = client.get("/auth/me")

        # Assert
        assert session["email"] == "reader@example.com"
        assert session["role"] == "user"
        assert "auth_token" in client.cookies
        assert me.status_code == 200
        assert me.json()["authenticated"] is True
        assert me.json()["user"]["user_id"] == session["user_id"]

    def test_me_without_cookie_is_unauthenticated(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_with_garbage_cookie_is_unauthenticated(self, client):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.get("/auth/me")

        assert response.json()["authenticated"] is False

    def test_duplicate_signup_conflicts(self, client, app):
        sign_up(client, "reader@example.com")

        response = TestClient(app).post(
            "/auth/signup",
            json={"email": "reader@example.com", "password": DEFAULT_PASSWORD},
        )

        assert response.status_code == 409

    def test_signup_rejects_short_password(self, client):
        response = client.post(
            "/auth/signup", json={"email": "reader@example.com", "password": "short"}
        )

        assert response.status_code == 400

    def test_signup_rejects_invalid_email(self, client):
        response = client.post(
            "/auth/signup", json={"email": "not-an-email", "password": DEFAULT_PASSWORD}
        )

        assert response.status_code == 400

    def test_signin_and_signout(self, client, app):
        sign_up(client, "reader@example.com")
        other = TestClient(app)

        wrong = other.post(
            "/auth/signin",
            json={"email": "reader@example.com", "password": "wrong-password"},
        )
        right = other.post(
            "/auth/signin",
            json={"email": "reader@example.com", "password": DEFAULT_PASSWORD},
        )

        assert wrong.status_code == 401
        assert right.status_code == 200
        assert other.get("/auth/me").json()["authenticated"] is True

        signed_out = other.post("/auth/signout")

        assert signed_out.status_code == 200
        assert other.get("/auth/me").json()["authenticated"] is False

    def test_update_profile(self, client):
        sign_up(client, "reader@example.com", name="Reader")

        response = client.patch("/users/me", json={"name": "Night Owl"})

        assert response.status_code == 200
        assert response.json()["name"] == "Night Owl"
        assert client.get("/auth/me").json()["user"]["name"] == "Night Owl"

    def test_update_profile_requires_auth(self, client):
        response = client.patch("/users/me", json={"name": "Night Owl"})

        assert response.status_code == 401

    def test_change_password(self, client, app):
        sign_up(client, "reader@example.com")

        wrong = client.post(
            "/users/me/password",
            json={
                "current_password": "not-the-password",
                "new_password": "new-long-password",
            },
        )
        short = client.post(
            "/users/me/password",
            json={"current_password": DEFAULT_PASSWORD, "new_password": "short"},
        )
        changed = client.post(
            "/users/me/password",
            json={
                "current_password": DEFAULT_PASSWORD,
                "new_password": "new-long-password",
            },
        )

        assert wrong.status_code == 403
        assert short.status_code == 400
        assert changed.status_code == 200
        assert changed.json() == {"success": True}

        other = TestClient(app)
        old = other.post(
            "/auth/signin",
            json={"email": "reader@example.com", "password": DEFAULT_PASSWORD},
        )
        new = other.post(
            "/auth/signin",
            json={"email": "reader@example.com", "password": "new-long-password"},
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_change_password_requires_auth(self, client):
        response = client.post(
            "/users/me/password",
            json={
                "current_password": DEFAULT_PASSWORD,
                "new_password": "new-long-password",
            },
        )

        assert response.status_code == 401

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200

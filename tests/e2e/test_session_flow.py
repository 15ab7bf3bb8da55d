"""End-to-end tests for signup, login and session handling."""

from fastapi.testclient import TestClient

from tests.harness import create_client_fixture

# E2E test fixture
client = create_client_fixture()


def signup(client: TestClient, email: str = "alice@example.com", **extra):
    return client.post(
        "/auth/signup",
        json={
            "email": email,
            "password": "correct horse",
            "captchaToken": "ok",
            **extra,
        },
    )


class TestSessionFlow:
    """End-to-end tests for the auth routes."""

    def test_signup_returns_token_and_sets_cookie(self, client: TestClient):
        # Act
        response = signup(client, email="Alice@Example.com")

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "alice@example.com"
        assert data["user"]["share_points"] == 0
        assert "auth_token" in response.cookies

    def test_duplicate_signup_is_rejected(self, client: TestClient):
        signup(client)

        response = signup(client)

        assert response.status_code == 400

    def test_signup_rejected_by_captcha(self, client: TestClient):
        response = signup(client, captchaToken="invalid")

        assert response.status_code == 400
        assert "CAPTCHA" in response.json()["detail"]

    def test_signup_without_password(self, client: TestClient):
        response = client.post(
            "/auth/signup", json={"email": "a@example.com", "captchaToken": "ok"}
        )

        assert response.status_code == 400

    def test_login_and_me_with_bearer_token(self, client: TestClient):
        # Arrange
        signup(client)
        client.cookies.clear()

        # Act
        login = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "correct horse"},
        )
        token = login.json()["token"]
        client.cookies.clear()
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert login.status_code == 200
        assert me.status_code == 200
        assert me.json()["user"]["email"] == "alice@example.com"

    def test_me_with_session_cookie(self, client: TestClient):
        signup(client)

        response = client.get("/auth/me")

        assert response.status_code == 200

    def test_login_with_wrong_password(self, client: TestClient):
        signup(client)

        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "nope"}
        )

        assert response.status_code == 400

    def test_me_without_token(self, client: TestClient):
        response = client.get("/auth/me")

        assert response.status_code == 401

    def test_me_with_invalid_token(self, client: TestClient):
        response = client.get(
            "/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 403

    def test_logout_clears_cookie(self, client: TestClient):
        signup(client)

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/auth/me").status_code == 401

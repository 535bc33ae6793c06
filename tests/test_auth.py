import pytest
from rest_framework_simplejwt.tokens import AccessToken

from users.models import User

pytestmark = pytest.mark.django_db


def test_signup_returns_user_and_token(api_client):
    response = api_client.post(
        "/api/auth/signup", {"email": "New@Example.com", "password": "secret123"}, format="json"
    )
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["role"] == "free"
    assert body["user"]["settings"] == {"theme": "light", "fontSize": 14}
    assert "password" not in body["user"]

    token = AccessToken(body["token"])
    assert token["userId"] == body["user"]["id"]
    assert token["email"] == "new@example.com"
    assert token["isAdmin"] is False


def test_signup_rejects_duplicate_email(api_client, user):
    response = api_client.post(
        "/api/auth/signup", {"email": "ALICE@example.com", "password": "secret123"}, format="json"
    )
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "User already exists"}


def test_signup_validates_input(api_client):
    response = api_client.post("/api/auth/signup", {"email": "nope", "password": "123"}, format="json")
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert set(body["errors"]) == {"email", "password"}
    assert not User.objects.exists()


def test_signin_is_case_insensitive_on_email(api_client, user):
    response = api_client.post(
        "/api/auth/signin", {"email": "Alice@Example.com", "password": "secret123"}, format="json"
    )
    assert response.status_code == 200
    assert response.json()["user"]["id"] == str(user.id)


@pytest.mark.parametrize(
    "email,password",
    [("alice@example.com", "wrong-password"), ("nobody@example.com", "secret123")],
)
def test_signin_rejects_bad_credentials(api_client, user, email, password):
    response = api_client.post("/api/auth/signin", {"email": email, "password": password}, format="json")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_signin_ignores_stale_bearer_header(api_client, user):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer expired-or-garbage")
    response = api_client.post(
        "/api/auth/signin", {"email": "alice@example.com", "password": "secret123"}, format="json"
    )
    assert response.status_code == 200


def test_me_returns_current_user(auth_client, user):
    response = auth_client.get("/api/auth/me")
    assert response.status_code == 200
    assert response.json()["email"] == user.email
    assert response.json()["effectiveRole"] == "free"


def test_me_requires_token(api_client):
    assert api_client.get("/api/auth/me").status_code == 401

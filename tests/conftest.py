import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from authapi.views import issue_token
from users.models import ROLE_ADMIN, ROLE_PAID, User


@pytest.fixture(autouse=True)
def _reset_throttles():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


def _client_for(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
    return client


@pytest.fixture
def client_for():
    return _client_for


@pytest.fixture
def user(db):
    return User.objects.create_user(email="alice@example.com", password="secret123")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email="bob@example.com", password="secret123")


@pytest.fixture
def paid_user(db):
    paid = User.objects.create_user(email="carol@example.com", password="secret123")
    paid.set_role(ROLE_PAID)
    paid.save()
    return paid


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email="admin@example.com", password="secret123", role=ROLE_ADMIN, is_admin=True
    )


@pytest.fixture
def auth_client(user):
    return _client_for(user)


@pytest.fixture
def other_client(other_user):
    return _client_for(other_user)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)

import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from accounts.models import (
    CustomUser,
    ROLE_ADMIN,
    ROLE_COLLECTOR,
    ROLE_DEVELOPER,
    ROLE_USER1,
    ROLE_USER2,
)
from accounts.seed import seed_tabs
from vault.defaults import ensure_default_vault_tabs

PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def storage(settings, tmp_path):
    settings.UPLOADS_DIR = tmp_path / "uploads"
    settings.VAULT_UPLOADS_DIR = tmp_path / "vault-uploads"
    return settings


@pytest.fixture
def make_user(db):
    def _make(username, role, password=PASSWORD):
        user = CustomUser.objects.create_user(username, password, role=role)
        if role == ROLE_COLLECTOR:
            ensure_default_vault_tabs(user)
        return user
    return _make


@pytest.fixture
def developer(make_user):
    return make_user("dev", ROLE_DEVELOPER)


@pytest.fixture
def collector(make_user):
    return make_user("boss", ROLE_COLLECTOR)


@pytest.fixture
def other_collector(make_user):
    return make_user("boss2", ROLE_COLLECTOR)


@pytest.fixture
def user1(make_user):
    return make_user("alice", ROLE_USER1)


@pytest.fixture
def user1_peer(make_user):
    return make_user("amy", ROLE_USER1)


@pytest.fixture
def user2(make_user):
    return make_user("bob", ROLE_USER2)


@pytest.fixture
def legacy_admin(make_user):
    return make_user("legacy", ROLE_ADMIN)


@pytest.fixture
def tabs(db):
    seed_tabs()


@pytest.fixture
def login(db):
    """Log a user in through the real endpoint so requests carry the session cookie."""
    def _login(user, password=PASSWORD):
        client = APIClient()
        response = client.post("/api/auth/login/", {"username": user.username, "password": password}, format="json")
        assert response.status_code == 200, response.content
        return client
    return _login


@pytest.fixture
def upload(tabs):
    def _upload(client, name="report.txt", content=b"hello world", category="all", **fields):
        data = {
            "file": SimpleUploadedFile(name, content, content_type="text/plain"),
            "category": category,
            **fields,
        }
        return client.post("/api/files/upload/", data, format="multipart")
    return _upload

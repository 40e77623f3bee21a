from datetime import timedelta

from django.utils import timezone
from rest_framework.test import APIClient

from accounts.models import UserSessions
from accounts.utils.token_utils import create_session, resolve_user, session_id_from_token
from conftest import PASSWORD


def test_login_sets_http_only_session_cookie(user1):
    client = APIClient()
    response = client.post("/api/auth/login/", {"username": "alice", "password": PASSWORD}, format="json")

    assert response.status_code == 200
    assert response.data["success"] is True
    assert response.data["user"] == {"id": user1.id, "username": "alice", "role": "user1", "profile_picture": None}
    cookie = response.cookies["session"]
    assert cookie["httponly"]
    assert cookie["samesite"] == "Lax"
    assert UserSessions.objects.filter(user=user1).count() == 1


def test_me_returns_session_user(login, user1):
    response = login(user1).get("/api/auth/me/")
    assert response.status_code == 200
    assert response.data["user"]["username"] == "alice"
    assert response.data["user"]["role"] == "user1"


def test_login_requires_both_fields(db):
    response = APIClient().post("/api/auth/login/", {"username": "alice"}, format="json")
    assert response.status_code == 400
    assert response.data["error"] == "Username and password are required"


def test_login_rejects_bad_password(user1):
    response = APIClient().post("/api/auth/login/", {"username": "alice", "password": "nope"}, format="json")
    assert response.status_code == 401
    assert response.data["error"] == "Invalid credentials"


def test_login_rejects_unknown_user(db):
    response = APIClient().post("/api/auth/login/", {"username": "ghost", "password": "x"}, format="json")
    assert response.status_code == 401


def test_protected_endpoint_without_cookie_is_401(db):
    assert APIClient().get("/api/auth/me/").status_code == 401


def test_undecodable_cookie_fails_open(db):
    client = APIClient()
    client.cookies["session"] = "not-a-token"
    assert client.get("/api/auth/me/").status_code == 401


def test_expired_session_is_rejected_and_removed(user1):
    session, token = create_session(user1)
    UserSessions.objects.filter(pk=session.pk).update(expires_at=timezone.now() - timedelta(seconds=1))

    client = APIClient()
    client.cookies["session"] = token
    assert client.get("/api/auth/me/").status_code == 401
    assert not UserSessions.objects.filter(pk=session.pk).exists()


def test_session_lifetime_follows_settings(settings, user1):
    settings.PORTAL_SESSION_TTL_DAYS = 2
    session, token = create_session(user1)
    remaining = session.expires_at - timezone.now()
    assert timedelta(days=1, hours=23) < remaining <= timedelta(days=2)
    assert session_id_from_token(token) == session.id
    assert resolve_user(token) == user1


def test_logout_deletes_session_and_token_stops_working(login, user1):
    client = login(user1)
    token = client.cookies["session"].value

    response = client.post("/api/auth/logout/")
    assert response.status_code == 200
    assert response.data == {"success": True}
    assert not UserSessions.objects.filter(user=user1).exists()

    replay = APIClient()
    replay.cookies["session"] = token
    assert replay.get("/api/auth/me/").status_code == 401


def test_logout_without_session_still_succeeds(db):
    response = APIClient().post("/api/auth/logout/")
    assert response.status_code == 200


def test_inactive_user_cannot_use_existing_session(login, user1):
    client = login(user1)
    user1.is_active = False
    user1.save()
    assert client.get("/api/auth/me/").status_code == 401


def test_login_is_rate_limited_per_ip(settings, user1):
    settings.LOGIN_RATE_LIMIT = "2/m"
    client = APIClient()
    for _ in range(2):
        client.post("/api/auth/login/", {"username": "alice", "password": "wrong"}, format="json")

    response = client.post("/api/auth/login/", {"username": "alice", "password": PASSWORD}, format="json")
    assert response.status_code == 429
    assert response.json()["retry_after"] > 0

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import Client
from pathlib import Path

from accounts.models import CustomUser, UserSessions
from conftest import PASSWORD
from helpers import stored_blobs
from vault.models import VaultCustomTab


def test_profile_read_and_update(login, user1):
    client = login(user1)
    assert client.get("/api/profile/").data["profile"] == {"full_name": "alice", "email": ""}

    response = client.put("/api/profile/", {"full_name": "Alice Liddell", "email": "alice@example.com"},
                          format="json")
    assert response.status_code == 200
    assert response.data["profile"] == {"full_name": "Alice Liddell", "email": "alice@example.com"}


def test_profile_rejects_bad_email(login, user1):
    response = login(user1).put("/api/profile/", {"email": "not-an-email"}, format="json")
    assert response.status_code == 400
    assert "email" in response.data["fields"]


def test_change_password(login, user1):
    client = login(user1)
    response = client.put("/api/profile/password/", {"currentPassword": PASSWORD, "newPassword": "n3w-pass"},
                          format="json")
    assert response.status_code == 200

    user1.refresh_from_db()
    assert user1.check_password("n3w-pass")
    login(user1, password="n3w-pass")


def test_change_password_checks_current(login, user1):
    response = login(user1).put("/api/profile/password/", {"currentPassword": "wrong", "newPassword": "x"},
                                format="json")
    assert response.status_code == 400
    assert response.data["error"] == "Current password is incorrect"


def test_picture_must_be_an_image(login, user1):
    upload = SimpleUploadedFile("notes.txt", b"text", content_type="text/plain")
    response = login(user1).put("/api/profile/picture/", {"profilePicture": upload}, format="multipart")
    assert response.status_code == 400
    assert response.data["error"] == "File must be an image"


def test_new_picture_replaces_old_blob(login, user1, settings):
    client = login(user1)
    for name in ("one.png", "two.png"):
        picture = SimpleUploadedFile(name, b"img", content_type="image/png")
        client.put("/api/profile/picture/", {"profilePicture": picture}, format="multipart")

    user1.refresh_from_db()
    blobs = stored_blobs(Path(settings.UPLOADS_DIR))
    assert len(blobs) == 1
    assert blobs[0].startswith(f"profile_{user1.id}_")
    assert user1.profile_picture.endswith(blobs[0])


def test_admin_endpoints_are_developer_only(login, user1, collector):
    assert login(user1).get("/api/admin/users/").status_code == 403
    assert login(collector).get("/api/admin/users/").status_code == 403


def test_developer_lists_and_creates_users(login, developer, user1):
    client = login(developer)
    usernames = [u["username"] for u in client.get("/api/admin/users/").data["users"]]
    assert set(usernames) == {"dev", "alice"}

    response = client.post("/api/admin/users/", {"username": "carol", "password": "pw", "role": "collector"},
                           format="json")
    assert response.status_code == 201
    carol = CustomUser.objects.get(username="carol")
    assert carol.role == "collector"
    assert carol.profile.full_name == "carol"
    assert VaultCustomTab.objects.filter(collector=carol).count() == 4


def test_create_user_validation(login, developer, user1):
    client = login(developer)
    duplicate = client.post("/api/admin/users/", {"username": "alice", "password": "pw", "role": "user1"},
                            format="json")
    assert duplicate.status_code == 400
    assert duplicate.data["error"] == "Username already exists"

    legacy = client.post("/api/admin/users/", {"username": "zed", "password": "pw", "role": "admin"},
                         format="json")
    assert legacy.status_code == 400
    assert legacy.data["error"] == "Invalid role"

    missing = client.post("/api/admin/users/", {"username": "zed"}, format="json")
    assert missing.data["error"] == "All fields are required"


def test_update_user_role_and_password(login, developer, user1):
    response = login(developer).put(f"/api/admin/users/{user1.id}/",
                                    {"username": "alice", "role": "user2", "password": "fresh"}, format="json")
    assert response.status_code == 200
    user1.refresh_from_db()
    assert user1.role == "user2"
    assert user1.check_password("fresh")


def test_update_without_password_keeps_it(login, developer, user1):
    login(developer).put(f"/api/admin/users/{user1.id}/", {"username": "alice2", "role": "user1"}, format="json")
    user1.refresh_from_db()
    assert user1.username == "alice2"
    assert user1.check_password(PASSWORD)


def test_delete_user_cascades_sessions(login, developer, user1):
    login(user1)
    response = login(developer).delete(f"/api/admin/users/{user1.id}/")
    assert response.status_code == 200
    assert not CustomUser.objects.filter(pk=user1.id).exists()
    assert not UserSessions.objects.filter(user_id=user1.id).exists()


def test_developer_cannot_delete_self(login, developer):
    response = login(developer).delete(f"/api/admin/users/{developer.id}/")
    assert response.status_code == 400
    assert response.data["error"] == "Cannot delete your own account"


def test_django_admin_lists_portal_users(db, user1):
    staff = CustomUser.objects.create_superuser("root", "pw")
    client = Client()
    client.force_login(staff)
    response = client.get("/admin/accounts/customuser/")
    assert response.status_code == 200
    assert b"alice" in response.content

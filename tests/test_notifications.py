import pytest
from django.db import DatabaseError

from messaging.models import PrivateMessage
from notifications.models import Notification
from notifications.utils import notify


@pytest.fixture
def notes(user1, user2):
    def _make(user, count, **fields):
        return Notification.objects.bulk_create(
            Notification(user=user, type="file_status", title=f"t{i}", message="m", **fields)
            for i in range(count)
        )
    return _make


def test_list_returns_latest_fifty_and_unread_count(login, notes, user1):
    notes(user1, 55)
    Notification.objects.filter(title="t0").update(is_read=True)

    response = login(user1).get("/api/notifications/")
    assert response.status_code == 200
    assert len(response.data["notifications"]) == 50
    assert response.data["notifications"][0]["title"] == "t54"
    assert response.data["unreadCount"] == 54


def test_mark_all_read_leaves_other_users_alone(login, notes, user1, user2):
    notes(user1, 3)
    notes(user2, 2)

    response = login(user1).put("/api/notifications/read-all/")
    assert response.status_code == 200
    assert response.data["updated"] == 3
    assert not Notification.objects.filter(user=user1, is_read=False).exists()
    assert Notification.objects.filter(user=user2, is_read=False).count() == 2


def test_mark_one_read(login, notes, user1):
    note = notes(user1, 1)[0]
    assert login(user1).put(f"/api/notifications/{note.id}/read/").status_code == 200
    note.refresh_from_db()
    assert note.is_read


def test_foreign_notifications_look_missing(login, notes, user1, user2):
    note = notes(user2, 1)[0]
    client = login(user1)
    assert client.put(f"/api/notifications/{note.id}/read/").status_code == 404
    assert client.delete(f"/api/notifications/{note.id}/").status_code == 404
    assert Notification.objects.filter(pk=note.id, is_read=False).exists()


def test_delete_one_and_clear_all(login, notes, user1, user2):
    first, second, _ = notes(user1, 3)
    notes(user2, 1)
    client = login(user1)

    assert client.delete(f"/api/notifications/{first.id}/").status_code == 200
    assert not Notification.objects.filter(pk=first.id).exists()

    response = client.delete("/api/notifications/")
    assert response.data["deleted"] == 2
    assert not Notification.objects.filter(user=user1).exists()
    assert Notification.objects.filter(user=user2).count() == 1


def test_failed_delivery_keeps_primary_action(login, user1, user2, monkeypatch):
    def broken(*args, **kwargs):
        raise DatabaseError("disk full")

    monkeypatch.setattr(Notification.objects, "bulk_create", broken)

    response = login(user1).post("/api/private-messages/", {"receiver_id": user2.id, "content": "still here"},
                                 format="json")
    assert response.status_code == 201
    assert PrivateMessage.objects.filter(content="still here").exists()
    assert not Notification.objects.exists()


def test_notify_with_no_recipients_writes_nothing(db):
    assert notify([], "file_upload", "title", "message") == 0
    assert not Notification.objects.exists()

from pathlib import Path

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from files.models import Comment, File
from helpers import read_streaming, stored_blobs
from notifications.models import Notification, TYPE_FILE_COMMENT, TYPE_FILE_STATUS, TYPE_FILE_UPLOAD


@pytest.fixture
def uploads_dir(settings):
    return Path(settings.UPLOADS_DIR)


def test_upload_stores_blob_under_generated_name(login, upload, user1, uploads_dir):
    response = upload(login(user1), name="report.txt", category="daily")

    assert response.status_code == 201
    file_obj = File.objects.get(pk=response.data["fileId"])
    assert file_obj.original_name == "report.txt"
    assert file_obj.filename != "report.txt"
    assert file_obj.filename.endswith(".txt")
    assert file_obj.role_group == "user1"
    assert file_obj.shared_with == "all"
    assert file_obj.status == "pending"
    assert file_obj.file_size == len(b"hello world")
    assert stored_blobs(uploads_dir) == [file_obj.filename]
    assert response.data["file"]["uploaded_by_role"] == "user1"


def test_upload_notifies_privileged_users_except_uploader(login, upload, user1, developer, collector):
    response = upload(login(developer), category="daily", target_role="user1", folder_path="reports")
    assert response.status_code == 201

    rows = Notification.objects.filter(type=TYPE_FILE_UPLOAD)
    assert [n.user for n in rows] == [collector]
    assert rows[0].message == "dev uploaded report.txt in reports"
    assert rows[0].related_id == response.data["fileId"]

    upload(login(user1), category="daily")
    assert Notification.objects.filter(type=TYPE_FILE_UPLOAD).count() == 3


def test_upload_with_unknown_category_writes_nothing(login, upload, user1, uploads_dir):
    response = upload(login(user1), category="forms")

    assert response.status_code == 400
    assert response.data["error"] == "Invalid category for this role group"
    assert File.objects.count() == 0
    assert stored_blobs(uploads_dir) == []


def test_upload_requires_file_and_category(login, tabs, user1):
    response = login(user1).post("/api/files/upload/", {"category": "daily"}, format="multipart")
    assert response.status_code == 400
    assert response.data["error"] == "File and category are required"


def test_legacy_admin_cannot_upload(login, upload, legacy_admin):
    response = upload(login(legacy_admin), category="all")
    assert response.status_code == 403


def test_group_share_from_developer_is_visible_to_target_group_only(login, upload, developer, user1, user2):
    response = upload(login(developer), category="forms", target_role="user2", shared_with="group")
    assert response.status_code == 201
    file_id = response.data["fileId"]
    assert File.objects.get(pk=file_id).shared_with == "user2"

    listed_by_user1 = login(user1).get("/api/files/").data["files"]
    listed_by_user2 = login(user2).get("/api/files/").data["files"]
    assert file_id not in [f["id"] for f in listed_by_user1]
    assert file_id in [f["id"] for f in listed_by_user2]
    assert login(user1).get(f"/api/files/{file_id}/download/").status_code == 403


def test_target_role_is_ignored_for_ordinary_users(login, upload, user1):
    response = upload(login(user1), category="daily", target_role="user2", shared_with="group")
    assert response.status_code == 201
    file_obj = File.objects.get(pk=response.data["fileId"])
    assert file_obj.role_group == "user1"
    assert file_obj.shared_with == "user1"


def test_list_filters_by_category_and_folder(login, upload, user1):
    client = login(user1)
    daily = upload(client, name="a.txt", category="daily", folder_path="q1").data["fileId"]
    upload(client, name="b.txt", category="weekly")

    by_category = client.get("/api/files/", {"category": "daily"}).data["files"]
    assert [f["id"] for f in by_category] == [daily]

    by_folder = client.get("/api/files/", {"folder_path": "q1"}).data["files"]
    assert [f["id"] for f in by_folder] == [daily]

    assert len(client.get("/api/files/", {"category": "all"}).data["files"]) == 2


def test_list_includes_comment_count(login, upload, user1):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    client.post(f"/api/files/{file_id}/comments/", {"content": "first"}, format="json")
    client.post(f"/api/files/{file_id}/comments/", {"content": "second"}, format="json")

    files = client.get("/api/files/").data["files"]
    assert files[0]["comments_count"] == 2


def test_privileged_view_narrows_listing(login, upload, user1, user2, collector):
    upload(login(user1), name="one.txt", category="daily", shared_with="group")
    upload(login(user2), name="two.txt", category="forms", shared_with="group")

    client = login(collector)
    assert len(client.get("/api/files/").data["files"]) == 2
    as_user2 = client.get("/api/files/", {"view": "user2"}).data["files"]
    assert [f["original_name"] for f in as_user2] == ["two.txt"]


def test_only_uploader_or_privileged_can_delete(login, upload, user1, user1_peer, collector, uploads_dir):
    file_id = upload(login(user1), category="daily").data["fileId"]

    assert login(user1_peer).delete(f"/api/files/{file_id}/").status_code == 403
    assert File.objects.filter(pk=file_id).exists()

    response = login(collector).delete(f"/api/files/{file_id}/")
    assert response.status_code == 200
    assert not File.objects.filter(pk=file_id).exists()
    assert stored_blobs(uploads_dir) == []


def test_delete_succeeds_when_blob_is_already_gone(login, upload, user1, uploads_dir):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    (uploads_dir / File.objects.get(pk=file_id).filename).unlink()

    assert client.delete(f"/api/files/{file_id}/").status_code == 200
    assert not File.objects.filter(pk=file_id).exists()


def test_delete_unknown_file_is_404(login, user1):
    response = login(user1).delete("/api/files/999/")
    assert response.status_code == 404
    assert "error" in response.data


def test_status_change_notifies_uploader(login, upload, user1, developer):
    file_id = upload(login(user1), category="daily").data["fileId"]

    response = login(developer).put(f"/api/files/{file_id}/status/", {"status": "approved"}, format="json")
    assert response.status_code == 200
    assert response.data == {"success": True, "status": "approved"}
    assert File.objects.get(pk=file_id).status == "approved"

    note = Notification.objects.get(user=user1, type=TYPE_FILE_STATUS)
    assert note.title == "File Approved"
    assert note.message == 'Your file "report.txt" has been approved'


def test_status_change_validation_and_permissions(login, upload, user1, collector):
    file_id = upload(login(user1), category="daily").data["fileId"]

    assert login(user1).put(f"/api/files/{file_id}/status/", {"status": "approved"},
                            format="json").status_code == 403
    response = login(collector).put(f"/api/files/{file_id}/status/", {"status": "archived"}, format="json")
    assert response.status_code == 400
    assert response.data["error"] == "Invalid status"
    assert login(collector).put("/api/files/999/status/", {"status": "rejected"},
                                format="json").status_code == 404


def test_comments_round_trip_and_notify_uploader(login, upload, user1, user1_peer):
    file_id = upload(login(user1), category="daily").data["fileId"]
    peer = login(user1_peer)

    response = peer.post(f"/api/files/{file_id}/comments/", {"content": "Looks good"}, format="json")
    assert response.status_code == 201
    assert response.data["comment"]["author"] == "amy"

    comments = peer.get(f"/api/files/{file_id}/comments/").data["comments"]
    assert [c["content"] for c in comments] == ["Looks good"]

    note = Notification.objects.get(type=TYPE_FILE_COMMENT)
    assert note.user == user1
    assert note.message == 'amy commented on "report.txt"'


def test_commenting_on_own_file_does_not_notify(login, upload, user1):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    client.post(f"/api/files/{file_id}/comments/", {"content": "note to self"}, format="json")
    assert not Notification.objects.filter(type=TYPE_FILE_COMMENT).exists()


def test_empty_comment_is_rejected(login, upload, user1):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    response = client.post(f"/api/files/{file_id}/comments/", {"content": ""}, format="json")
    assert response.status_code == 400
    assert response.data["error"] == "Comment content is required"
    assert Comment.objects.count() == 0


def test_comment_access_follows_file_visibility(login, upload, user1, user2):
    file_id = upload(login(user1), category="daily", shared_with="group").data["fileId"]
    other = login(user2)
    assert other.get(f"/api/files/{file_id}/comments/").status_code == 403
    assert other.post(f"/api/files/{file_id}/comments/", {"content": "hi"}, format="json").status_code == 403


def test_preview_and_download_serve_blob(login, upload, user1):
    client = login(user1)
    file_id = upload(client, name="notes.txt", content=b"line one", category="daily").data["fileId"]

    preview = client.get(f"/api/files/{file_id}/preview/")
    assert preview.status_code == 200
    assert preview["Content-Type"].startswith("text/plain")
    assert preview["Cache-Control"] == "private, max-age=3600"
    assert preview["Content-Disposition"].startswith("inline")
    assert read_streaming(preview) == b"line one"

    download = client.get(f"/api/files/{file_id}/download/")
    assert download.status_code == 200
    assert download["Content-Disposition"] == 'attachment; filename="notes.txt"'
    assert read_streaming(download) == b"line one"


def test_download_with_missing_blob_is_404(login, upload, user1, uploads_dir):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    (uploads_dir / File.objects.get(pk=file_id).filename).unlink()

    response = client.get(f"/api/files/{file_id}/download/")
    assert response.status_code == 404
    assert response.data["error"] == "File not found on disk"


def test_profile_picture_is_served_by_name(login, user1, uploads_dir):
    client = login(user1)
    picture = SimpleUploadedFile("me.png", b"\x89PNG fake", content_type="image/png")
    response = client.put("/api/profile/picture/", {"profilePicture": picture}, format="multipart")
    assert response.status_code == 200
    url = response.data["profile_picture"]
    assert url.startswith("/api/files/profile/profile_")

    served = client.get(url)
    assert served.status_code == 200
    assert served["Content-Type"] == "image/png"
    assert read_streaming(served) == b"\x89PNG fake"


def test_profile_route_refuses_other_blobs(login, upload, user1):
    client = login(user1)
    file_id = upload(client, category="daily").data["fileId"]
    filename = File.objects.get(pk=file_id).filename
    assert client.get(f"/api/files/profile/{filename}").status_code == 404

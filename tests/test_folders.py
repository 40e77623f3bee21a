from pathlib import Path

import pytest

from files.models import File, Folder
from helpers import stored_blobs


@pytest.fixture
def make_folder(tabs):
    def _make(client, name, parent_path="", category="daily", role_group="user1"):
        return client.post("/api/folders/", {
            "name": name,
            "category": category,
            "role_group": role_group,
            "parent_path": parent_path,
        }, format="json")
    return _make


def test_create_folder_derives_path_from_parent(login, make_folder, user1):
    client = login(user1)
    root = make_folder(client, "q1")
    assert root.status_code == 201
    assert root.data["folder"]["path"] == "q1"
    assert root.data["folder"]["parent_id"] is None

    child = make_folder(client, "jan", parent_path="q1")
    assert child.status_code == 201
    assert child.data["folder"]["path"] == "q1/jan"
    assert child.data["folder"]["parent_path"] == "q1"
    assert child.data["folder"]["parent_id"] == root.data["folder"]["id"]
    assert child.data["folder"]["created_by"] == "alice"


def test_explicit_path_must_match_derived_one(login, make_folder, user1):
    client = login(user1)
    make_folder(client, "q1")
    response = client.post("/api/folders/", {
        "name": "jan", "path": "elsewhere/jan", "parent_path": "q1",
        "category": "daily", "role_group": "user1",
    }, format="json")
    assert response.status_code == 400
    assert response.data["error"] == "Path must be 'q1/jan'"


def test_duplicate_folder_is_rejected(login, make_folder, user1):
    client = login(user1)
    assert make_folder(client, "q1").status_code == 201
    response = make_folder(client, "q1")
    assert response.status_code == 400
    assert response.data["error"] == "Folder already exists"


def test_same_path_is_allowed_in_another_category(login, make_folder, user1):
    client = login(user1)
    assert make_folder(client, "q1").status_code == 201
    assert make_folder(client, "q1", category="weekly").status_code == 201


def test_missing_parent_is_rejected(login, make_folder, user1):
    response = make_folder(login(user1), "jan", parent_path="nowhere")
    assert response.status_code == 400
    assert response.data["error"] == "Parent folder does not exist"


def test_folder_name_cannot_contain_slash(login, make_folder, user1):
    response = make_folder(login(user1), "a/b")
    assert response.status_code == 400
    assert response.data["fields"]["name"]


def test_folder_needs_existing_category(login, make_folder, user1):
    response = make_folder(login(user1), "q1", category="forms")
    assert response.status_code == 400
    assert response.data["error"] == "Invalid category for this role group"


def test_ordinary_user_cannot_create_in_other_group(login, make_folder, user1):
    response = make_folder(login(user1), "q1", category="forms", role_group="user2")
    assert response.status_code == 403


def test_collector_cannot_create_folders(login, make_folder, collector):
    assert make_folder(login(collector), "q1").status_code == 403


def test_developer_can_create_in_any_group(login, make_folder, developer):
    assert make_folder(login(developer), "intake", category="forms", role_group="user2").status_code == 201


def test_list_folders_by_parent(login, make_folder, user1, user2):
    client = login(user1)
    make_folder(client, "q1")
    make_folder(client, "q2")
    make_folder(client, "jan", parent_path="q1")

    roots = client.get("/api/folders/user1/", {"category": "daily", "parent_path": ""}).data["folders"]
    assert [f["path"] for f in roots] == ["q1", "q2"]

    children = client.get("/api/folders/user1/", {"parent_path": "q1"}).data["folders"]
    assert [f["path"] for f in children] == ["q1/jan"]

    assert login(user2).get("/api/folders/user1/").status_code == 403


def test_delete_cascades_within_scope_only(login, make_folder, upload, user1, settings):
    uploads_dir = Path(settings.UPLOADS_DIR)
    client = login(user1)
    target = make_folder(client, "a").data["folder"]["id"]
    make_folder(client, "b", parent_path="a")
    make_folder(client, "ab")
    make_folder(client, "a", category="weekly")

    upload(client, name="in-a.txt", category="daily", folder_path="a")
    upload(client, name="in-ab-nested.txt", category="daily", folder_path="a/b")
    sibling = upload(client, name="in-ab.txt", category="daily", folder_path="ab").data["fileId"]
    other_category = upload(client, name="weekly.txt", category="weekly", folder_path="a").data["fileId"]

    response = client.delete(f"/api/folders/delete/{target}/")
    assert response.status_code == 200
    assert response.data["deleted_folders"] == 2
    assert response.data["deleted_files"] == 2

    remaining = set(Folder.objects.values_list("category", "path"))
    assert remaining == {("daily", "ab"), ("weekly", "a")}
    assert set(File.objects.values_list("id", flat=True)) == {sibling, other_category}
    assert sorted(File.objects.values_list("filename", flat=True)) == stored_blobs(uploads_dir)


def test_delete_skips_missing_blobs(login, make_folder, upload, user1, settings):
    client = login(user1)
    target = make_folder(client, "a").data["folder"]["id"]
    file_id = upload(client, category="daily", folder_path="a").data["fileId"]
    (Path(settings.UPLOADS_DIR) / File.objects.get(pk=file_id).filename).unlink()

    response = client.delete(f"/api/folders/delete/{target}/")
    assert response.status_code == 200
    assert response.data["deleted_files"] == 1
    assert not File.objects.exists()


def test_delete_requires_creator_or_privileged(login, make_folder, user1, user1_peer, collector):
    target = make_folder(login(user1), "a").data["folder"]["id"]

    response = login(user1_peer).delete(f"/api/folders/delete/{target}/")
    assert response.status_code == 403
    assert response.data["error"] == "Permission denied - You can only delete folders you created"

    assert login(collector).delete(f"/api/folders/delete/{target}/").status_code == 200


def test_delete_unknown_folder_is_404(login, user1):
    assert login(user1).delete("/api/folders/delete/42/").status_code == 404

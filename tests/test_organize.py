import pytest

from items.models import Note, Snippet
from organize.models import Folder, Project

pytestmark = pytest.mark.django_db


def test_project_crud(auth_client, user):
    response = auth_client.post("/api/projects", {"name": "Website", "description": "rebuild"}, format="json")
    assert response.status_code == 201
    project = response.json()
    assert project["userId"] == str(user.id)

    response = auth_client.patch(f"/api/projects/{project['id']}", {"name": "Site"}, format="json")
    assert response.json()["name"] == "Site"
    assert response.json()["description"] == "rebuild"

    assert auth_client.delete(f"/api/projects/{project['id']}").status_code == 204
    response = auth_client.get(f"/api/projects/{project['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "Project not found"


def test_project_name_required(auth_client):
    response = auth_client.post("/api/projects", {"description": "x"}, format="json")
    assert response.status_code == 400
    assert "name" in response.json()["errors"]


def test_folders_listed_by_name(auth_client):
    for name in ("zeta", "alpha", "mid"):
        auth_client.post("/api/folders", {"name": name}, format="json")
    names = [row["name"] for row in auth_client.get("/api/folders").json()]
    assert names == ["alpha", "mid", "zeta"]


def test_folders_are_owner_scoped(auth_client, other_client, user):
    folder = Folder.objects.create(user=user, name="private")
    assert other_client.get(f"/api/folders/{folder.id}").status_code == 404
    assert other_client.get("/api/folders").json() == []


def test_deleting_folder_detaches_items(auth_client, user):
    folder = Folder.objects.create(user=user, name="box")
    note = Note.objects.create(user=user, title="n", content="c", folder=folder)
    assert auth_client.delete(f"/api/folders/{folder.id}").status_code == 204
    note.refresh_from_db()
    assert note.folder_id is None


def test_deleting_project_detaches_items(auth_client, user):
    project = Project.objects.create(user=user, name="p")
    snippet = Snippet.objects.create(user=user, title="s", content="x", language="python", project=project)
    auth_client.delete(f"/api/projects/{project.id}")
    snippet.refresh_from_db()
    assert snippet.project_id is None


def test_tag_names_unique_per_user(auth_client, other_client):
    assert auth_client.post("/api/tags", {"name": "python"}, format="json").status_code == 201
    response = auth_client.post("/api/tags", {"name": "python"}, format="json")
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Tag already exists"}
    assert other_client.post("/api/tags", {"name": "python"}, format="json").status_code == 201


def test_tag_rename_to_existing_conflicts(auth_client):
    auth_client.post("/api/tags", {"name": "a"}, format="json")
    second = auth_client.post("/api/tags", {"name": "b"}, format="json").json()
    response = auth_client.patch(f"/api/tags/{second['id']}", {"name": "a"}, format="json")
    assert response.status_code == 409


def test_project_stats(auth_client, other_client, user):
    project = Project.objects.create(user=user, name="p")
    Snippet.objects.create(user=user, title="s", content="x", language="go", project=project)
    Note.objects.create(user=user, title="n1", content="c", project=project)
    Note.objects.create(user=user, title="n2", content="c", project=project)
    Note.objects.create(user=user, title="elsewhere", content="c")

    response = auth_client.get(f"/api/projects/{project.id}/stats")
    assert response.status_code == 200
    assert response.json() == {"snippets": 1, "notes": 2, "checklists": 0, "smartNotes": 0, "total": 3}

    assert other_client.get(f"/api/projects/{project.id}/stats").status_code == 404

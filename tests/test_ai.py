from datetime import timedelta
from types import SimpleNamespace

import pytest
from django.db import IntegrityError
from django.utils import timezone

from ai import views as ai_views
from ai.models import AIGeneration
from items.models import Checklist, Note, Snippet
from organize.models import Project

pytestmark = pytest.mark.django_db


def completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


@pytest.fixture
def fake_model(monkeypatch):
    calls = []

    def respond(text):
        def _chat(messages, **kwargs):
            calls.append(messages)
            return completion(text)

        monkeypatch.setattr(ai_views, "_chat", _chat)

    respond("Generated body")
    return SimpleNamespace(calls=calls, respond=respond)


@pytest.fixture
def paid_client(client_for, paid_user):
    return client_for(paid_user)


@pytest.mark.parametrize(
    "prompt,kind",
    [
        ("Write a code snippet. debounce", "snippet"),
        ("A note about Django", "note"),
        ("Shopping checklist", "checklist"),
        ("My todo list", "checklist"),
        ("New project. Build a blog", "project"),
        ("Explain recursion", "note"),
    ],
)
def test_detect_kind(prompt, kind):
    assert ai_views._detect_kind(prompt) == kind


def test_parse_prompt_extracts_title_request_and_tags():
    title, request, tags = ai_views._parse_prompt("Sorting note. Explain quicksort #Algo tags: cs, study")
    assert title == "Sorting note"
    assert request == "Explain quicksort"
    assert tags == ["algo", "cs", "study"]


def test_parse_prompt_truncates_long_title():
    title, request, _ = ai_views._parse_prompt("x" * 60)
    assert title == "x" * 50 + "..."
    assert request == "x" * 60


def test_detect_language():
    assert ai_views._detect_language("const x = 1;") == "javascript"
    assert ai_views._detect_language("def main():\n    pass") == "python"
    assert ai_views._detect_language("SELECT 1") == "sql"
    assert ai_views._detect_language("???") == "javascript"


def test_checklist_items_from_text():
    items = ai_views._checklist_items_from_text("- milk\n\n* eggs\n• bread\n")
    assert [item["text"] for item in items] == ["milk", "eggs", "bread"]
    assert all(item["completed"] is False for item in items)


def test_free_user_is_forbidden(auth_client, fake_model):
    response = auth_client.post("/api/ai/generate", {"prompt": "A note"}, format="json")
    assert response.status_code == 403
    assert response.json()["message"] == "Premium access required"


def test_generate_note(paid_client, paid_user, fake_model):
    response = paid_client.post("/api/ai/generate", {"prompt": "Django note. explain signals #web"}, format="json")
    assert response.status_code == 201
    body = response.json()
    assert body["type"] == "note"
    assert body["item"]["title"] == "Django note"
    assert body["item"]["content"] == "Generated body"
    assert body["item"]["tags"] == ["web"]
    assert Note.objects.filter(user=paid_user).count() == 1
    assert "explain signals" in fake_model.calls[0][-1]["content"]


def test_generate_snippet_detects_language(paid_client, fake_model):
    fake_model.respond("def add(a, b):\n    return a + b")
    body = paid_client.post("/api/ai/generate", {"prompt": "Code to add numbers"}, format="json").json()
    assert body["type"] == "snippet"
    assert body["item"]["language"] == "python"
    assert Snippet.objects.count() == 1


def test_generate_checklist(paid_client, fake_model):
    fake_model.respond("- pack\n- travel")
    body = paid_client.post("/api/ai/generate", {"prompt": "Trip checklist"}, format="json").json()
    assert [item["text"] for item in body["item"]["items"]] == ["pack", "travel"]
    assert Checklist.objects.count() == 1


def test_generate_project_skips_model(paid_client, fake_model):
    body = paid_client.post("/api/ai/generate", {"prompt": "Blog project. A personal blog"}, format="json").json()
    assert body["type"] == "project"
    assert body["item"]["name"] == "Blog project"
    assert body["item"]["description"] == "A personal blog"
    assert fake_model.calls == []
    assert Project.objects.count() == 1


def test_model_failure_is_bad_gateway(paid_client, monkeypatch):
    def broken(messages, **kwargs):
        raise RuntimeError("upstream down")

    monkeypatch.setattr(ai_views, "_chat", broken)
    response = paid_client.post("/api/ai/generate", {"prompt": "A note"}, format="json")
    assert response.status_code == 502
    assert response.json() == {"success": False, "message": "AI service error"}
    assert not Note.objects.exists()
    assert not AIGeneration.objects.exists()


def test_temporary_premium_grants_access(auth_client, user, fake_model):
    user.grant_temporary_premium(timezone.now() + timedelta(days=1))
    user.save()
    response = auth_client.post("/api/ai/generate", {"prompt": "A note"}, format="json")
    assert response.status_code == 201


def test_history_list_and_delete(paid_client, paid_user, other_client, fake_model):
    paid_client.post("/api/ai/generate", {"prompt": "First note"}, format="json")
    paid_client.post("/api/ai/generate", {"prompt": "Second note"}, format="json")

    history = paid_client.get("/api/ai/history").json()
    assert [row["prompt"] for row in history] == ["Second note", "First note"]

    assert other_client.delete(f"/api/ai/history/{history[0]['id']}").status_code == 404
    assert paid_client.delete(f"/api/ai/history/{history[0]['id']}").status_code == 204

    response = paid_client.delete("/api/ai/history")
    assert response.json()["deletedCount"] == 1
    assert not AIGeneration.objects.filter(user=paid_user).exists()


def test_item_is_rolled_back_when_history_write_fails(paid_client, fake_model, monkeypatch):
    def broken_create(**kwargs):
        raise IntegrityError("history insert failed")

    monkeypatch.setattr(AIGeneration.objects, "create", broken_create)
    response = paid_client.post("/api/ai/generate", {"prompt": "A note"}, format="json")
    assert response.status_code == 409
    assert not Note.objects.exists()

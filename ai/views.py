import logging
import re
import uuid

from django.conf import settings
from django.db import transaction
from openai import OpenAI
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.encoding import encode_list
from items.models import Checklist, Note, Snippet
from items.serializers import ChecklistSerializer, NoteSerializer, SnippetSerializer
from organize.models import Project
from organize.serializers import ProjectSerializer
from .models import AIGeneration
from .permissions import CanUseAI
from .serializers import AIGenerationSerializer, GenerateSerializer

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 50
DEFAULT_LANGUAGE = "javascript"

# first match wins, in this order
LANGUAGE_KEYWORDS = {
    "javascript": ["const", "let", "var", "function", "async", "await", "import", "export", "console.log"],
    "typescript": ["interface", "type", "enum", "<T>", "as const", "readonly"],
    "python": ["def", "import", "from", "class", "if __name__", "print("],
    "java": ["public class", "private", "protected", "void", "String[]", "System.out"],
    "html": ["<!DOCTYPE", "<html>", "<div>", "<body>", "<head>"],
    "css": ["{", "margin:", "padding:", "color:", "background:"],
    "sql": ["SELECT", "FROM", "WHERE", "JOIN", "GROUP BY", "ORDER BY"],
    "bash": ["#!/bin/bash", "echo", "chmod", "mkdir", "ls", "cd"],
}

HASHTAG_RE = re.compile(r"#(\w+)")
TAGS_CLAUSE_RE = re.compile(r"tags:.*\Z", re.IGNORECASE)
LIST_MARKER_RE = re.compile(r"^[-*•]\s*")


class AIServiceError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "AI service error"
    default_code = "ai_service_error"


def _get_client():
    api_key = getattr(settings, "OPENROUTER_API_KEY", None)
    base_url = getattr(settings, "OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")
    if not api_key:
        return None
    return OpenAI(api_key=api_key, base_url=base_url)


def _chat(messages, model=None, temperature=0.7, max_tokens=None):
    client = _get_client()
    if client is None:
        raise RuntimeError("OpenRouter API key missing")

    model = model or getattr(settings, "OPENROUTER_DEFAULT_MODEL", "openai/gpt-4o-mini")
    options = {"model": model, "messages": messages, "temperature": temperature}
    if max_tokens:
        options["max_tokens"] = max_tokens
    return client.chat.completions.create(**options)


def _extract_text(completion):
    if not completion or not completion.choices:
        return ""
    return (completion.choices[0].message.content or "").strip()


def _detect_kind(prompt):
    lowered = prompt.lower()
    if "snippet" in lowered or "code" in lowered:
        return "snippet"
    if "note" in lowered:
        return "note"
    if "checklist" in lowered or "todo" in lowered:
        return "checklist"
    if "project" in lowered:
        return "project"
    return "note"


def _parse_prompt(prompt):
    """
    Split an AI bar prompt into ``(title, request, tags)``.

    The title is the text before the first period. Hashtags anywhere in the
    prompt and a trailing ``tags: a, b`` clause become tags and are stripped
    from the request.
    """
    title = prompt.split(".", 1)[0].strip()
    if len(title) > TITLE_MAX_LENGTH:
        title = title[:TITLE_MAX_LENGTH] + "..."

    request = prompt.split(".", 1)[1].strip() if "." in prompt else prompt

    tags = HASHTAG_RE.findall(prompt.lower())
    clause_at = prompt.lower().find("tags:")
    if clause_at != -1:
        tags += [tag.strip() for tag in prompt[clause_at + len("tags:"):].split(",")]

    unique_tags = []
    for tag in tags:
        if tag and tag not in unique_tags:
            unique_tags.append(tag)

    request = TAGS_CLAUSE_RE.sub("", HASHTAG_RE.sub("", request)).strip()
    return title, request, unique_tags


def _detect_language(code):
    for language, keywords in LANGUAGE_KEYWORDS.items():
        if any(keyword in code for keyword in keywords):
            return language
    return DEFAULT_LANGUAGE


def _checklist_items_from_text(text):
    items = []
    for line in text.splitlines():
        line = LIST_MARKER_RE.sub("", line.strip())
        if line:
            items.append({"id": uuid.uuid4().hex, "text": line, "completed": False})
    return items


def _generate(messages, temperature, max_tokens):
    try:
        completion = _chat(messages, temperature=temperature, max_tokens=max_tokens)
    except Exception:
        logger.exception("AI request failed")
        raise AIServiceError()
    return _extract_text(completion)


def _generate_note(request_text):
    return _generate(
        [{"role": "user", "content": f"Write a detailed note about: {request_text}. Make it informative and well-structured."}],
        temperature=0.7,
        max_tokens=400,
    )


def _generate_code(request_text):
    return _generate(
        [{"role": "user", "content": f"Create a code snippet for: {request_text}. Only return the code, no explanations."}],
        temperature=0.5,
        max_tokens=500,
    )


def _generate_checklist(request_text):
    return _generate(
        [
            {
                "role": "user",
                "content": (
                    f"Create a checklist for: {request_text}. Format as a list with each item on a new line. "
                    "Only include the items, no explanations or numbering."
                ),
            }
        ],
        temperature=0.7,
        max_tokens=350,
    )


class GenerateItemView(APIView):
    """Create a snippet, note, checklist or project from a single free-text prompt."""

    permission_classes = [IsAuthenticated, CanUseAI]

    def post(self, request):
        serializer = GenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        prompt = serializer.validated_data["prompt"]

        kind = _detect_kind(prompt)
        title, request_text, tags = _parse_prompt(prompt)
        title = title or f"AI {kind}"
        context = {"request": request}

        # the model call stays outside the transaction
        if kind == "project":
            response_text = request_text
        elif kind == "snippet":
            response_text = _generate_code(request_text)
        elif kind == "checklist":
            response_text = _generate_checklist(request_text)
        else:
            response_text = _generate_note(request_text)

        with transaction.atomic():
            item, serializer_class = self.create_item(kind, title, request_text, response_text, tags)
            AIGeneration.objects.create(user=request.user, kind=kind, prompt=prompt, response_text=response_text)

        logger.info("AI %s %s generated for %s", kind, item.pk, request.user.pk)
        data = serializer_class(item, context=context).data
        return Response({"type": kind, "item": data}, status=status.HTTP_201_CREATED)

    def create_item(self, kind, title, request_text, response_text, tags):
        user = self.request.user
        if kind == "project":
            return Project.objects.create(user=user, name=title, description=request_text), ProjectSerializer
        if kind == "snippet":
            snippet = Snippet.objects.create(
                user=user,
                title=title,
                content=response_text,
                language=_detect_language(response_text),
                description="",
                tags=encode_list(tags),
            )
            return snippet, SnippetSerializer
        if kind == "checklist":
            checklist = Checklist.objects.create(
                user=user,
                title=title,
                items=encode_list(_checklist_items_from_text(response_text)),
                tags=encode_list(tags),
            )
            return checklist, ChecklistSerializer
        note = Note.objects.create(user=user, title=title, content=response_text, tags=encode_list(tags))
        return note, NoteSerializer


class AIHistoryView(ListAPIView):
    """List the caller's generations, or clear all of them with DELETE."""

    permission_classes = [IsAuthenticated]
    serializer_class = AIGenerationSerializer

    def get_queryset(self):
        return AIGeneration.objects.filter(user=self.request.user).order_by("-created_at", "-id")

    def delete(self, request):
        deleted_count, _ = AIGeneration.objects.filter(user=request.user).delete()
        return Response(
            {
                "message": f"Successfully deleted {deleted_count} history items.",
                "deletedCount": deleted_count,
            }
        )


class AIHistoryItemView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request, id):
        deleted, _ = AIGeneration.objects.filter(id=id, user=request.user).delete()
        if not deleted:
            raise NotFound("History item not found")
        return Response(status=status.HTTP_204_NO_CONTENT)


class AiApiIndexView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(
            {
                "generate": "/api/ai/generate",
                "history": "/api/ai/history",
                "historyItem": "/api/ai/history/<id>",
            }
        )

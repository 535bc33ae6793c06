from typing import NamedTuple

from .models import Checklist, Note, SmartNote, Snippet
from .serializers import ChecklistSerializer, NoteSerializer, SmartNoteSerializer, SnippetSerializer


class ContentType(NamedTuple):
    path: str
    key: str
    model: type
    serializer_class: type
    label: str

    @property
    def not_found_message(self):
        return f"{self.label} not found"


CONTENT_TYPES = (
    ContentType("snippets", "snippets", Snippet, SnippetSerializer, "Snippet"),
    ContentType("notes", "notes", Note, NoteSerializer, "Note"),
    ContentType("checklists", "checklists", Checklist, ChecklistSerializer, "Checklist"),
    ContentType("smart-notes", "smartNotes", SmartNote, SmartNoteSerializer, "Smart note"),
)

import uuid

from rest_framework import serializers

from core.encoding import decode_list
from core.fields import EpochMillisecondsField, JSONListTextField, TagListField
from organize.models import Folder, Project
from .models import Checklist, Note, SmartNote, Snippet


class ContentItemSerializer(serializers.ModelSerializer):
    """
    Wire shape shared by snippets, notes, checklists and smart notes.

    ``folderId`` and ``projectId`` only accept groupings owned by the
    requesting user. Sending ``null`` detaches the item.
    """

    tags = TagListField(required=False)
    folderId = serializers.PrimaryKeyRelatedField(
        source="folder", queryset=Folder.objects.none(), required=False, allow_null=True
    )
    projectId = serializers.PrimaryKeyRelatedField(
        source="project", queryset=Project.objects.none(), required=False, allow_null=True
    )
    userId = serializers.UUIDField(source="user_id", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)
    updatedAt = EpochMillisecondsField(source="updated_at", read_only=True)

    common_fields = ["id", "title", "tags", "folderId", "projectId", "userId", "createdAt", "updatedAt"]

    def get_fields(self):
        fields = super().get_fields()
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            fields["folderId"].queryset = Folder.objects.filter(user=user)
            fields["projectId"].queryset = Project.objects.filter(user=user)
        return fields


class SnippetSerializer(ContentItemSerializer):
    class Meta:
        model = Snippet
        fields = ContentItemSerializer.common_fields + ["content", "language", "description"]
        read_only_fields = ["id"]


class NoteSerializer(ContentItemSerializer):
    class Meta:
        model = Note
        fields = ContentItemSerializer.common_fields + ["content"]
        read_only_fields = ["id"]


class ChecklistItemSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, max_length=64)
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)
    completed = serializers.BooleanField(default=False)

    def validate(self, attrs):
        if not attrs.get("id"):
            attrs["id"] = uuid.uuid4().hex
        return dict(attrs)


class ChecklistItemsField(JSONListTextField):
    def __init__(self, **kwargs):
        kwargs.setdefault("child", ChecklistItemSerializer())
        super().__init__(**kwargs)

    def to_representation(self, value):
        # stored rows may hold anything; only well-formed entries go out
        return [
            {
                "id": str(entry.get("id", "")),
                "text": str(entry.get("text", "")),
                "completed": entry.get("completed") is True,
            }
            for entry in decode_list(value)
            if isinstance(entry, dict)
        ]


class ChecklistSerializer(ContentItemSerializer):
    items = ChecklistItemsField(required=False)

    class Meta:
        model = Checklist
        fields = ContentItemSerializer.common_fields + ["items"]
        read_only_fields = ["id"]


class SmartNoteSerializer(ContentItemSerializer):
    class Meta:
        model = SmartNote
        fields = ContentItemSerializer.common_fields + ["content"]
        read_only_fields = ["id"]

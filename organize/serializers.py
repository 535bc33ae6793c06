from rest_framework import serializers

from core.exceptions import Conflict
from core.fields import EpochMillisecondsField
from .models import Folder, Project, Tag


class ProjectSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source="user_id", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)
    updatedAt = EpochMillisecondsField(source="updated_at", read_only=True)

    class Meta:
        model = Project
        fields = ["id", "name", "description", "userId", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class FolderSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source="user_id", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)

    class Meta:
        model = Folder
        fields = ["id", "name", "userId", "createdAt"]
        read_only_fields = ["id"]


class TagSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source="user_id", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)
    updatedAt = EpochMillisecondsField(source="updated_at", read_only=True)

    class Meta:
        model = Tag
        fields = ["id", "name", "description", "userId", "createdAt", "updatedAt"]
        read_only_fields = ["id"]

    def validate_name(self, value):
        user = self.context["request"].user
        existing = Tag.objects.filter(user=user, name=value)
        if self.instance is not None:
            existing = existing.exclude(pk=self.instance.pk)
        if existing.exists():
            raise Conflict("Tag already exists")
        return value

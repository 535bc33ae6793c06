from rest_framework import serializers

from core.fields import EpochMillisecondsField
from .models import AIGeneration


class GenerateSerializer(serializers.Serializer):
    prompt = serializers.CharField(max_length=4000)


class AIGenerationSerializer(serializers.ModelSerializer):
    responseText = serializers.CharField(source="response_text", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)

    class Meta:
        model = AIGeneration
        fields = ["id", "kind", "prompt", "responseText", "createdAt"]
        read_only_fields = fields

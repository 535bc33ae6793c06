from django.conf import settings
from rest_framework import serializers

from core.fields import EpochMillisecondsField
from .models import PremiumRequest


class PremiumRequestSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source="user_id", read_only=True)
    userEmail = serializers.EmailField(source="user_email", read_only=True)
    requestedFeature = serializers.CharField(
        source="requested_feature", required=False, allow_null=True, allow_blank=True, max_length=255
    )
    reviewedBy = serializers.UUIDField(source="reviewed_by_id", read_only=True)
    reviewNotes = serializers.CharField(source="review_notes", read_only=True)
    approvalStartDate = EpochMillisecondsField(source="approval_start_date", read_only=True)
    approvalEndDate = EpochMillisecondsField(source="approval_end_date", read_only=True)
    approvalDuration = serializers.IntegerField(source="approval_duration", read_only=True)
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)
    updatedAt = EpochMillisecondsField(source="updated_at", read_only=True)

    class Meta:
        model = PremiumRequest
        fields = [
            "id",
            "userId",
            "userEmail",
            "reason",
            "requestedFeature",
            "status",
            "reviewedBy",
            "reviewNotes",
            "approvalStartDate",
            "approvalEndDate",
            "approvalDuration",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "status"]


class PremiumReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[PremiumRequest.STATUS_APPROVED, PremiumRequest.STATUS_REJECTED])
    approvalDuration = serializers.IntegerField(required=False, min_value=1)
    reviewNotes = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_approvalDuration(self, value):
        if value > settings.PREMIUM_MAX_DAYS:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {settings.PREMIUM_MAX_DAYS}.")
        return value

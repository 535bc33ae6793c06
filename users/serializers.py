from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied

from core.exceptions import Conflict
from core.fields import EpochMillisecondsField
from .models import ROLE_ADMIN, ROLE_FREE, User, normalize_email

ADMIN_ONLY_FIELDS = (
    "role",
    "is_admin",
    "temporary_premium_access",
    "temporary_premium_expiry",
)


class UserSerializer(serializers.ModelSerializer):
    displayName = serializers.CharField(source="display_name", read_only=True)
    photoURL = serializers.CharField(source="photo_url", read_only=True)
    isAdmin = serializers.BooleanField(source="is_admin", read_only=True)
    temporaryPremiumAccess = serializers.BooleanField(source="temporary_premium_access", read_only=True)
    temporaryPremiumExpiry = EpochMillisecondsField(source="temporary_premium_expiry", read_only=True)
    effectiveRole = serializers.SerializerMethodField()
    hasPremium = serializers.SerializerMethodField()
    createdAt = EpochMillisecondsField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "displayName",
            "photoURL",
            "role",
            "isAdmin",
            "settings",
            "temporaryPremiumAccess",
            "temporaryPremiumExpiry",
            "effectiveRole",
            "hasPremium",
            "createdAt",
        ]
        read_only_fields = ["id", "email", "role", "settings"]

    def get_effectiveRole(self, obj):
        return obj.effective_role()

    def get_hasPremium(self, obj):
        return obj.has_premium()


class UserUpdateSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(max_length=255, required=False)
    displayName = serializers.CharField(
        source="display_name", max_length=255, required=False, allow_null=True, allow_blank=True
    )
    photoURL = serializers.CharField(source="photo_url", required=False, allow_null=True, allow_blank=True)
    settings = serializers.DictField(required=False)
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES, required=False)
    isAdmin = serializers.BooleanField(source="is_admin", required=False)
    temporaryPremiumAccess = serializers.BooleanField(source="temporary_premium_access", required=False)
    temporaryPremiumExpiry = EpochMillisecondsField(
        source="temporary_premium_expiry", required=False, allow_null=True
    )

    class Meta:
        model = User
        fields = [
            "email",
            "displayName",
            "photoURL",
            "settings",
            "role",
            "isAdmin",
            "temporaryPremiumAccess",
            "temporaryPremiumExpiry",
        ]

    def validate_email(self, value):
        email = normalize_email(value)
        if User.objects.filter(email=email).exclude(pk=self.instance.pk).exists():
            raise Conflict("Email is already in use")
        return email

    def validate_settings(self, value):
        theme = value.get("theme")
        if theme is not None and not isinstance(theme, str):
            raise serializers.ValidationError("theme must be a string")
        font_size = value.get("fontSize")
        if font_size is not None and (isinstance(font_size, bool) or not isinstance(font_size, int) or font_size <= 0):
            raise serializers.ValidationError("fontSize must be a positive integer")
        return value

    def validate(self, attrs):
        request = self.context["request"]
        if not request.user.is_admin and any(field in attrs for field in ADMIN_ONLY_FIELDS):
            raise PermissionDenied("Only admins can change roles or premium access")
        return attrs

    def update(self, instance, validated_data):
        settings_patch = validated_data.pop("settings", None)
        role = validated_data.pop("role", None)
        is_admin = validated_data.pop("is_admin", None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)

        if settings_patch is not None:
            merged = dict(instance.settings or {})
            merged.update(settings_patch)
            instance.settings = merged

        # role and is_admin always move together
        if role is not None:
            instance.set_role(role)
        elif is_admin is not None:
            if is_admin:
                instance.set_role(ROLE_ADMIN)
            elif instance.role == ROLE_ADMIN:
                instance.set_role(ROLE_FREE)
            else:
                instance.is_admin = False

        instance.save()
        return instance

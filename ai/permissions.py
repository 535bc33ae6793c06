from rest_framework.permissions import BasePermission


class CanUseAI(BasePermission):
    """AI generation is a premium feature: paid, admin or unexpired temporary premium."""

    message = "Premium access required"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.has_premium())

from rest_framework.permissions import BasePermission


class IsOwner(BasePermission):
    """
    Object-level check that the row belongs to the requesting user.
    Querysets are already filtered by owner; this guards views that are not.
    """

    def has_object_permission(self, request, view, obj):
        if hasattr(obj, "user_id"):
            return obj.user_id == request.user.id
        return False


class IsAdmin(BasePermission):
    message = "Admin access required"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)

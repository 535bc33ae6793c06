import logging

from rest_framework import generics, status
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdmin
from .models import User
from .serializers import UserSerializer, UserUpdateSerializer

logger = logging.getLogger(__name__)


class UserListView(generics.ListAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated, IsAdmin]

    def get_queryset(self):
        return User.objects.order_by("-created_at")


class UserDetailView(APIView):
    """Users manage their own account; admins manage everyone's."""

    permission_classes = [IsAuthenticated]

    def _get_target(self, request, pk):
        if pk != request.user.pk and not request.user.is_admin:
            raise PermissionDenied("You do not have permission to access this user")
        try:
            return User.objects.get(pk=pk)
        except User.DoesNotExist:
            raise NotFound("User not found")

    def get(self, request, pk):
        user = self._get_target(request, pk)
        return Response(UserSerializer(user).data)

    def patch(self, request, pk):
        user = self._get_target(request, pk)
        serializer = UserUpdateSerializer(user, data=request.data, partial=True, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("User %s updated by %s", user.pk, request.user.pk)
        return Response(UserSerializer(user).data)

    def delete(self, request, pk):
        user = self._get_target(request, pk)
        try:
            user.delete()
        except Exception:
            logger.exception("Failed to delete user account")
            return Response(
                {"success": False, "message": "We could not delete this account right now. Please try again later."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        logger.info("User %s deleted by %s", pk, request.user.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

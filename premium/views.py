import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import generics, status
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import Conflict
from .models import PremiumRequest
from .serializers import PremiumRequestSerializer, PremiumReviewSerializer

logger = logging.getLogger(__name__)


class PremiumRequestListCreateView(generics.ListCreateAPIView):
    serializer_class = PremiumRequestSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = PremiumRequest.objects.order_by("-created_at")
        if self.request.user.is_admin:
            return queryset
        return queryset.filter(user=self.request.user)

    def perform_create(self, serializer):
        user = self.request.user
        with transaction.atomic():
            # serialise submissions per user on the user row
            get_user_model().objects.select_for_update().filter(pk=user.pk).first()
            if PremiumRequest.objects.filter(user=user, status=PremiumRequest.STATUS_PENDING).exists():
                raise Conflict("You already have a pending premium request")
            premium_request = serializer.save(user=user, user_email=user.email)
        logger.info("Premium request %s submitted by %s", premium_request.pk, user.pk)


class PremiumRequestDetailView(generics.GenericAPIView):
    """
    Owners may read their request. Reviewing and deleting are admin only.
    """

    serializer_class = PremiumRequestSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "patch", "delete", "head", "options"]

    def get_object(self):
        try:
            premium_request = PremiumRequest.objects.select_related("user").get(pk=self.kwargs["pk"])
        except PremiumRequest.DoesNotExist:
            raise NotFound("Premium request not found")
        user = self.request.user
        if not user.is_admin and premium_request.user_id != user.id:
            raise NotFound("Premium request not found")
        return premium_request

    def require_admin(self):
        if not self.request.user.is_admin:
            raise PermissionDenied("Admin access required")

    def get(self, request, pk):
        return Response(self.get_serializer(self.get_object()).data)

    def patch(self, request, pk):
        self.require_admin()
        premium_request = self.get_object()
        review = PremiumReviewSerializer(data=request.data)
        review.is_valid(raise_exception=True)
        if not premium_request.is_pending:
            raise Conflict(f"Premium request already {premium_request.status}")

        notes = review.validated_data.get("reviewNotes")
        if review.validated_data["status"] == PremiumRequest.STATUS_APPROVED:
            days = review.validated_data.get("approvalDuration", settings.PREMIUM_DEFAULT_DAYS)
            premium_request.approve(request.user, days, notes)
            logger.info(
                "Premium request %s approved by %s for %s days", premium_request.pk, request.user.pk, days
            )
        else:
            premium_request.reject(request.user, notes)
            logger.info("Premium request %s rejected by %s", premium_request.pk, request.user.pk)
        return Response(self.get_serializer(premium_request).data)

    def delete(self, request, pk):
        self.require_admin()
        self.get_object().delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

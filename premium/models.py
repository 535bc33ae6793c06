import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models, transaction
from django.utils import timezone

from core.exceptions import Conflict


class PremiumRequest(models.Model):
    STATUS_PENDING = "pending"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"
    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="premium_requests")
    user_email = models.EmailField(max_length=255)
    reason = models.TextField()
    requested_feature = models.CharField(max_length=255, null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="reviewed_premium_requests",
    )
    review_notes = models.TextField(null=True, blank=True)
    approval_start_date = models.DateTimeField(null=True, blank=True)
    approval_end_date = models.DateTimeField(null=True, blank=True)
    approval_duration = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.user_email} ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING

    def _lock_pending(self):
        """Reload this row under a lock; only a pending request may be reviewed."""
        locked = PremiumRequest.objects.select_for_update().select_related("user").get(pk=self.pk)
        if locked.status != self.STATUS_PENDING:
            raise Conflict(f"Premium request already {locked.status}")
        return locked

    def approve(self, reviewer, days, notes=None, now=None):
        """Grant the requester premium access for ``days`` days starting now."""
        start = now or timezone.now()
        end = start + timedelta(days=days)
        with transaction.atomic():
            locked = self._lock_pending()
            locked.status = self.STATUS_APPROVED
            locked.reviewed_by = reviewer
            locked.review_notes = notes
            locked.approval_start_date = start
            locked.approval_end_date = end
            locked.approval_duration = days
            locked.save()

            user = locked.user
            user.grant_temporary_premium(end)
            user.save(update_fields=["temporary_premium_access", "temporary_premium_expiry"])
        self.refresh_from_db()
        return self

    def reject(self, reviewer, notes=None):
        with transaction.atomic():
            locked = self._lock_pending()
            locked.status = self.STATUS_REJECTED
            locked.reviewed_by = reviewer
            locked.review_notes = notes
            locked.save()
        self.refresh_from_db()
        return self

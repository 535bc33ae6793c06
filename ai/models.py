from django.conf import settings
from django.db import models


class AIGeneration(models.Model):
    KIND_CHOICES = (
        ("snippet", "Snippet"),
        ("note", "Note"),
        ("checklist", "Checklist"),
        ("project", "Project"),
    )

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ai_generations")
    kind = models.CharField(max_length=20, choices=KIND_CHOICES)
    prompt = models.TextField()
    response_text = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

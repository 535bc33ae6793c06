import uuid

from django.conf import settings
from django.db import models

from core.encoding import decode_list


class ContentItem(models.Model):
    """Fields shared by every content type. ``tags`` holds a JSON-encoded list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="%(class)ss")
    title = models.CharField(max_length=255)
    tags = models.TextField(default="[]")
    folder = models.ForeignKey(
        "organize.Folder", null=True, blank=True, on_delete=models.SET_NULL, related_name="%(class)ss"
    )
    project = models.ForeignKey(
        "organize.Project", null=True, blank=True, on_delete=models.SET_NULL, related_name="%(class)ss"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    search_fields = ("title",)

    class Meta:
        abstract = True
        ordering = ["-updated_at"]

    def __str__(self):
        return self.title

    @property
    def tag_list(self):
        return [str(tag) for tag in decode_list(self.tags)]

    def has_tag(self, name):
        return name in self.tag_list


class Snippet(ContentItem):
    content = models.TextField()
    language = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)

    search_fields = ("title", "content", "description")


class Note(ContentItem):
    content = models.TextField()

    search_fields = ("title", "content")


class Checklist(ContentItem):
    # JSON-encoded list of {"id", "text", "completed"}
    items = models.TextField(default="[]")


class SmartNote(ContentItem):
    # rich-text HTML
    content = models.TextField(blank=True, default="")

    search_fields = ("title", "content")

from django.contrib import admin

from .models import Checklist, Note, SmartNote, Snippet


@admin.register(Snippet)
class SnippetAdmin(admin.ModelAdmin):
    list_display = ("title", "language", "user", "updated_at")
    search_fields = ("title", "content")


@admin.register(Note, Checklist, SmartNote)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "updated_at")
    search_fields = ("title",)

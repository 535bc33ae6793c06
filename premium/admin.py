from django.contrib import admin

from .models import PremiumRequest


@admin.register(PremiumRequest)
class PremiumRequestAdmin(admin.ModelAdmin):
    list_display = ("user_email", "status", "approval_duration", "created_at")
    list_filter = ("status",)
    search_fields = ("user_email", "reason")

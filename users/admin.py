from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "role", "is_admin", "temporary_premium_expiry", "created_at")
    list_filter = ("role", "is_admin")
    search_fields = ("email", "display_name")
    exclude = ("password",)

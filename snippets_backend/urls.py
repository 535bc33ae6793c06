from django.contrib import admin
from django.urls import path, include

from core.views import HealthView, RootView

handler404 = "core.views.route_not_found"
handler500 = "core.views.server_error"

urlpatterns = [
    path("", RootView.as_view()),
    path("admin/", admin.site.urls),
    path("api/health", HealthView.as_view()),
    path("api/auth", include("authapi.urls")),
    path("api/users", include("users.urls")),
    path("api/ai", include("ai.urls")),
    path("api/premium-requests", include("premium.urls")),
    path("api/", include("organize.urls")),
    path("api/", include("items.urls")),
]

from django.urls import path

from .views import PremiumRequestDetailView, PremiumRequestListCreateView

urlpatterns = [
    path("", PremiumRequestListCreateView.as_view()),
    path("/<uuid:pk>", PremiumRequestDetailView.as_view()),
]

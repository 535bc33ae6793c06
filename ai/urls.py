from django.urls import path

from .views import AiApiIndexView, AIHistoryItemView, AIHistoryView, GenerateItemView

urlpatterns = [
    path("", AiApiIndexView.as_view()),
    path("/generate", GenerateItemView.as_view()),
    path("/history", AIHistoryView.as_view()),
    path("/history/<int:id>", AIHistoryItemView.as_view()),
]

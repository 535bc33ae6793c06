from django.urls import path
from .views import (
    ProjectListCreateView,
    ProjectDetailView,
    ProjectStatsView,
    FolderListCreateView,
    FolderDetailView,
    TagListCreateView,
    TagDetailView,
)

urlpatterns = [
    path("projects", ProjectListCreateView.as_view()),
    path("projects/<uuid:pk>", ProjectDetailView.as_view()),
    path("projects/<uuid:pk>/stats", ProjectStatsView.as_view()),
    path("folders", FolderListCreateView.as_view()),
    path("folders/<uuid:pk>", FolderDetailView.as_view()),
    path("tags", TagListCreateView.as_view()),
    path("tags/<uuid:pk>", TagDetailView.as_view()),
]

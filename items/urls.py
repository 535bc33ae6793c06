from django.urls import path

from .registry import CONTENT_TYPES
from .views import FolderItemListView, ItemDetailView, ItemListCreateView, ProjectItemListView, SearchView

urlpatterns = [
    path("search", SearchView.as_view(), name="search"),
]

for content_type in CONTENT_TYPES:
    options = {
        "model": content_type.model,
        "serializer_class": content_type.serializer_class,
        "not_found_message": content_type.not_found_message,
    }
    urlpatterns += [
        path(content_type.path, ItemListCreateView.as_view(**options), name=f"{content_type.key}-list"),
        path(f"{content_type.path}/<uuid:pk>", ItemDetailView.as_view(**options), name=f"{content_type.key}-detail"),
        path(
            f"folders/<uuid:folder_id>/{content_type.path}",
            FolderItemListView.as_view(**options),
            name=f"folder-{content_type.key}",
        ),
        path(
            f"projects/<uuid:project_id>/{content_type.path}",
            ProjectItemListView.as_view(**options),
            name=f"project-{content_type.key}",
        ),
    ]

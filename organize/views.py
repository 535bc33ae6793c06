import logging

from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.mixins import OwnedObjectMixin
from core.permissions import IsOwner
from items.registry import CONTENT_TYPES
from .models import Folder, Project, Tag
from .serializers import FolderSerializer, ProjectSerializer, TagSerializer

logger = logging.getLogger(__name__)

DETAIL_METHODS = ["get", "patch", "delete", "head", "options"]


class ProjectListCreateView(OwnedObjectMixin, generics.ListCreateAPIView):
    model = Project
    serializer_class = ProjectSerializer
    permission_classes = [IsAuthenticated]

    def perform_create(self, serializer):
        project = serializer.save(user=self.request.user)
        logger.info("Project %s created by %s", project.pk, self.request.user.pk)


class ProjectDetailView(OwnedObjectMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Project
    serializer_class = ProjectSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    not_found_message = "Project not found"
    http_method_names = DETAIL_METHODS


class ProjectStatsView(OwnedObjectMixin, generics.GenericAPIView):
    """Per-type item counts for one project."""

    model = Project
    permission_classes = [IsAuthenticated, IsOwner]
    not_found_message = "Project not found"

    def get(self, request, pk):
        project = self.get_object()
        stats = {
            content_type.key: content_type.model.objects.filter(user=request.user, project=project).count()
            for content_type in CONTENT_TYPES
        }
        stats["total"] = sum(stats.values())
        return Response(stats)


class FolderListCreateView(OwnedObjectMixin, generics.ListCreateAPIView):
    model = Folder
    ordering = ("name", "created_at")
    serializer_class = FolderSerializer
    permission_classes = [IsAuthenticated]

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)


class FolderDetailView(OwnedObjectMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Folder
    ordering = ("name", "created_at")
    serializer_class = FolderSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    not_found_message = "Folder not found"
    http_method_names = DETAIL_METHODS


class TagListCreateView(OwnedObjectMixin, generics.ListCreateAPIView):
    model = Tag
    ordering = ("name",)
    serializer_class = TagSerializer
    permission_classes = [IsAuthenticated]

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)


class TagDetailView(OwnedObjectMixin, generics.RetrieveUpdateDestroyAPIView):
    model = Tag
    ordering = ("name",)
    serializer_class = TagSerializer
    permission_classes = [IsAuthenticated, IsOwner]
    not_found_message = "Tag not found"
    http_method_names = DETAIL_METHODS

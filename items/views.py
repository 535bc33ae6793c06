import json
import logging

from django.db.models import Q
from rest_framework import generics
from rest_framework.exceptions import NotFound, ParseError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.mixins import OwnedObjectMixin
from core.permissions import IsOwner
from organize.models import Folder, Project
from .registry import CONTENT_TYPES

logger = logging.getLogger(__name__)


class ItemListCreateView(OwnedObjectMixin, generics.ListCreateAPIView):
    """
    List or create items of one content type.
    The model and serializer are supplied through ``as_view()`` in urls.py.
    """

    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = super().get_queryset()
        tag = (self.request.query_params.get("tag") or "").strip()
        if not tag:
            return queryset
        # the column is JSON text, so narrow in SQL then match exactly
        candidates = queryset.filter(tags__contains=json.dumps(tag))
        matching = [item.pk for item in candidates if item.has_tag(tag)]
        return queryset.filter(pk__in=matching)

    def perform_create(self, serializer):
        item = serializer.save(user=self.request.user)
        logger.info("%s %s created by %s", self.model.__name__, item.pk, self.request.user.pk)


class ItemDetailView(OwnedObjectMixin, generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAuthenticated, IsOwner]
    http_method_names = ["get", "patch", "delete", "head", "options"]

    def perform_destroy(self, instance):
        logger.info("%s %s deleted by %s", self.model.__name__, instance.pk, self.request.user.pk)
        instance.delete()


class GroupedItemListView(OwnedObjectMixin, generics.ListAPIView):
    """Items of one content type inside a folder or project the caller owns."""

    permission_classes = [IsAuthenticated]
    group_model = None
    group_field = None

    def get_group(self):
        group_id = self.kwargs[f"{self.group_field}_id"]
        try:
            return self.group_model.objects.get(pk=group_id, user=self.request.user)
        except self.group_model.DoesNotExist:
            raise NotFound(f"{self.group_model.__name__} not found")

    def get_queryset(self):
        group = self.get_group()
        return super().get_queryset().filter(**{self.group_field: group})


class FolderItemListView(GroupedItemListView):
    group_model = Folder
    group_field = "folder"


class ProjectItemListView(GroupedItemListView):
    group_model = Project
    group_field = "project"


class SearchView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        query = (request.query_params.get("q") or "").strip()
        if not query:
            raise ParseError("Search query is required")

        results = {}
        for content_type in CONTENT_TYPES:
            model = content_type.model
            condition = Q()
            for field in model.search_fields:
                condition |= Q(**{f"{field}__icontains": query})
            queryset = model.objects.filter(user=request.user).filter(condition).order_by("-updated_at")
            serializer = content_type.serializer_class(queryset, many=True, context={"request": request})
            results[content_type.key] = serializer.data
        return Response(results)

from django.http import Http404
from rest_framework.exceptions import NotFound


class OwnedObjectMixin:
    """
    Generic-view mixin restricting the queryset to the requesting user's rows.
    Rows owned by someone else are reported exactly like missing rows.
    """

    model = None
    ordering = ("-updated_at",)
    not_found_message = "Not found"

    def get_queryset(self):
        return self.model.objects.filter(user=self.request.user).order_by(*self.ordering)

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)

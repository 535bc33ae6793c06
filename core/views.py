from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(
            {
                "success": True,
                "message": "API is running",
                "timestamp": timezone.now().isoformat(),
            }
        )


class RootView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(
            {
                "success": True,
                "message": settings.SERVICE_NAME,
                "version": settings.SERVICE_VERSION,
                "environment": settings.ENVIRONMENT,
                "timestamp": timezone.now().isoformat(),
            }
        )


def route_not_found(request, exception=None):
    return JsonResponse(
        {"success": False, "message": f"Route {request.path} not found"},
        status=404,
    )


def server_error(request):
    return JsonResponse({"success": False, "message": "Internal Server Error"}, status=500)

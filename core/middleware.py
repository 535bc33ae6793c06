import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """One log line per API request: method, path, status and duration."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        if request.path.startswith("/api"):
            duration_ms = (time.monotonic() - started) * 1000
            status_code = response.status_code
            if status_code >= 500:
                level = logging.ERROR
            elif status_code >= 400:
                level = logging.WARNING
            else:
                level = logging.INFO
            logger.log(level, "%s %s %s - %dms", request.method, request.path, status_code, duration_ms)
        return response

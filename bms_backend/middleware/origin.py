"""
Origin allow-list middleware.

Runs ahead of django-cors-headers and refuses cross-origin requests from
sites outside CORS_ALLOWED_ORIGINS before any view is reached.
"""
import logging
from urllib.parse import urlsplit

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware:
    """
    Reject requests whose Origin header is not in CORS_ALLOWED_ORIGINS.

    Requests without an Origin header (server-to-server, curl, same-origin
    GETs) and requests whose Origin matches the host being served (the Django
    admin posting to itself) pass through untouched.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        origin = request.META.get('HTTP_ORIGIN')
        if not origin or self.is_allowed(request, origin):
            return self.get_response(request)

        logger.warning(
            f"Rejected request to {request.path} from disallowed origin {origin} "
            f"({request.META.get('REMOTE_ADDR', 'unknown')})"
        )
        return JsonResponse({'message': 'Not allowed by CORS'}, status=403)

    def is_allowed(self, request, origin):
        allowed = {o.rstrip('/') for o in getattr(settings, 'CORS_ALLOWED_ORIGINS', [])}
        if origin.rstrip('/') in allowed:
            return True
        return urlsplit(origin).netloc == request.get_host()

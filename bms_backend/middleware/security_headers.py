from django.conf import settings


class SecurityHeadersMiddleware:
    """Add the common security headers to every API response."""
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        response.setdefault('X-Content-Type-Options', 'nosniff')
        response.setdefault('X-Frame-Options', getattr(settings, 'X_FRAME_OPTIONS', 'DENY'))
        response.setdefault('Referrer-Policy', getattr(settings, 'SECURE_REFERRER_POLICY', 'same-origin'))
        response.setdefault('Permissions-Policy', 'camera=(), microphone=(), geolocation=()')

        # The API only serves JSON; the admin site needs its own static assets
        if request.path.startswith('/api/'):
            response.setdefault('Content-Security-Policy', "default-src 'none'; frame-ancestors 'none'")

        if not settings.DEBUG and getattr(settings, 'SECURE_HSTS_SECONDS', 0):
            response.setdefault('Strict-Transport-Security', f"max-age={settings.SECURE_HSTS_SECONDS}; includeSubDomains")

        return response

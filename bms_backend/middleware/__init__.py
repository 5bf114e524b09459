"""Middleware package for bms_backend.

Re-exports the middleware classes so settings can reference them as
`bms_backend.middleware.<ClassName>`.
"""

from .security_headers import SecurityHeadersMiddleware
from .origin import OriginAllowListMiddleware

__all__ = [
    'security_headers',
    'origin',
    'SecurityHeadersMiddleware',
    'OriginAllowListMiddleware',
]

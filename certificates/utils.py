import random

from django.conf import settings
from django.utils import timezone

CERTIFICATE_PREFIX = 'BMS'


def course_code(course_name):
    """Initials of the course name, upper-cased, at most two letters.

    "Web Development" -> "WD". A one-word course yields a single letter; the
    code is never padded.
    """
    initials = ''.join(word[0] for word in (course_name or '').split())
    return initials.upper()[:2]


def generate_certificate_id(course_name, now=None, rng=None):
    """BMS-<year>-<course code>-<six random digits>, e.g. BMS-2024-WD-000123.

    No uniqueness retry happens here; a clash is reported when the certificate
    is saved.
    """
    year = (now or timezone.now()).year
    number = (rng or random).randint(0, 999999)
    return f"{CERTIFICATE_PREFIX}-{year}-{course_code(course_name)}-{number:06d}"


def build_credential_url(certificate_id):
    base = getattr(settings, 'CERTIFICATE_VERIFICATION_BASE_URL', '').rstrip('/')
    return f"{base}/verify/{certificate_id}"

from django.db import models
from django.utils import timezone


class OfferQuerySet(models.QuerySet):
    def currently_active(self, now=None):
        """Switched on and not yet past `valid_until` at `now`."""
        return self.filter(is_active=True, valid_until__gte=now or timezone.now())


class Offer(models.Model):
    """Promotional offer shown on the public offers page.

    - `discount`: free-form label such as "25%" or "$100 off".
    - `code`: redemption code quoted by students, unique across offers.
    - `is_active`: manual switch; an offer is only live while also before `valid_until`.
    """
    title = models.CharField(max_length=255)
    discount = models.CharField(max_length=64)
    valid_until = models.DateTimeField()
    description = models.TextField()
    code = models.CharField(max_length=64, unique=True)
    conditions = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = OfferQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.code} ({self.discount})"

    def is_expired(self, now=None):
        return self.valid_until < (now or timezone.now())

    def is_currently_active(self, now=None):
        return self.is_active and not self.is_expired(now)

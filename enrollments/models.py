from django.db import models


class Enrollment(models.Model):
    """Course application submitted through the public enrollment form."""
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'
    ENROLLED = 'enrolled'

    STATUS_CHOICES = [
        (PENDING, 'Pending'),
        (APPROVED, 'Approved'),
        (REJECTED, 'Rejected'),
        (ENROLLED, 'Enrolled'),
    ]

    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.CharField(max_length=254)
    phone = models.CharField(max_length=32)
    education = models.CharField(max_length=255, blank=True, default='')
    course = models.CharField(max_length=255)
    start_date = models.DateField(null=True, blank=True, help_text='Preferred start date')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='enrollment_status_created_idx'),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name} -> {self.course} ({self.status})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

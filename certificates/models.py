from django.db import models

from .utils import build_credential_url


class Certificate(models.Model):
    """Course completion certificate, publicly verifiable by its certificate ID."""
    certificate_id = models.CharField(max_length=50, unique=True, help_text='Public certificate ID, e.g. BMS-2024-WD-000123')
    student_name = models.CharField(max_length=255)
    course_name = models.CharField(max_length=255)
    completion_date = models.DateField()
    issue_date = models.DateField()
    grade = models.CharField(max_length=32)
    instructor = models.CharField(max_length=255)
    duration = models.CharField(max_length=64, help_text='e.g. 12 weeks')
    skills = models.JSONField(default=list, blank=True)
    credential_url = models.CharField(max_length=512, blank=True, editable=False)
    is_valid = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.certificate_id} - {self.student_name} ({self.course_name})"

    def save(self, *args, **kwargs):
        # credential_url always follows certificate_id
        self.credential_url = build_credential_url(self.certificate_id)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'certificate_id' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'credential_url'}
        super().save(*args, **kwargs)

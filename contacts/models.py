from django.db import models


class Contact(models.Model):
    """Message submitted through the public contact form."""
    UNREAD = 'unread'
    READ = 'read'
    REPLIED = 'replied'

    STATUS_CHOICES = [
        (UNREAD, 'Unread'),
        (READ, 'Read'),
        (REPLIED, 'Replied'),
    ]

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254)
    subject = models.CharField(max_length=255, blank=True, default='')
    message = models.TextField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=UNREAD)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='contact_status_created_idx'),
        ]

    def __str__(self):
        return f"Contact from {self.name} <{self.email}>: {self.subject or '(no subject)'}"

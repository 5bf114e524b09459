from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    # Back-office accounts: only admins may manage academy records
    ADMIN = 'admin'
    MEMBER = 'member'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (MEMBER, 'Member'),
    ]

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=MEMBER)

    @property
    def is_admin(self):
        return self.is_staff or self.role == self.ADMIN

    def __str__(self):
        return f"{self.username} ({self.role})"

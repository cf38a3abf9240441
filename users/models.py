"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the marketplace
fields: the account role, a display name and an avatar.  A `OneToOneField`
links each profile to its user.  The `UserProfile` is created automatically
via signals when a new user instance is saved.
"""
import os
import uuid

from django.contrib.auth.models import User
from django.db import models
from django.utils.text import slugify


def user_profile_image(instance, filename):
    """Save avatars under ``avatars/<slug>-<random><ext>``."""
    name, ext = os.path.splitext(filename or "")
    base = slugify(name) or "avatar"
    return f"avatars/{base}-{uuid.uuid4().hex[:8]}{ext.lower()}"


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    ROLE_USER = "user"
    ROLE_PROVIDER = "provider"
    ROLE_SUPER_ADMIN = "super_admin"
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_PROVIDER, "Provider"),
        (ROLE_SUPER_ADMIN, "Super admin"),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER, db_index=True)
    full_name = models.CharField(max_length=255, blank=True)
    user_image = models.ImageField(upload_to=user_profile_image, blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Profile<{self.user.username}:{self.role}>"

    class Meta:
        indexes = [
            models.Index(fields=["full_name"], name="users_profile_full_name_idx"),
        ]

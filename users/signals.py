"""
Signals for the users app.

Automatically create a `UserProfile` instance whenever a `User` is saved
without one.  Superusers get the ``super_admin`` role.
"""
from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile

User = get_user_model()


@receiver(post_save, sender=User)
def ensure_profile(sender, instance, created, **kwargs):
    """Ensure exactly one UserProfile exists for every User."""
    defaults = {"full_name": instance.get_full_name() or instance.username}
    if instance.is_superuser:
        defaults["role"] = UserProfile.ROLE_SUPER_ADMIN
    UserProfile.objects.get_or_create(user=instance, defaults=defaults)

from django.conf import settings
from django.db import models


class ServiceCategory(models.Model):
    """A kind of service providers can offer (plumbing, cleaning, ...)."""

    # owning super admin; null when none existed at creation time
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="service_categories",
    )
    name = models.CharField(max_length=255, unique=True)
    icon = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "service categories"

    def __str__(self):
        return self.name

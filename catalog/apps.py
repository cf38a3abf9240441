from django.apps import AppConfig


class CatalogConfig(AppConfig):
    """Configuration for the service catalog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"

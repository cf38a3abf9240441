"""
django-filter FilterSet definitions for the users app.

``UserSearchFilter`` backs the user search endpoint: ``?search=`` matches a
substring of the profile display name.  Case sensitivity follows the
database collation (``contains``, not ``icontains``).
"""
from django.contrib.auth.models import User
from django_filters import rest_framework as filters

from .models import UserProfile


class UserSearchFilter(filters.FilterSet):
    """Filter set for the user search."""

    search = filters.CharFilter(field_name="profile__full_name", lookup_expr="contains")
    role = filters.ChoiceFilter(field_name="profile__role", choices=UserProfile.ROLE_CHOICES)

    class Meta:
        model = User
        fields = []

"""
Admin configuration for the users app.

This module unregisters the default `User` admin and re-registers it with
an inline profile form so that roles and display names are editable via
the Django admin.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False


class UserAdmin(BaseUserAdmin):
    inlines = [UserProfileInline]
    list_display = ("username", "email", "role", "is_active", "date_joined")
    list_filter = ("profile__role", "is_active", "is_staff")
    search_fields = ("username", "email", "profile__full_name")

    @admin.display(ordering="profile__role")
    def role(self, obj):
        prof = getattr(obj, "profile", None)
        return prof.role if prof else ""


admin.site.unregister(User)
admin.site.register(User, UserAdmin)

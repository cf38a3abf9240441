from django.contrib import admin

from .models import ServiceCategory


@admin.register(ServiceCategory)
class ServiceCategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "icon", "user", "created_at")
    search_fields = ("name", "user__username")
    ordering = ("name",)

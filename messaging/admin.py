# messaging/admin.py
from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "sender", "receiver", "short_text", "has_image", "is_read", "created_at")
    list_filter = ("is_read", "created_at")
    search_fields = ("sender__username", "receiver__username", "message")
    ordering = ("-created_at",)
    raw_id_fields = ("sender", "receiver")
    readonly_fields = ("sender", "receiver", "message", "image", "created_at", "updated_at")

    @admin.display(description="Message")
    def short_text(self, obj):
        return obj.message[:80]

    @admin.display(boolean=True, description="Image")
    def has_image(self, obj):
        return bool(obj.image)

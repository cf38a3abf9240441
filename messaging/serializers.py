from __future__ import annotations

from django.conf import settings
from rest_framework import serializers

from users.models import UserProfile
from users.serializers import image_url
from .models import Message


class ParticipantSerializer(serializers.Serializer):
    """The ``{id, full_name, image}`` block attached to each message."""

    id = serializers.IntegerField(read_only=True)
    full_name = serializers.SerializerMethodField()
    image = serializers.SerializerMethodField()

    def get_full_name(self, obj):
        prof = getattr(obj, "profile", None)
        return (getattr(prof, "full_name", "") or obj.get_full_name() or obj.username or "").strip()

    def get_image(self, obj):
        prof = getattr(obj, "profile", None)
        return image_url(getattr(prof, "user_image", None), self.context.get("request"))


class MessageSerializer(serializers.ModelSerializer):
    sender_id = serializers.IntegerField(read_only=True)
    receiver_id = serializers.IntegerField(read_only=True)
    image = serializers.SerializerMethodField()

    class Meta:
        model = Message
        fields = (
            "id",
            "sender_id", "receiver_id",
            "message", "image",
            "is_read",
            "created_at", "updated_at",
        )
        read_only_fields = fields

    def get_image(self, obj):
        return image_url(obj.image, self.context.get("request"))


class MessageWithParticipantsSerializer(MessageSerializer):
    sender = ParticipantSerializer(read_only=True)
    receiver = ParticipantSerializer(read_only=True)
    mine = serializers.SerializerMethodField()

    class Meta(MessageSerializer.Meta):
        fields = MessageSerializer.Meta.fields + ("sender", "receiver", "mine")
        read_only_fields = fields

    def get_mine(self, obj):
        req = self.context.get("request")
        user = getattr(req, "user", None)
        return bool(user and user.is_authenticated and obj.sender_id == user.id)


# ----- request payloads -----

class SendMessageSerializer(serializers.Serializer):
    receiver_id = serializers.IntegerField(min_value=1)
    message = serializers.CharField(allow_blank=False, trim_whitespace=True)
    image = serializers.ImageField(required=False, allow_null=True)

    def validate_image(self, value):
        if value is None:
            return value
        limit_kb = settings.MESSAGE_IMAGE_MAX_KB
        if value.size > limit_kb * 1024:
            raise serializers.ValidationError(f"The image may not be greater than {limit_kb} kilobytes.")
        return value


class ConversationQuerySerializer(serializers.Serializer):
    receiver_id = serializers.IntegerField(min_value=1)


class MarkReadSerializer(serializers.Serializer):
    sender_id = serializers.IntegerField(min_value=1)


class MessageListQuerySerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=UserProfile.ROLE_CHOICES, required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)

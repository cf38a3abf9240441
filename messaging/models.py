# messaging/models.py
import os
import time
import uuid

from django.conf import settings
from django.core.validators import FileExtensionValidator
from django.db import models


def message_image_upload(instance, filename):
    """
    Store attachments as ``message_images/<unix-time>-<random><ext>``.

    The random suffix keeps two sends in the same second from colliding.
    """
    _, ext = os.path.splitext(filename or "")
    return f"message_images/{int(time.time())}-{uuid.uuid4().hex[:8]}{ext.lower()}"


class MessageQuerySet(models.QuerySet):
    def between(self, first_id, second_id):
        return self.filter(
            models.Q(sender_id=first_id, receiver_id=second_id)
            | models.Q(sender_id=second_id, receiver_id=first_id)
        )

    def involving(self, user_id):
        return self.filter(models.Q(sender_id=user_id) | models.Q(receiver_id=user_id))

    def unread_for(self, user_id):
        return self.filter(receiver_id=user_id, is_read=False)


class Message(models.Model):
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_messages"
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="received_messages"
    )
    message = models.TextField()
    image = models.ImageField(
        upload_to=message_image_upload,
        null=True,
        blank=True,
        validators=[FileExtensionValidator(["jpg", "jpeg", "png", "gif", "bmp", "webp"])],
    )
    # flips false -> true once, by the receiver
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MessageQuerySet.as_manager()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["sender", "receiver", "is_read"], name="msg_pair_unread_idx"),
            models.Index(fields=["created_at"], name="msg_created_idx"),
        ]

    def other_party_id(self, user_id):
        return self.receiver_id if self.sender_id == user_id else self.sender_id

    def __str__(self):
        return f"Message({self.sender_id} -> {self.receiver_id}, read={self.is_read})"

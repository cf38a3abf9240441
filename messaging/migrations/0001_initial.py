"""
Initial migration for the messaging app.

Defines the Message model with the indexes used by conversation lookups
and unread counts.
"""
from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion

import messaging.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("message", models.TextField()),
                ("image", models.ImageField(
                    blank=True,
                    null=True,
                    upload_to=messaging.models.message_image_upload,
                    validators=[django.core.validators.FileExtensionValidator(
                        ["jpg", "jpeg", "png", "gif", "bmp", "webp"]
                    )],
                )),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("sender", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="sent_messages",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("receiver", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="received_messages",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["sender", "receiver", "is_read"], name="msg_pair_unread_idx"),
                    models.Index(fields=["created_at"], name="msg_created_idx"),
                ],
            },
        ),
    ]

"""
Initial migration for the users app.

Defines the `UserProfile` model carrying the marketplace role, display
name and avatar for every `auth.User`.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings

import users.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(
                    choices=[("user", "User"), ("provider", "Provider"), ("super_admin", "Super admin")],
                    db_index=True,
                    default="user",
                    max_length=20,
                )),
                ("full_name", models.CharField(blank=True, max_length=255)),
                ("user_image", models.ImageField(blank=True, null=True, upload_to=users.models.user_profile_image)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="profile",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "indexes": [models.Index(fields=["full_name"], name="users_profile_full_name_idx")],
            },
        ),
    ]

"""
Common test fixtures for the Django REST Framework API tests.

Provides a factory for users with a marketplace role, JWT-authenticated
API clients and a per-test media directory for uploaded images.
"""
import io

import pytest
from django.contrib.auth.models import User
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from users.models import UserProfile

PASSWORD = "pass12345!"


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded files inside the test's temp directory."""
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def make_user(db):
    """Create a user with the given role and display name."""
    counter = {"n": 0}

    def _make(role=UserProfile.ROLE_USER, full_name=None, username=None):
        counter["n"] += 1
        username = username or f"{role}{counter['n']}"
        user = User.objects.create_user(
            username=username, password=PASSWORD, email=f"{username}@example.com"
        )
        UserProfile.objects.filter(user=user).update(role=role, full_name=full_name or username.title())
        user.profile.refresh_from_db()
        return user

    return _make


@pytest.fixture
def client_for(db):
    """Return an APIClient authenticated as ``user`` with a JWT access token."""

    def _client(user):
        client = APIClient()
        resp = client.post(
            "/api/auth/token/",
            {"email": user.email, "password": PASSWORD},
            format="json",
        )
        assert resp.status_code == 200, resp.content
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {resp.json()['access']}")
        return client

    return _client


@pytest.fixture
def user(make_user):
    return make_user(UserProfile.ROLE_USER, full_name="Alice User")


@pytest.fixture
def provider(make_user):
    return make_user(UserProfile.ROLE_PROVIDER, full_name="Bob Provider")


@pytest.fixture
def super_admin(make_user):
    return make_user(UserProfile.ROLE_SUPER_ADMIN, full_name="Carol Admin")


@pytest.fixture
def png_file():
    """A small valid PNG upload."""

    def _png(name="photo.png", size=(4, 4)):
        buf = io.BytesIO()
        Image.new("RGB", size, color=(200, 10, 10)).save(buf, format="PNG")
        return SimpleUploadedFile(name, buf.getvalue(), content_type="image/png")

    return _png

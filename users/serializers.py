"""
Serializers for the users app.

Defines the public user representation (with role, display name and
avatar), user registration and email-based login that returns JWT
refresh/access tokens.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.contrib.auth.validators import UnicodeUsernameValidator
from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.validators import UniqueValidator
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import UserProfile

User = get_user_model()

INVALID_CREDENTIALS = "No active account found with the given credentials."


def image_url(field, request=None) -> str | None:
    """Absolute URL for a File/ImageField value, or None when empty."""
    if not field:
        return None
    try:
        url = field.url
    except ValueError:
        return None
    return request.build_absolute_uri(url) if request and url.startswith("/") else url


class UserSerializer(serializers.ModelSerializer):
    """Public view of a user with the marketplace profile flattened in."""

    full_name = serializers.CharField(source="profile.full_name", read_only=True)
    role = serializers.CharField(source="profile.role", read_only=True)
    image = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "username", "email", "full_name", "role", "image", "date_joined"]
        read_only_fields = fields

    def get_image(self, obj):
        prof = getattr(obj, "profile", None)
        return image_url(getattr(prof, "user_image", None), self.context.get("request"))


class RegisterSerializer(serializers.ModelSerializer):
    username = serializers.CharField(
        min_length=3,
        max_length=150,
        validators=[
            UnicodeUsernameValidator(),
            UniqueValidator(queryset=User.objects.all()),
        ],
    )
    email = serializers.EmailField(validators=[UniqueValidator(queryset=User.objects.all())])
    password = serializers.CharField(write_only=True, style={"input_type": "password"})
    password2 = serializers.CharField(write_only=True, style={"input_type": "password"})
    full_name = serializers.CharField(max_length=255)
    # super admins are created through the admin / createsuperuser only
    role = serializers.ChoiceField(
        choices=[UserProfile.ROLE_USER, UserProfile.ROLE_PROVIDER],
        default=UserProfile.ROLE_USER,
    )

    class Meta:
        model = User
        fields = ["id", "username", "email", "password", "password2", "full_name", "role"]
        read_only_fields = ["id"]

    def validate_username(self, value: str) -> str:
        if value.isdigit():
            raise serializers.ValidationError("Username cannot be only numbers.")
        return value

    def validate(self, attrs):
        if attrs["password"] != attrs["password2"]:
            raise serializers.ValidationError({"password2": "Passwords do not match."})
        validate_password(attrs["password"])
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        validated_data.pop("password2")
        full_name = validated_data.pop("full_name")
        role = validated_data.pop("role")
        user = User.objects.create_user(**validated_data)
        UserProfile.objects.filter(user=user).update(full_name=full_name, role=role)
        user.profile.refresh_from_db()
        return user

    def to_representation(self, instance):
        return UserSerializer(instance, context=self.context).data


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Exchange an account email and password for a refresh/access pair."""

    email = serializers.EmailField(write_only=True)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # accounts sign in by email only
        del self.fields[self.username_field]

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = getattr(getattr(user, "profile", None), "role", UserProfile.ROLE_USER)
        return token

    def validate(self, attrs):
        user = User.objects.filter(email__iexact=attrs["email"]).order_by("id").first()
        if user is None or not user.check_password(attrs["password"]):
            raise AuthenticationFailed(INVALID_CREDENTIALS)
        if not user.is_active:
            raise AuthenticationFailed("This account is disabled.")

        refresh = self.get_token(user)
        return {"refresh": str(refresh), "access": str(refresh.access_token)}

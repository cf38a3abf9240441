"""
Views for the users app.

Provides registration, email + password JWT login and the user search
used by the messaging screens to start a conversation.
"""
import logging

from django.contrib.auth import get_user_model
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, permissions, status
from rest_framework_simplejwt.views import TokenObtainPairView

from common.responses import envelope
from .filters import UserSearchFilter
from .serializers import EmailTokenObtainPairSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class RegisterView(generics.GenericAPIView):
    permission_classes = [permissions.AllowAny]
    serializer_class = RegisterSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("registered user id=%s role=%s", user.id, user.profile.role)

        refresh = EmailTokenObtainPairSerializer.get_token(user)
        payload = dict(serializer.data)
        payload.update({
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        })
        return envelope(payload, "Registration successful.", status.HTTP_201_CREATED)


class EmailTokenObtainPairView(TokenObtainPairView):
    """
    Obtain JWT tokens using email + password.
    """
    permission_classes = [permissions.AllowAny]
    serializer_class = EmailTokenObtainPairSerializer


class UserSearchView(generics.ListAPIView):
    """
    GET /api/users/search/?search=<text>

    Users of any role whose display name contains ``search``.  An empty
    result is still a successful response.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = UserSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = UserSearchFilter
    pagination_class = None

    def get_queryset(self):
        return (
            User.objects.filter(is_active=True)
            .select_related("profile")
            .order_by("profile__full_name", "id")
        )

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(qs, many=True).data
        if not data:
            return envelope([], "No users found matching the search criteria.")
        return envelope(data, "Users found")

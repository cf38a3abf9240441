"""
Views for the messaging app.

Expose the direct-message endpoints.  Authentication is required for all
endpoints; the acting user is handed to ``messaging.services`` explicitly
and every response uses the project JSON envelope.
"""
from __future__ import annotations

from rest_framework import permissions, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from common.responses import envelope
from . import services
from .permissions import HasMarketplaceRole
from .serializers import (
    ConversationQuerySerializer,
    MarkReadSerializer,
    MessageListQuerySerializer,
    MessageSerializer,
    MessageWithParticipantsSerializer,
    SendMessageSerializer,
)


class MessageViewSet(viewsets.GenericViewSet):
    """
    POST /api/messages/                    send a message
    GET  /api/messages/?receiver_id=       conversation with one user (paginated)
    POST /api/messages/read/               mark messages from a sender as read
    GET  /api/messages/conversations/      latest message per conversation partner
    GET  /api/messages/unread-count/       unread totals for the current user
    """

    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    serializer_class = MessageWithParticipantsSerializer

    def get_permissions(self):
        # reading stays open to any signed-in account; sending needs a known role
        if self.action == "create":
            return [permission() for permission in (*self.permission_classes, HasMarketplaceRole)]
        return super().get_permissions()

    def list(self, request, *args, **kwargs):
        params = ConversationQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        qs = services.conversation(request.user, params.validated_data["receiver_id"])
        page = self.paginate_queryset(qs)
        data = self.get_serializer(page, many=True).data
        return envelope(self.paginator.get_page_payload(data), "Messages fetched successfully.")

    def create(self, request, *args, **kwargs):
        payload = SendMessageSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        vd = payload.validated_data

        message = services.send_message(
            request.user,
            receiver_id=vd["receiver_id"],
            text=vd["message"],
            image=vd.get("image"),
        )
        data = MessageSerializer(message, context=self.get_serializer_context()).data
        return envelope(data, "Message sent successfully!")

    @action(detail=False, methods=["post"], url_path="read")
    def read(self, request):
        payload = MarkReadSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        updated = services.mark_read(request.user, payload.validated_data["sender_id"])
        return envelope({"updated": updated}, "Message read successfully")

    @action(detail=False, methods=["get"], url_path="conversations")
    def conversations(self, request):
        params = MessageListQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        qs = services.latest_per_partner(
            request.user,
            role=params.validated_data.get("role") or None,
            search=params.validated_data.get("search") or None,
        )
        data = self.get_serializer(qs, many=True).data
        return envelope(data, "Messages fetched successfully.")

    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):
        return envelope(services.unread_counts(request.user), "Unread messages counted.")

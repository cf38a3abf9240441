# messaging/services.py
"""
Message operations.

Each function takes the acting user explicitly and either returns a
result or raises one of the DRF exceptions handled by
``common.exceptions.envelope_exception_handler``.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction
from django.db.models import Case, Count, F, Q, When, Window
from django.db.models.functions import RowNumber
from rest_framework.exceptions import NotFound, PermissionDenied

from common.exceptions import ServerError
from .models import Message
from .permissions import ensure_can_message

logger = logging.getLogger(__name__)

User = get_user_model()


def get_user_or_404(user_id, label="User"):
    try:
        return User.objects.select_related("profile").get(pk=user_id)
    except User.DoesNotExist:
        raise NotFound(f"{label} not found.")


def send_message(actor, receiver_id: int, text: str, image=None) -> Message:
    """
    Persist a message from ``actor`` to ``receiver_id``.

    Lookup and role checks run before anything is written, so a rejected
    send leaves neither a row nor an attachment behind.  If the insert
    fails after the attachment was stored, the stored file is removed.
    """
    receiver = get_user_or_404(receiver_id, "Receiver")
    try:
        ensure_can_message(actor, receiver)
    except PermissionDenied:
        logger.warning("send denied sender=%s receiver=%s", actor.id, receiver.id)
        raise

    message = Message(sender=actor, receiver=receiver, message=text, is_read=False)
    stored_name = None
    try:
        if image is not None:
            # the upload_to callable names the stored file
            message.image.save(image.name, image, save=False)
            stored_name = message.image.name
        with transaction.atomic():
            message.save()
    except (DatabaseError, OSError) as exc:
        logger.exception("send failed sender=%s receiver=%s", actor.id, receiver.id)
        if stored_name:
            _discard_attachment(message, stored_name)
        raise ServerError(f"Error sending message: {exc}") from exc

    logger.info("message %s sent sender=%s receiver=%s", message.id, actor.id, receiver.id)
    return message


def _discard_attachment(message: Message, name: str) -> None:
    try:
        message.image.storage.delete(name)
    except OSError:
        logger.exception("could not remove orphaned attachment %s", name)


def conversation(actor, other_id: int):
    """Both directions between ``actor`` and ``other_id``, oldest first."""
    other = get_user_or_404(other_id, "Receiver")
    return (
        Message.objects.between(actor.id, other.id)
        .select_related("sender__profile", "receiver__profile")
        .order_by("created_at", "id")
    )


def mark_read(actor, sender_id: int) -> int:
    """
    Flag every unread message from ``sender_id`` to ``actor`` as read.

    A single UPDATE statement, so concurrent acknowledgements cannot lose
    each other's writes.  Returns the number of rows flipped.
    """
    if int(sender_id) == actor.id:
        raise PermissionDenied("You cannot mark your own sent messages as read.")

    try:
        updated = Message.objects.filter(
            sender_id=sender_id, receiver_id=actor.id, is_read=False
        ).update(is_read=True)
    except DatabaseError as exc:
        logger.exception("mark read failed sender=%s receiver=%s", sender_id, actor.id)
        raise ServerError(f"Error marking message as read: {exc}") from exc

    if not updated:
        raise NotFound("No unread messages found.")
    logger.info("marked %d message(s) read sender=%s receiver=%s", updated, sender_id, actor.id)
    return updated


def latest_per_partner(actor, role: Optional[str] = None, search: Optional[str] = None):
    """
    The most recent message of each of ``actor``'s conversations, newest first.

    ``role`` keeps conversations whose other party has that role; ``search``
    narrows those by the other party's display name and is ignored without
    ``role``.
    """
    qs = Message.objects.involving(actor.id).annotate(
        partner_id=Case(
            When(sender_id=actor.id, then=F("receiver_id")),
            default=F("sender_id"),
        )
    )

    if role:
        outgoing = Q(sender_id=actor.id, receiver__profile__role=role)
        incoming = Q(receiver_id=actor.id, sender__profile__role=role)
        if search:
            outgoing &= Q(receiver__profile__full_name__contains=search)
            incoming &= Q(sender__profile__full_name__contains=search)
        qs = qs.filter(outgoing | incoming)

    latest_ids = list(
        qs.annotate(
            rank=Window(
                expression=RowNumber(),
                partition_by=[F("partner_id")],
                order_by=[F("created_at").desc(), F("id").desc()],
            )
        )
        .filter(rank=1)
        .values_list("id", flat=True)
    )

    return (
        Message.objects.filter(pk__in=latest_ids)
        .select_related("sender__profile", "receiver__profile")
        .order_by("-created_at", "-id")
    )


def unread_counts(actor) -> dict:
    """Unread messages addressed to ``actor``, in total and per sender."""
    rows = (
        Message.objects.unread_for(actor.id)
        .values("sender_id")
        .annotate(count=Count("id"))
        .order_by("sender_id")
    )
    per_sender = [{"sender_id": r["sender_id"], "count": r["count"]} for r in rows]
    return {"total": sum(r["count"] for r in per_sender), "per_sender": per_sender}

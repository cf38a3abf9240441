"""
Who may message whom.

The send rules are a lookup table keyed by the sender's role.  Each entry
lists the receiver roles that sender may address and the message shown
when the rule is broken.  Roles missing from the table cannot send at all.
"""
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission

from users.models import UserProfile

USER = UserProfile.ROLE_USER
PROVIDER = UserProfile.ROLE_PROVIDER
SUPER_ADMIN = UserProfile.ROLE_SUPER_ADMIN

SEND_RULES = {
    USER: (frozenset({PROVIDER}), "Users can only send messages to providers."),
    SUPER_ADMIN: (frozenset({PROVIDER}), "Superadmin can only send messages to providers."),
    PROVIDER: (frozenset({USER, SUPER_ADMIN}), "Providers can only send messages to users or admins."),
}

UNKNOWN_ROLE_MESSAGE = "Your account role is not allowed to send messages."


def role_of(user):
    prof = getattr(user, "profile", None)
    return getattr(prof, "role", None)


def can_message(sender_role, receiver_role) -> bool:
    allowed, _ = SEND_RULES.get(sender_role, (frozenset(), UNKNOWN_ROLE_MESSAGE))
    return receiver_role in allowed


def ensure_can_message(sender, receiver) -> None:
    """Raise ``PermissionDenied`` unless ``sender`` may message ``receiver``."""
    sender_role = role_of(sender)
    if can_message(sender_role, role_of(receiver)):
        return
    _, reason = SEND_RULES.get(sender_role, (frozenset(), UNKNOWN_ROLE_MESSAGE))
    raise PermissionDenied(reason)


class HasMarketplaceRole(BasePermission):
    """Allow only authenticated users that carry a known marketplace role."""

    message = UNKNOWN_ROLE_MESSAGE

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return role_of(user) in SEND_RULES

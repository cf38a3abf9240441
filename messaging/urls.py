# messaging/urls.py
"""
URL configuration for the messaging app.

These routes are included under the ``/api/messages/`` prefix at the
project level.
"""
from django.urls import path

from .views import MessageViewSet

app_name = "messaging"

urlpatterns = [
    path("", MessageViewSet.as_view({"get": "list", "post": "create"}), name="message-list"),
    path("read/", MessageViewSet.as_view({"post": "read"}), name="message-read"),
    path("conversations/", MessageViewSet.as_view({"get": "conversations"}), name="message-conversations"),
    path("unread-count/", MessageViewSet.as_view({"get": "unread_count"}), name="message-unread-count"),
]

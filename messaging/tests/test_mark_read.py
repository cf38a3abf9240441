"""
Tests for marking a sender's messages as read.
"""
import pytest

from messaging.models import Message

URL = "/api/messages/read/"


@pytest.mark.django_db
def test_marks_only_unread_from_that_sender(client_for, user, provider, make_user):
    other_provider = make_user("provider")
    Message.objects.create(sender=provider, receiver=user, message="a")
    Message.objects.create(sender=provider, receiver=user, message="b")
    untouched = Message.objects.create(sender=other_provider, receiver=user, message="c")
    outgoing = Message.objects.create(sender=user, receiver=provider, message="d")

    resp = client_for(user).post(URL, {"sender_id": provider.id}, format="json")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": True,
        "message": "Message read successfully",
        "data": {"updated": 2},
    }
    assert not Message.objects.filter(sender=provider, receiver=user, is_read=False).exists()
    untouched.refresh_from_db()
    outgoing.refresh_from_db()
    assert untouched.is_read is False
    assert outgoing.is_read is False


@pytest.mark.django_db
def test_second_call_reports_no_unread(client_for, user, provider):
    Message.objects.create(sender=provider, receiver=user, message="a")
    client = client_for(user)

    first = client.post(URL, {"sender_id": provider.id}, format="json")
    second = client.post(URL, {"sender_id": provider.id}, format="json")

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.json() == {"status": False, "message": "No unread messages found."}
    assert Message.objects.get().is_read is True


@pytest.mark.django_db
def test_cannot_mark_own_messages(client_for, user, provider):
    Message.objects.create(sender=user, receiver=provider, message="a")

    resp = client_for(user).post(URL, {"sender_id": user.id}, format="json")

    assert resp.status_code == 403
    assert resp.json()["message"] == "You cannot mark your own sent messages as read."
    assert Message.objects.get().is_read is False


@pytest.mark.django_db
def test_sender_cannot_flip_receivers_flag(client_for, user, provider):
    Message.objects.create(sender=provider, receiver=user, message="a")

    # the provider acknowledging "messages from user" touches nothing
    resp = client_for(provider).post(URL, {"sender_id": user.id}, format="json")

    assert resp.status_code == 404
    assert Message.objects.get().is_read is False


@pytest.mark.django_db
def test_sender_id_required(client_for, user):
    resp = client_for(user).post(URL, {}, format="json")
    assert resp.status_code == 422
    assert "sender_id" in resp.json()["errors"]

"""
Tests for reading a conversation between two users.
"""
import pytest

from messaging import services
from messaging.models import Message

URL = "/api/messages/"


@pytest.mark.django_db
def test_sent_message_round_trip(client_for, user, provider):
    client_for(user).post(URL, {"receiver_id": provider.id, "message": "Need a plumber"}, format="json")

    resp = client_for(provider).get(URL, {"receiver_id": user.id})

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] is True
    results = body["data"]["results"]
    assert len(results) == 1
    assert results[0]["message"] == "Need a plumber"
    assert results[0]["sender_id"] == user.id
    assert results[0]["receiver_id"] == provider.id
    assert results[0]["is_read"] is False
    assert results[0]["mine"] is False
    assert results[0]["sender"]["full_name"] == "Alice User"


@pytest.mark.django_db
def test_both_directions_oldest_first(client_for, user, provider, make_user):
    bystander = make_user("user")
    first = Message.objects.create(sender=user, receiver=provider, message="one")
    second = Message.objects.create(sender=provider, receiver=user, message="two")
    third = Message.objects.create(sender=user, receiver=provider, message="three")
    Message.objects.create(sender=bystander, receiver=provider, message="not ours")

    resp = client_for(user).get(URL, {"receiver_id": provider.id})

    ids = [m["id"] for m in resp.json()["data"]["results"]]
    assert ids == [first.id, second.id, third.id]


@pytest.mark.django_db
def test_paginated_twenty_per_page(client_for, user, provider):
    Message.objects.bulk_create(
        [Message(sender=user, receiver=provider, message=f"m{i}") for i in range(25)]
    )
    client = client_for(user)

    page1 = client.get(URL, {"receiver_id": provider.id}).json()["data"]
    page2 = client.get(URL, {"receiver_id": provider.id, "page": 2}).json()["data"]

    assert page1["count"] == 25
    assert page1["per_page"] == 20
    assert page1["last_page"] == 2
    assert len(page1["results"]) == 20
    assert page1["next"] is not None
    assert len(page2["results"]) == 5
    assert page2["next"] is None


@pytest.mark.django_db
def test_receiver_id_required(client_for, user):
    resp = client_for(user).get(URL)
    assert resp.status_code == 422
    assert "receiver_id" in resp.json()["errors"]


@pytest.mark.django_db
def test_unknown_receiver(client_for, user):
    resp = client_for(user).get(URL, {"receiver_id": 424242})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Receiver not found."


@pytest.mark.django_db
def test_no_role_restriction_on_reading(client_for, make_user):
    # two users may not message each other, but reading their (empty) thread is allowed
    a = make_user("user")
    b = make_user("user")
    resp = client_for(a).get(URL, {"receiver_id": b.id})
    assert resp.status_code == 200
    assert resp.json()["data"]["results"] == []


@pytest.mark.django_db
def test_unexpected_failure_is_a_json_500(client_for, user, provider, monkeypatch):
    def broken(actor, other_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(services, "conversation", broken)
    client = client_for(user)
    client.raise_request_exception = False

    resp = client.get(URL, {"receiver_id": provider.id})

    assert resp.status_code == 500
    assert resp["Content-Type"] == "application/json"
    assert resp.json() == {"status": False, "message": "boom"}


@pytest.mark.django_db
def test_unknown_role_may_read_but_not_send(client_for, make_user, provider):
    guest = make_user("guest")
    client = client_for(guest)

    read = client.get(URL, {"receiver_id": provider.id})
    assert read.status_code == 200

    sent = client.post(URL, {"receiver_id": provider.id, "message": "hi"}, format="json")
    assert sent.status_code == 403
    assert sent.json()["status"] is False
    assert not Message.objects.exists()

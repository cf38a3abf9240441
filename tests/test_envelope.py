"""
Tests for the project-wide error envelope.
"""
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from common.exceptions import ServerError, envelope_exception_handler


def test_validation_error_becomes_422_with_field_map():
    resp = envelope_exception_handler(ValidationError({"message": ["This field is required."]}), {})

    assert resp.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert resp.data == {
        "status": False,
        "message": "The given data was invalid.",
        "errors": {"message": ["This field is required."]},
    }


def test_list_validation_error_is_wrapped():
    resp = envelope_exception_handler(ValidationError(["bad"]), {})
    assert resp.data["errors"] == {"non_field_errors": ["bad"]}


def test_permission_denied_keeps_403_and_text():
    resp = envelope_exception_handler(PermissionDenied("nope"), {})
    assert resp.status_code == 403
    assert resp.data == {"status": False, "message": "nope"}


def test_not_found_is_404():
    resp = envelope_exception_handler(NotFound("missing"), {})
    assert resp.status_code == 404
    assert resp.data["message"] == "missing"


def test_server_error_carries_cause():
    resp = envelope_exception_handler(ServerError("Error sending message: disk full"), {})
    assert resp.status_code == 500
    assert resp.data == {"status": False, "message": "Error sending message: disk full"}


def test_unknown_exception_becomes_json_500():
    resp = envelope_exception_handler(RuntimeError("boom"), {})
    assert resp.status_code == 500
    assert resp.data == {"status": False, "message": "boom"}


def test_unknown_exception_without_text_uses_default_message():
    resp = envelope_exception_handler(KeyError(), {})
    assert resp.status_code == 500
    assert resp.data == {"status": False, "message": ServerError.default_detail}

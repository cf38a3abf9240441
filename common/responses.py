"""
JSON envelope helpers.

Every API response in the project is wrapped as
``{"status": <bool>, "message": <str>, "data": <payload>}`` so clients can
branch on ``status`` without inspecting HTTP codes.
"""
from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(data=None, message="", status_code=http_status.HTTP_200_OK):
    payload = {"status": True, "message": message}
    if data is not None:
        payload["data"] = data
    return Response(payload, status=status_code)


def error_envelope(message, status_code, errors=None):
    payload = {"status": False, "message": message}
    if errors is not None:
        payload["errors"] = errors
    return Response(payload, status=status_code)

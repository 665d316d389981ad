"""Shared exceptions.

Services raise ``ConflictError`` subclasses for constraint violations; views
translate them into the DRF ``Conflict`` API exception (HTTP 409).
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class ConflictError(Exception):
    """A write would violate a uniqueness or integrity constraint."""


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"

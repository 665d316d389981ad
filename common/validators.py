"""Identifier and query-parameter validation helpers used at the API boundary."""

from rest_framework.exceptions import ValidationError


def is_valid_id(value) -> bool:
    """Return True if ``value`` looks like a primary key of this store.

    Primary keys are positive integers. Strings are accepted when they hold
    ASCII digits only, booleans are rejected.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, str):
        return value.isascii() and value.isdigit() and int(value) > 0
    return False


def parse_non_negative_int(params, name: str, default: int) -> int:
    """Read ``name`` from query params as a non-negative integer or raise 400."""
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    if not raw.isascii() or not raw.isdigit():
        raise ValidationError({name: "Must be a non-negative integer."})
    return int(raw)

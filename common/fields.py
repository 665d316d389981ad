"""Custom serializer fields shared by the API apps."""

from rest_framework import serializers

from .validators import is_valid_id


class IdField(serializers.Field):
    """
    Accepts a primary key given as a positive integer or a string of digits.
    The internal value is always an int; anything else fails with ``invalid``,
    whose text callers override per field.
    """

    default_error_messages = {
        "invalid": "Must be a valid identifier.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip()
        if not is_valid_id(data):
            self.fail("invalid")
        return int(data)

    def to_representation(self, value):
        return value

"""Users API serializers.

Provides the input DTOs for registration and login and the output
representation of a user. Registration validates the email format, name and
password lengths and the account type; uniqueness of the email is checked by
the service, and the view answers a duplicate with 409.
"""

from rest_framework import serializers

from users.models import User


class CreateUserDto(serializers.Serializer):
    """Validate the payload for creating a new account."""

    email = serializers.EmailField()
    avatar = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    name = serializers.CharField(min_length=1, max_length=15)
    password = serializers.CharField(write_only=True, min_length=6, max_length=12)
    type = serializers.ChoiceField(choices=User.UserType.choices)


class LoginUserDto(serializers.Serializer):
    """Validate email/password credentials before they reach the service."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class UserOutputSerializer(serializers.ModelSerializer):
    """Read serializer for a user; never exposes the password hash."""

    class Meta:
        model = User
        fields = ["id", "email", "name", "avatar", "type"]

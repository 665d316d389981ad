"""User service: account creation, lookup by email and credential checks.

Emails are compared case-insensitively; the database enforces one account per
lowercased email, and a losing concurrent insert surfaces as
``DuplicateEmailError``.
"""

from django.db import IntegrityError, transaction

from common.exceptions import ConflictError
from common.services import ModelService
from .models import User


class DuplicateEmailError(ConflictError):
    """An account with the email already exists."""


class UserService(ModelService):
    """CRUD and lookups for user accounts. Passwords are always hashed."""

    model = User

    def create(self, dto):
        data = dict(dto)
        password = data.pop("password")
        email = data.pop("email")
        if self.find_by_email(email) is not None:
            raise DuplicateEmailError(f"User with email '{email}' already exists.")
        try:
            with transaction.atomic():
                user = self.model.objects.create_user(email=email, password=password, **data)
        except IntegrityError as exc:
            raise DuplicateEmailError(f"User with email '{email}' already exists.") from exc
        self.logger.info("New user created: %s", user.email)
        return user

    def find_by_email(self, email):
        return self.model.objects.filter(email__iexact=email).first()

    def find_or_create(self, dto):
        existing = self.find_by_email(dto["email"])
        if existing is not None:
            return existing
        return self.create(dto)

    def update_by_id(self, pk, dto):
        data = dict(dto)
        password = data.pop("password", None)
        if "email" in data:
            data["email"] = data["email"].lower()
        user = super().update_by_id(pk, data)
        if user is not None and password is not None:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user

    def verify(self, email, password):
        """Return the user if the credentials match, otherwise ``None``."""
        user = self.find_by_email(email)
        if user is None or not user.is_active or not user.check_password(password):
            self.logger.debug("Failed login attempt for %s", email)
            return None
        return user

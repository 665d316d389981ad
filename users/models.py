"""Users app models.

Defines the custom User model. Users log in with their email address, which is
stored lowercased and unique regardless of case. The account ``type``
distinguishes regular users from pro (host) accounts.
Passwords are stored hashed via Django's password hashers.
"""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.db.models.functions import Lower


class UserManager(BaseUserManager):
    """Manager creating users keyed by email."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Users must have an email address.")
        user = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """A registered account: regular guest or pro host."""

    class UserType(models.TextChoices):
        REGULAR = "regular", "regular"
        PRO = "pro", "pro"

    email = models.EmailField(unique=True)
    avatar = models.CharField(max_length=255, blank=True, default="")
    name = models.CharField(max_length=15)
    type = models.CharField(max_length=20, choices=UserType.choices, default=UserType.REGULAR)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        constraints = [
            models.UniqueConstraint(Lower("email"), name="unique_user_email_ci"),
        ]
        ordering = ["-id"]

    def __str__(self):
        return f"{self.name} <{self.email}>"

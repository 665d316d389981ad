"""Offers app models.

Defines the Offer model: a rental listing in one of the supported cities,
authored by a user. ``comments_count`` is denormalized and maintained by the
comment service; the average rating and favorite flag are computed at query
time and never stored.
"""

from django.conf import settings
from django.db import models


class Offer(models.Model):
    """Represents a rental listing."""

    class City(models.TextChoices):
        PARIS = "Paris", "Paris"
        COLOGNE = "Cologne", "Cologne"
        BRUSSELS = "Brussels", "Brussels"
        AMSTERDAM = "Amsterdam", "Amsterdam"
        HAMBURG = "Hamburg", "Hamburg"
        DUSSELDORF = "Dusseldorf", "Dusseldorf"

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    city = models.CharField(max_length=20, choices=City.choices)
    is_premium = models.BooleanField(default=False)
    price = models.PositiveIntegerField(default=0)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="offers",
    )
    comments_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "offers"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} (#{self.pk})"

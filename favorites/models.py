"""Favorites app models.

The ``Favorite`` model marks an offer as favorite for a user. The existence
of a row is the whole information; a unique constraint keeps at most one row
per (user, offer) pair.
"""

from django.conf import settings
from django.db import models


class Favorite(models.Model):
    """A user's favorite offer."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    offer = models.ForeignKey(
        "offers.Offer",
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "offers-favorites"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "offer"],
                name="unique_favorite_per_user_and_offer",
            )
        ]
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        return f"Favorite offer {self.offer_id} of user {self.user_id}"

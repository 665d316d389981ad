"""Comments app models.

Defines the Comment model. A comment belongs to one offer and one author and
carries a rating between 1 and 5; the offer's average rating is derived
from these values at query time.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Comment(models.Model):
    """Represents a comment with a rating left by a user on an offer."""

    offer = models.ForeignKey(
        "offers.Offer",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    text = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "comments"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"Comment<{self.id} {self.author_id}->{self.offer_id} {self.rating}>"

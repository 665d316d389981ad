"""Favorite service.

Favorites are addressed by the (user, offer) pair. Adding an existing pair
raises ``DuplicateFavoriteError``; the unique constraint in the database is
the final guard against concurrent inserts.
"""

from django.db import IntegrityError, transaction

from common.exceptions import ConflictError
from common.services import ModelService
from .models import Favorite


class DuplicateFavoriteError(ConflictError):
    """The offer is already a favorite of the user."""


class FavoriteService(ModelService):
    """Create, look up and remove (user, offer) favorite relations."""

    model = Favorite

    def create(self, dto):
        user_id, offer_id = dto["user_id"], dto["offer_id"]
        if self.find(user_id, offer_id) is not None:
            raise DuplicateFavoriteError(f"Offer #{offer_id} is already a favorite of user #{user_id}.")
        try:
            with transaction.atomic():
                favorite = self.model.objects.create(user_id=user_id, offer_id=offer_id)
        except IntegrityError as exc:
            raise DuplicateFavoriteError(
                f"Offer #{offer_id} is already a favorite of user #{user_id}."
            ) from exc
        self.logger.info("Offer #%s added to favorites of user #%s", offer_id, user_id)
        return favorite

    def find(self, user_id, offer_id):
        return self.model.objects.filter(user_id=user_id, offer_id=offer_id).first()

    def find_by_user_id(self, user_id):
        return list(self.model.objects.filter(user_id=user_id).order_by("-created_at", "-id"))

    def delete(self, user_id, offer_id):
        """Remove the pair and return the deleted row, or ``None`` if absent."""
        favorite = self.find(user_id, offer_id)
        if favorite is None:
            return None
        favorite.delete()
        self.logger.info("Offer #%s removed from favorites of user #%s", offer_id, user_id)
        return favorite

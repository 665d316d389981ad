"""Offer service.

Wraps the ORM queries behind the offer endpoints. The listing query annotates
every offer with two derived values computed by correlated subqueries:

- ``rating``: the mean of the offer's comment ratings, ``None`` when the
  offer has no comments. The database returns the raw mean; the service
  rounds it to one decimal half to even, like Python's ``round``.
- ``is_favorite``: whether a favorite row exists for the offer and the
  reference user.

Neither value is stored; the joined comment and favorite rows never leave the
database.
"""

from django.db.models import Avg, BooleanField, Exists, F, FloatField, OuterRef, Subquery, Value

from comments.models import Comment
from common.services import ModelService
from favorites.models import Favorite
from .constants import (
    DEFAULT_OFFER_COUNT,
    DEFAULT_OFFER_SORT,
    DEFAULT_PREMIUM_OFFER_COUNT,
    FAVORITES_OF_AUTHOR,
)
from .models import Offer


# --------------------------- helpers (pure functions) ---------------------------

def _require_count(value, name):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}.")


def _rating_expression():
    ratings = (
        Comment.objects.filter(offer=OuterRef("pk"))
        .order_by()
        .values("offer")
        .annotate(avg=Avg("rating"))
        .values("avg")
    )
    return Subquery(ratings, output_field=FloatField())


def _round_rating(offer):
    if offer is not None and offer.rating is not None:
        offer.rating = round(float(offer.rating), 1)
    return offer


def _favorite_expression(favorites_of):
    if favorites_of is None:
        return Value(False, output_field=BooleanField())
    user = OuterRef("author") if favorites_of == FAVORITES_OF_AUTHOR else favorites_of
    return Exists(Favorite.objects.filter(offer=OuterRef("pk"), user=user))


# ---------------------------------- service ----------------------------------

class OfferService(ModelService):
    """CRUD, listing and premium queries over offers."""

    model = Offer

    def get_queryset(self):
        return super().get_queryset().select_related("author")

    def annotate(self, qs, favorites_of=None):
        """Attach the raw mean ``rating`` and ``is_favorite`` to every offer of ``qs``.

        ``favorites_of`` is a user id, ``FAVORITES_OF_AUTHOR`` to key the
        favorite lookup by each offer's author, or ``None`` to report every
        offer as not favorite.
        """
        return qs.annotate(
            rating=_rating_expression(),
            is_favorite=_favorite_expression(favorites_of),
        )

    def create(self, dto):
        offer = super().create(dto)
        self.logger.info("New offer created: %s", offer.name)
        return offer

    def find_by_id(self, pk, favorites_of=None):
        return _round_rating(self.annotate(self.get_queryset(), favorites_of).filter(pk=pk).first())

    def find_by_name(self, name):
        return self.get_queryset().filter(name=name).first()

    def find(self, limit=DEFAULT_OFFER_COUNT, favorites_of=FAVORITES_OF_AUTHOR, sort=DEFAULT_OFFER_SORT):
        """Return at most ``limit`` offers with derived fields, ordered by ``sort``.

        By default favorites are looked up for each offer's author; pass the
        viewer's id to get the viewer's favorites instead.
        """
        _require_count(limit, "limit")
        qs = self.annotate(self.get_queryset(), favorites_of)
        return [_round_rating(o) for o in qs.order_by(sort, "-id")[:limit]]

    def find_premium(self, count=DEFAULT_PREMIUM_OFFER_COUNT, city=None, favorites_of=None):
        """Newest premium offers of ``city``, at most ``count`` of them."""
        _require_count(count, "count")
        qs = self.annotate(self.get_queryset().filter(is_premium=True, city=city), favorites_of)
        return [_round_rating(o) for o in qs.order_by("-created_at", "-id")[:count]]

    def find_favorites(self, user_id):
        """Offers the given user marked as favorite, newest first."""
        qs = self.get_queryset().filter(favorites__user_id=user_id)
        return [_round_rating(o) for o in self.annotate(qs, user_id).order_by("-created_at", "-id")]

    def inc_comment_count(self, offer_id):
        """Atomically add one to the stored comment count.

        The increment runs as a single UPDATE so concurrent calls never lose
        an update. Returns the refreshed offer or ``None`` if it does not exist.
        """
        updated = self.model.objects.filter(pk=offer_id).update(comments_count=F("comments_count") + 1)
        if not updated:
            self.logger.debug("Offer #%s not found for comment count increment", offer_id)
            return None
        return self.find_by_id(offer_id)

"""Offers API serializers.

Provide the input DTOs for creating and partially updating an offer and the
output serializer that exposes the computed ``rating`` and ``isFavorite``
fields. Wire names are camelCase; model attributes stay snake_case via
``source``.
"""

from rest_framework import serializers

from offers.models import Offer
from users.api.serializers import UserOutputSerializer


# --------------------------- helpers (pure functions) ---------------------------

def _extract_annotated(obj, attr, caster):
    v = getattr(obj, attr, None)
    return caster(v) if v is not None else None


# --------------------------------- serializers ---------------------------------

class CreateOfferDto(serializers.Serializer):
    """Input serializer for creating an offer. The author comes from the request."""

    name = serializers.CharField(min_length=10, max_length=100)
    description = serializers.CharField(max_length=1024, required=False, allow_blank=True, default="")
    city = serializers.ChoiceField(choices=Offer.City.choices)
    isPremium = serializers.BooleanField(source="is_premium", required=False, default=False)
    price = serializers.IntegerField(min_value=100, max_value=100000)


class UpdateOfferDto(serializers.Serializer):
    """Partial update of an offer; only supplied fields are validated and changed."""

    name = serializers.CharField(min_length=10, max_length=100, required=False)
    description = serializers.CharField(max_length=1024, required=False, allow_blank=True)
    city = serializers.ChoiceField(choices=Offer.City.choices, required=False)
    isPremium = serializers.BooleanField(source="is_premium", required=False)
    price = serializers.IntegerField(min_value=100, max_value=100000, required=False)


class OfferOutputSerializer(serializers.ModelSerializer):
    """Read serializer for an offer including the query-time derived fields."""

    isPremium = serializers.BooleanField(source="is_premium", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    commentsCount = serializers.IntegerField(source="comments_count", read_only=True)
    author = UserOutputSerializer(read_only=True)
    rating = serializers.SerializerMethodField()
    isFavorite = serializers.SerializerMethodField()

    class Meta:
        model = Offer
        fields = [
            "id",
            "name",
            "description",
            "city",
            "isPremium",
            "price",
            "createdAt",
            "author",
            "commentsCount",
            "rating",
            "isFavorite",
        ]

    def get_rating(self, obj):
        return _extract_annotated(obj, "rating", float)

    def get_isFavorite(self, obj):
        return bool(getattr(obj, "is_favorite", False))

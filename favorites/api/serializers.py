"""Favorites API serializers.

``AddFavoriteOfferDto`` validates that both identifiers have the store's
primary key format before the request reaches the services; each field
reports its own message.
"""

from rest_framework import serializers

from common.fields import IdField
from .messages import ADD_FAVORITE_MESSAGES


class AddFavoriteOfferDto(serializers.Serializer):
    """Input serializer for marking an offer as favorite."""

    offerId = IdField(error_messages={"invalid": ADD_FAVORITE_MESSAGES["offerId"]["invalidFormat"]})
    userId = IdField(error_messages={"invalid": ADD_FAVORITE_MESSAGES["userId"]["invalidFormat"]})

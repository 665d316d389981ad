"""Offers API views.

List and create offers on the same endpoint, list premium offers of a city,
and retrieve, patch or delete a single offer. The derived ``rating`` and
``isFavorite`` fields come from the offer service; ``isFavorite`` is keyed by
the authenticated viewer and is always false for anonymous callers.
"""

from django.http import Http404
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from common.validators import parse_non_negative_int
from core import services
from offers.constants import (
    ALLOWED_OFFER_SORTS,
    DEFAULT_OFFER_COUNT,
    DEFAULT_OFFER_SORT,
    DEFAULT_PREMIUM_OFFER_COUNT,
)
from offers.models import Offer
from .permissions import IsOfferAuthor
from .serializers import CreateOfferDto, OfferOutputSerializer, UpdateOfferDto


# ----------------------------- helpers (module-level) -----------------------------

def _favorites_of(request):
    user = request.user
    return user.id if user and user.is_authenticated else None


def _parse_sort(value):
    if not value:
        return DEFAULT_OFFER_SORT
    if value not in ALLOWED_OFFER_SORTS:
        raise ValidationError({"sort": f"Allowed values: {', '.join(sorted(ALLOWED_OFFER_SORTS))}."})
    return value


def _parse_city(value):
    if not value:
        raise ValidationError({"city": "This query parameter is required."})
    allowed = {c[0] for c in Offer.City.choices}
    if value not in allowed:
        raise ValidationError({"city": f"Allowed values: {', '.join(sorted(allowed))}."})
    return value


# --------------------------------------- views ---------------------------------------

class OfferListCreateAPIView(generics.ListCreateAPIView):
    """GET: listing with rating/isFavorite (public). POST: create offer (authenticated)."""

    offer_service = services.offer_service

    def get_permissions(self):
        """Anyone may list; only authenticated users may create."""
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get_serializer_class(self):
        """Use the output serializer for GET and the create DTO for POST."""
        if self.request.method == "GET":
            return OfferOutputSerializer
        return CreateOfferDto

    def get_queryset(self):
        params = self.request.query_params
        limit = parse_non_negative_int(params, "limit", DEFAULT_OFFER_COUNT)
        sort = _parse_sort(params.get("sort"))
        return self.offer_service.find(limit=limit, favorites_of=_favorites_of(self.request), sort=sort)

    def create(self, request, *args, **kwargs):
        """Validate and create an offer authored by the caller."""
        dto = self.get_serializer(data=request.data)
        dto.is_valid(raise_exception=True)
        offer = self.offer_service.create({**dto.validated_data, "author": request.user})
        offer = self.offer_service.find_by_id(offer.pk, favorites_of=request.user.id)
        return Response(OfferOutputSerializer(offer).data, status=status.HTTP_201_CREATED)


class PremiumOfferListAPIView(generics.ListAPIView):
    """GET /api/offers/premium/?city=Paris&count=3 -> newest premium offers of a city."""

    serializer_class = OfferOutputSerializer
    permission_classes = [AllowAny]
    offer_service = services.offer_service

    def get_queryset(self):
        params = self.request.query_params
        city = _parse_city(params.get("city"))
        count = parse_non_negative_int(params, "count", DEFAULT_PREMIUM_OFFER_COUNT)
        return self.offer_service.find_premium(count=count, city=city, favorites_of=_favorites_of(self.request))


class OfferRetrieveUpdateDestroyAPIView(generics.RetrieveUpdateDestroyAPIView):
    """GET: retrieve offer (public), PATCH/PUT: partial update, DELETE: remove (author only)."""

    serializer_class = OfferOutputSerializer
    offer_service = services.offer_service
    comment_service = services.comment_service

    def get_permissions(self):
        """Enforce authorship for modifications; reading is public."""
        if self.request.method in ["PATCH", "PUT", "DELETE"]:
            return [IsAuthenticated(), IsOfferAuthor()]
        return [AllowAny()]

    def get_object(self):
        offer = self.offer_service.find_by_id(self.kwargs["pk"], favorites_of=_favorites_of(self.request))
        if offer is None:
            raise Http404(f"Offer with id {self.kwargs['pk']} not found.")
        self.check_object_permissions(self.request, offer)
        return offer

    def update(self, request, *args, **kwargs):
        """Apply a partial update and return the full offer payload."""
        instance = self.get_object()
        dto = UpdateOfferDto(data=request.data, partial=True)
        dto.is_valid(raise_exception=True)
        self.offer_service.update_by_id(instance.pk, dto.validated_data)

        offer = self.offer_service.find_by_id(instance.pk, favorites_of=request.user.id)
        return Response(OfferOutputSerializer(offer).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        """Delete the offer together with its comments and respond with 204."""
        instance = self.get_object()
        self.comment_service.delete_by_offer_id(instance.pk)
        self.offer_service.delete_by_id(instance.pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

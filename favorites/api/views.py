"""Favorites API views.

List the caller's favorite offers, add an offer to them and remove it again.
All endpoints require authentication; a user only ever touches their own
favorites.
"""

from django.http import Http404
from rest_framework import generics, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from common.exceptions import Conflict
from core import services
from favorites.services import DuplicateFavoriteError
from offers.api.serializers import OfferOutputSerializer
from .serializers import AddFavoriteOfferDto


class FavoriteListCreateAPIView(generics.ListCreateAPIView):
    """GET: caller's favorite offers. POST: add an offer to the caller's favorites."""

    permission_classes = [IsAuthenticated]
    favorite_service = services.favorite_service
    offer_service = services.offer_service

    def get_serializer_class(self):
        """Use the offer serializer for GET and the favorite DTO for POST."""
        return OfferOutputSerializer if self.request.method == "GET" else AddFavoriteOfferDto

    # --- GET ---
    def get_queryset(self):
        return self.offer_service.find_favorites(self.request.user.id)

    # --- POST ---
    def create(self, request, *args, **kwargs):
        """Validate ids, check ownership and offer existence, then add the favorite."""
        dto = self.get_serializer(data=request.data)
        dto.is_valid(raise_exception=True)
        user_id = dto.validated_data["userId"]
        offer_id = dto.validated_data["offerId"]

        if user_id != request.user.id:
            raise PermissionDenied("You may only manage your own favorites.")
        if not self.offer_service.exists(offer_id):
            raise Http404(f"Offer with id {offer_id} not found.")

        try:
            self.favorite_service.create({"user_id": user_id, "offer_id": offer_id})
        except DuplicateFavoriteError as exc:
            raise Conflict(str(exc)) from exc

        offer = self.offer_service.find_by_id(offer_id, favorites_of=user_id)
        return Response(OfferOutputSerializer(offer).data, status=status.HTTP_201_CREATED)


class FavoriteDestroyAPIView(generics.DestroyAPIView):
    """DELETE /api/favorites/{offer_id}/ -> remove the offer from the caller's favorites."""

    permission_classes = [IsAuthenticated]
    favorite_service = services.favorite_service

    def destroy(self, request, *args, **kwargs):
        """Remove the favorite and return 204; 404 if it was not a favorite."""
        offer_id = self.kwargs["offer_id"]
        if self.favorite_service.delete(request.user.id, offer_id) is None:
            raise Http404(f"Offer with id {offer_id} is not a favorite.")
        return Response(status=status.HTTP_204_NO_CONTENT)

"""Comments API views.

List the comments of an offer (public) and create a comment on it
(authenticated). Both answer 404 when the offer does not exist.
"""

from django.http import Http404
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from comments.constants import DEFAULT_COMMENT_COUNT
from common.validators import parse_non_negative_int
from core import services
from .serializers import CommentOutputSerializer, CreateCommentDto


class CommentListCreateAPIView(generics.ListCreateAPIView):
    """GET: newest comments of an offer. POST: add a comment as the caller."""

    comment_service = services.comment_service
    offer_service = services.offer_service

    def get_permissions(self):
        """Authenticated users may comment; anyone may read."""
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get_serializer_class(self):
        """Use output serializer for GET and create DTO for POST."""
        return CommentOutputSerializer if self.request.method == "GET" else CreateCommentDto

    def _require_offer(self):
        offer_id = self.kwargs["offer_id"]
        if not self.offer_service.exists(offer_id):
            raise Http404(f"Offer with id {offer_id} not found.")
        return offer_id

    # --- GET ---
    def get_queryset(self):
        offer_id = self._require_offer()
        limit = parse_non_negative_int(self.request.query_params, "limit", DEFAULT_COMMENT_COUNT)
        return self.comment_service.find_by_offer_id(offer_id, limit=limit)

    # --- POST ---
    def create(self, request, *args, **kwargs):
        """Validate and create a comment; return the created representation."""
        offer_id = self._require_offer()
        dto = self.get_serializer(data=request.data)
        dto.is_valid(raise_exception=True)
        comment = self.comment_service.create(
            {**dto.validated_data, "offer_id": offer_id, "author": request.user}
        )
        return Response(CommentOutputSerializer(comment).data, status=status.HTTP_201_CREATED)

"""Comment service.

Creating a comment also bumps the offer's stored comment count; both writes
happen in one transaction.
"""

from django.db import transaction

from common.services import ModelService
from .constants import DEFAULT_COMMENT_COUNT
from .models import Comment


class CommentService(ModelService):
    """CRUD and per-offer queries over comments."""

    model = Comment

    def __init__(self, model=None, logger=None, *, offer_service):
        super().__init__(model, logger)
        self.offer_service = offer_service

    def get_queryset(self):
        return super().get_queryset().select_related("author")

    def create(self, dto):
        with transaction.atomic():
            comment = super().create(dto)
            self.offer_service.inc_comment_count(comment.offer_id)
        self.logger.info("New comment created for offer #%s", comment.offer_id)
        return comment

    def find_by_offer_id(self, offer_id, limit=DEFAULT_COMMENT_COUNT):
        """Newest comments of an offer, at most ``limit`` of them."""
        return list(self.get_queryset().filter(offer_id=offer_id).order_by("-created_at", "-id")[:limit])

    def delete_by_offer_id(self, offer_id) -> int:
        """Delete every comment of an offer and return how many were removed."""
        deleted, _ = self.model.objects.filter(offer_id=offer_id).delete()
        if deleted:
            self.logger.info("Deleted %s comment(s) of offer #%s", deleted, offer_id)
        return deleted

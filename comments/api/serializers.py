"""Comments API serializers.

Provide the input DTO for creating a comment and the read serializer. The
offer and the author are taken from the route and the request, never from
the payload.
"""

from rest_framework import serializers

from comments.models import Comment
from users.api.serializers import UserOutputSerializer


class CreateCommentDto(serializers.Serializer):
    """Input serializer for creating a new comment."""

    text = serializers.CharField(min_length=5, max_length=1024)
    rating = serializers.IntegerField(min_value=1, max_value=5)


class CommentOutputSerializer(serializers.ModelSerializer):
    """Read serializer for returning a comment."""

    offerId = serializers.IntegerField(source="offer_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    author = UserOutputSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "offerId", "text", "rating", "createdAt", "author"]

"""Offers API permissions.

Contains object-level permissions used by offer endpoints.
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsOfferAuthor(BasePermission):
    """Allow modifications only for the author of the offer.

    Read access is granted to everybody; the view decides on authentication.
    """

    message = "Only the offer author can modify this offer."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return request.user.is_authenticated and obj.author_id == request.user.id

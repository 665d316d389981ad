"""Users API permissions.

Registration is open to anonymous callers only; an authenticated user has no
reason to create a second account from the same session.
"""

from rest_framework.permissions import BasePermission
from rest_framework.request import Request
from rest_framework.views import View


class IsAnonymous(BasePermission):
    """Grant access only to anonymous (unauthenticated) users."""

    message = "Already authenticated users cannot register."

    def has_permission(self, request: Request, view: View) -> bool:
        return not request.user or not request.user.is_authenticated

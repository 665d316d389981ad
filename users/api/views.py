"""Users API views.

Implements registration, token-based login and the "who am I" check on the
login route. Passwords are hashed by the service; the token comes from DRF's
authtoken app.
"""

from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import Conflict
from core import services
from users.services import DuplicateEmailError
from .permissions import IsAnonymous
from .serializers import CreateUserDto, LoginUserDto, UserOutputSerializer


class RegistrationView(APIView):
    """POST /api/users/register/ -> create a user and return its representation."""

    permission_classes = [IsAnonymous]
    user_service = services.user_service

    def post(self, request, *args, **kwargs):
        dto = CreateUserDto(data=request.data)
        dto.is_valid(raise_exception=True)

        try:
            user = self.user_service.create(dto.validated_data)
        except DuplicateEmailError as exc:
            raise Conflict(str(exc)) from exc
        return Response(UserOutputSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """POST /api/users/login/ -> token; GET /api/users/login/ -> current user."""

    user_service = services.user_service

    def get_permissions(self):
        """Checking the session requires a token; logging in does not."""
        if self.request.method == "GET":
            return [IsAuthenticated()]
        return [AllowAny()]

    def get(self, request, *args, **kwargs):
        return Response(UserOutputSerializer(request.user).data, status=status.HTTP_200_OK)

    def post(self, request, *args, **kwargs):
        dto = LoginUserDto(data=request.data)
        dto.is_valid(raise_exception=True)

        user = self.user_service.verify(dto.validated_data["email"], dto.validated_data["password"])
        if user is None:
            raise AuthenticationFailed("Incorrect email or password.")

        token, _ = Token.objects.get_or_create(user=user)
        data = {
            "token": token.key,
            "email": user.email,
            "name": user.name,
            "avatar": user.avatar,
            "type": user.type,
            "user_id": user.id,
        }
        return Response(data, status=status.HTTP_200_OK)

"""Service wiring.

Concrete services are built once, with their collaborators passed through
the constructors, and shared by the API views.
"""

from comments.models import Comment
from comments.services import CommentService
from favorites.models import Favorite
from favorites.services import FavoriteService
from offers.models import Offer
from offers.services import OfferService
from users.models import User
from users.services import UserService

user_service = UserService(User)
offer_service = OfferService(Offer)
comment_service = CommentService(Comment, offer_service=offer_service)
favorite_service = FavoriteService(Favorite)

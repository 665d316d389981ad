from django.urls import path
from .views import CommentListCreateAPIView

urlpatterns = [
    path("offers/<int:offer_id>/comments/", CommentListCreateAPIView.as_view(), name="offer-comments"),
]

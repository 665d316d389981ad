from django.urls import path
from .views import FavoriteDestroyAPIView, FavoriteListCreateAPIView

urlpatterns = [
    path("favorites/", FavoriteListCreateAPIView.as_view(), name="favorite-list"),
    path("favorites/<int:offer_id>/", FavoriteDestroyAPIView.as_view(), name="favorite-detail"),
]

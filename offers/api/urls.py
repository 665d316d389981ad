from django.urls import path
from .views import OfferListCreateAPIView, OfferRetrieveUpdateDestroyAPIView, PremiumOfferListAPIView

urlpatterns = [
    path("offers/", OfferListCreateAPIView.as_view(), name="offer-list"),
    path("offers/premium/", PremiumOfferListAPIView.as_view(), name="offer-premium"),
    path("offers/<int:pk>/", OfferRetrieveUpdateDestroyAPIView.as_view(), name="offer-detail"),
]

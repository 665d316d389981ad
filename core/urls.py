"""Root URL configuration: admin plus the per-app API routes under /api/."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("users.api.urls")),
    path("api/", include("offers.api.urls")),
    path("api/", include("comments.api.urls")),
    path("api/", include("favorites.api.urls")),
]

from django.contrib import admin

from .models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """
    Favorite relations: which user marked which offer.
    """
    list_display = ("id", "user", "offer", "created_at")
    list_select_related = ("user", "offer")
    search_fields = ("user__email", "offer__name")
    ordering = ("-created_at", "-id")
    readonly_fields = ("created_at",)

from django.contrib import admin

from comments.models import Comment
from .models import Offer


class CommentInline(admin.TabularInline):
    """
    Shows the comments of an offer directly in the offer form.
    """
    model = Comment
    extra = 0
    fields = ("author", "rating", "text", "created_at")
    readonly_fields = ("created_at",)
    show_change_link = True


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    """
    Offer management:
    - comments inline
    - search and filter fields
    - stored comment count as a read-only column
    """
    inlines = [CommentInline]

    list_display = (
        "id",
        "name",
        "city",
        "is_premium",
        "price",
        "author_email",
        "comments_count",
        "created_at",
    )
    list_select_related = ("author",)
    search_fields = ("name", "description", "author__email", "author__name")
    list_filter = ("city", "is_premium", "created_at")
    date_hierarchy = "created_at"
    ordering = ("-created_at", "-id")
    readonly_fields = ("comments_count", "created_at", "updated_at")
    autocomplete_fields = ("author",)

    def author_email(self, obj):
        return obj.author.email if obj.author_id else ""
    author_email.short_description = "author"

from django.contrib import admin

from .models import Comment


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """
    Comment list: id, offer, author, rating and creation date.
    """
    list_display = ("id", "offer", "author", "rating", "created_at")
    list_select_related = ("offer", "author")
    search_fields = ("text", "offer__name", "author__email")
    list_filter = ("rating", "created_at")
    ordering = ("-created_at", "-id")
    readonly_fields = ("created_at",)

from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    User list with id, account type and admin flags. Password is read-only here.
    """
    list_display = (
        "id",
        "email",
        "name",
        "type",
        "is_staff",
        "is_superuser",
        "is_active",
        "created_at",
        "last_login",
    )
    ordering = ("-created_at", "-id")
    search_fields = ("email", "name")
    list_filter = ("type", "is_staff", "is_superuser", "is_active")
    readonly_fields = ("password", "created_at", "last_login")
    exclude = ("groups", "user_permissions")

from django.contrib import admin

from .models import ShopSession


@admin.register(ShopSession)
class ShopSessionAdmin(admin.ModelAdmin):
    list_display = ("id", "shop", "is_online", "expires", "updated_at")
    list_filter = ("is_online",)
    search_fields = ("id", "shop")
    exclude = ("access_token",)

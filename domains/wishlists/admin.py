from django.contrib import admin

from .models import WishlistItem, WishlistSyncState


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_id", "product_id", "shop", "created_at")
    list_filter = ("shop",)
    search_fields = ("customer_id", "product_id")
    ordering = ("-created_at",)


@admin.register(WishlistSyncState)
class WishlistSyncStateAdmin(admin.ModelAdmin):
    list_display = ("customer_id", "shop", "dirty", "last_pushed_at", "updated_at")
    list_filter = ("dirty", "shop")
    search_fields = ("customer_id",)
    readonly_fields = ("last_error",)

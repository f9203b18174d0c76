from django.contrib import admin

from .models import CustomerProfile


@admin.register(CustomerProfile)
class CustomerProfileAdmin(admin.ModelAdmin):
    list_display = ("customer_id", "shop", "first_name", "last_name", "email", "orders_count", "total_spent", "updated_at")
    list_filter = ("shop",)
    search_fields = ("customer_id", "email", "first_name", "last_name")

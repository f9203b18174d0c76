from django.urls import re_path

from .views_products import WishlistProductsAPI

urlpatterns = [
    re_path(r"^products/?$", WishlistProductsAPI.as_view(), name="wishlist-products"),
]

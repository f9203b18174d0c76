from django.urls import re_path

from .views import SendWishlistEmailAPI

urlpatterns = [
    re_path(r"^send-email/?$", SendWishlistEmailAPI.as_view(), name="send-wishlist-email"),
]

from django.urls import re_path

from .views import WishlistAPI

# 스토어프론트 스크립트가 끝 슬래시 없이 호출하는 경우도 받는다 (POST/DELETE 는 301 불가)
urlpatterns = [
    re_path(r"^wishlist/?$", WishlistAPI.as_view(), name="wishlist"),
    re_path(r"^apps/wishlist/api/wishlist/?$", WishlistAPI.as_view(), name="wishlist-app-proxy"),
]

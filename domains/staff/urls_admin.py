# domains/staff/urls_admin.py
from django.urls import include, path

from rest_framework.routers import DefaultRouter

from domains.staff.views import AdminWishlistCustomersAPI, AdminWishlistItemViewSet

router = DefaultRouter()
router.register(r"wishlist-items", AdminWishlistItemViewSet, basename="admin-wishlist-items")

urlpatterns = [
    path("", include(router.urls)),
    path("wishlist-customers/", AdminWishlistCustomersAPI.as_view(), name="admin-wishlist-customers"),
]

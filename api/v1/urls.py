# api/v1/urls.py
from django.urls import include, path

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    # --- Auth (관리자 대시보드용 JWT) ---
    path("auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    # --- Storefront ---
    path("", include("domains.wishlists.urls")),
    path("", include("domains.customers.urls")),
    path("", include("domains.notifications.urls")),
    path("", include("domains.catalog.urls_products")),
    # --- API Docs ---
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # --- Admin (관리자 API) ---
    path("admin/", include(("domains.staff.urls_admin", "staff_admin"))),
]

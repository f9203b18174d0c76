from drf_spectacular.utils import OpenApiParameter, extend_schema
from django_filters.rest_framework import DjangoFilterBackend
import django_filters as df
from rest_framework import filters, permissions, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from domains.staff.permissions import IsShopStaff
from domains.staff.serializers import WishlistDashboardSerializer
from domains.wishlists.models import WishlistItem
from domains.wishlists.serializers import WishlistItemReadSerializer
from domains.wishlists.services import customer_summaries


# ---------------------------------------------------------
# Wishlist dashboard (STAFF)
# ---------------------------------------------------------
class AdminWishlistCustomersAPI(APIView):
    """
    GET /api/v1/admin/wishlist-customers/?shop=<domain>
    고객별 위시리스트 개수 + 프로필 캐시 (없으면 placeholder)
    """
    permission_classes = [permissions.IsAuthenticated, IsShopStaff]

    @extend_schema(
        tags=["Admin • Wishlists"],
        parameters=[OpenApiParameter(name="shop", required=False, type=str)],
        responses={200: WishlistDashboardSerializer},
        operation_id="AdminWishlistCustomers",
    )
    def get(self, request):
        shop = (request.query_params.get("shop") or "").strip() or None
        data = customer_summaries(shop=shop)
        return Response(WishlistDashboardSerializer(data).data)


class WishlistItemFilter(df.FilterSet):
    customerId = df.CharFilter(field_name="customer_id")
    productId = df.CharFilter(field_name="product_id")
    shop = df.CharFilter(field_name="shop")
    created_after = df.IsoDateTimeFilter(field_name="created_at", lookup_expr="gte")

    class Meta:
        model = WishlistItem
        fields = ["customerId", "productId", "shop", "created_after"]


@extend_schema(tags=["Admin • Wishlists"])
class AdminWishlistItemViewSet(viewsets.ReadOnlyModelViewSet):
    """
    GET /api/v1/admin/wishlist-items/?shop=&customerId=
    GET /api/v1/admin/wishlist-items/{id}/
    """
    queryset = WishlistItem.objects.all().order_by("-created_at", "-id")
    serializer_class = WishlistItemReadSerializer
    permission_classes = [permissions.IsAuthenticated, IsShopStaff]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = WishlistItemFilter
    search_fields = ["customer_id", "product_id"]
    ordering_fields = ["created_at"]

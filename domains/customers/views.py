# domains/customers/views.py
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status, views
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from domains.shopify.client import ShopifyAdminClient
from domains.shopify.exceptions import ShopifyAPIError, UpstreamError

from .serializers import CustomerLookupRequestSerializer
from .services import fetch_and_cache_profile

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# POST /api/v1/customer/  body: {customerId, shop}
# Shopify 에서 고객 조회 → 프로필 캐시 저장
# ─────────────────────────────────────────────────────────────────────────────
class CustomerSyncAPI(views.APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="CustomerSync",
        request=CustomerLookupRequestSerializer,
        responses={200: dict, 400: dict, 401: dict, 404: dict, 500: dict},
    )
    def post(self, request):
        ser = CustomerLookupRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        customer_id = ser.validated_data["customerId"]
        shop = ser.validated_data["shop"]

        logger.info("Customer API called: customerId=%s shop=%s", customer_id, shop)

        client = ShopifyAdminClient.for_shop(shop)
        try:
            node, _ = fetch_and_cache_profile(customer_id, shop, client)
        except ShopifyAPIError as e:
            raise UpstreamError(error=str(e))

        if node is None:
            raise NotFound("Customer not found")

        return Response({"success": True, "customer": node}, status=status.HTTP_200_OK)

# domains/catalog/views_products.py
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status, views
from rest_framework.response import Response

from domains.shopify.client import ShopifyAdminClient
from domains.shopify.exceptions import ShopifyAPIError, UpstreamError

from .serializers import ProductsRequestSerializer, ProductsResponseSerializer
from .services import fetch_wishlist_products

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# POST /api/v1/products/  body: {productIds: [...], shop}
# 위시리스트 상품 카드 정보 (Shopify 데이터 자체가 응답이라 오류는 500으로 노출)
# ─────────────────────────────────────────────────────────────────────────────
class WishlistProductsAPI(views.APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="WishlistProducts",
        request=ProductsRequestSerializer,
        responses={200: ProductsResponseSerializer, 400: dict, 401: dict, 500: dict},
    )
    def post(self, request):
        ser = ProductsRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        product_ids = ser.validated_data["productIds"]
        shop = ser.validated_data["shop"]

        logger.info("Products request: %d id(s) for %s", len(product_ids), shop)

        client = ShopifyAdminClient.for_shop(shop)
        try:
            products = fetch_wishlist_products(product_ids, client)
        except ShopifyAPIError as e:
            logger.error("Error fetching products for %s: %s", shop, e)
            raise UpstreamError(error=str(e))

        return Response(
            {"message": "Products fetched successfully.", "products": products, "count": len(products)},
            status=status.HTTP_200_OK,
        )

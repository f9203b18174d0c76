# domains/notifications/views.py
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status, views
from rest_framework.response import Response

from domains.catalog.services import product_details_for_email
from domains.customers.services import get_profile
from domains.shopify.client import ShopifyAdminClient
from domains.shopify.sessions import get_offline_session
from domains.wishlists.services import list_by_customer

from .serializers import PRODUCT, SUMMARY, SendEmailRequestSerializer, SendEmailResponseSerializer
from .services import send_wishlist_email, send_wishlist_summary_email

logger = logging.getLogger(__name__)


def _fail(message: str, code: int) -> Response:
    return Response({"success": False, "message": message}, status=code)


# ─────────────────────────────────────────────────────────────────────────────
# POST /api/v1/send-email/
# body: {customerId, shop, emailType: "summary" | "product", productId?}
# ─────────────────────────────────────────────────────────────────────────────
class SendWishlistEmailAPI(views.APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="SendWishlistEmail",
        request=SendEmailRequestSerializer,
        responses={200: SendEmailResponseSerializer, 400: dict, 404: dict, 500: dict},
    )
    def post(self, request):
        ser = SendEmailRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        customer_id = ser.validated_data.get("customerId")
        shop = ser.validated_data.get("shop")
        email_type = ser.validated_data.get("emailType")
        product_id = ser.validated_data.get("productId")

        logger.info("Email API called: customerId=%s shop=%s type=%s productId=%s",
                    customer_id, shop, email_type, product_id)

        if not (customer_id and shop):
            return _fail("customerId and shop are required.", status.HTTP_400_BAD_REQUEST)

        # 1) 고객 메일 주소 (프로필 캐시)
        customer = get_profile(customer_id, shop)
        if customer is None or not customer.email:
            return _fail("Customer email not found.", status.HTTP_404_NOT_FOUND)

        # 2) Shopify 세션
        session = get_offline_session(shop)
        if session is None:
            return _fail("Shop session not found.", status.HTTP_404_NOT_FOUND)
        client = ShopifyAdminClient(shop, session.access_token)

        # 3) 유형별 발송
        if email_type == SUMMARY:
            items = list(list_by_customer(customer_id, shop))
            if not items:
                return _fail("No wishlist items found.", status.HTTP_404_NOT_FOUND)

            details = [product_details_for_email(i.product_id, client) for i in items]
            result = send_wishlist_summary_email(
                customer.email, customer.display_name, [d for d in details if d], shop
            )

        elif email_type == PRODUCT and product_id:
            details = product_details_for_email(product_id, client)
            if details is None:
                return _fail("Product details not found.", status.HTTP_404_NOT_FOUND)
            result = send_wishlist_email(customer.email, customer.display_name, details, shop)

        else:
            return _fail("Invalid email type or missing parameters.", status.HTTP_400_BAD_REQUEST)

        return Response(result, status=status.HTTP_200_OK if result.get("success") else status.HTTP_500_INTERNAL_SERVER_ERROR)

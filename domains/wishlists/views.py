# domains/wishlists/views.py
import logging

from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework import permissions, status, views
from rest_framework.response import Response

from .serializers import (
    WishlistMutationSerializer,
    WishlistQuerySerializer,
    WishlistResponseSerializer,
)
from .services import ADD, REMOVE, apply_wishlist_mutation, projection_for

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# GET / POST / DELETE  /api/v1/wishlist/
# (앱 프록시 경로 /api/v1/apps/wishlist/api/wishlist/ 도 같은 뷰)
# ─────────────────────────────────────────────────────────────────────────────
class WishlistAPI(views.APIView):
    permission_classes = [permissions.AllowAny]
    http_method_names = ["get", "post", "delete", "options"]

    @extend_schema(
        operation_id="WishlistList",
        parameters=[
            OpenApiParameter(name="customerId", required=True, type=str),
            OpenApiParameter(name="shop", required=True, type=str),
        ],
        responses={200: WishlistResponseSerializer, 400: dict},
    )
    def get(self, request):
        ser = WishlistQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        wishlist = projection_for(ser.validated_data["customerId"], ser.validated_data["shop"])
        return Response({"wishlist": wishlist, "count": len(wishlist)}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="WishlistAdd",
        request=WishlistMutationSerializer,
        responses={200: WishlistResponseSerializer, 400: dict},
        examples=[
            OpenApiExample(
                "기본 사용",
                value={"customerId": "1", "productId": "2", "shop": "a.myshopify.com"},
                request_only=True,
            )
        ],
    )
    def post(self, request):
        return self._mutate(request, ADD, "Added to wishlist successfully.")

    @extend_schema(
        operation_id="WishlistRemove",
        request=WishlistMutationSerializer,
        responses={200: WishlistResponseSerializer, 400: dict},
    )
    def delete(self, request):
        return self._mutate(request, REMOVE, "Removed from wishlist successfully.")

    def _mutate(self, request, action: str, message: str):
        ser = WishlistMutationSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        logger.info("Wishlist %s request: customerId=%s productId=%s shop=%s",
                    request.method, data["customerId"], data["productId"], data["shop"])

        wishlist = apply_wishlist_mutation(
            action,
            customer_id=data["customerId"],
            product_id=data["productId"],
            shop=data["shop"],
            customer_info=data.get("customerInfo"),
        )
        return Response({"message": message, "wishlist": wishlist}, status=status.HTTP_200_OK)

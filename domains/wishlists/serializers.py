from rest_framework import serializers

from domains.shopify import gid

from .models import WishlistItem

REQUIRED_MESSAGE = "customerId, productId and shop are required."
QUERY_REQUIRED_MESSAGE = "customerId and shop are required."

# WishlistItem.customer_id / product_id 컬럼 길이
ID_MAX_LENGTH = 64


def _normalize_ids(attrs, keys):
    # "gid://shopify/Product/" 처럼 끝 세그먼트가 비면 "" → 누락으로 취급
    for k in keys:
        if attrs.get(k):
            attrs[k] = gid.to_numeric_id(attrs[k])
    return attrs


class WishlistQuerySerializer(serializers.Serializer):
    customerId = serializers.CharField(required=False, allow_blank=True, max_length=255)
    shop = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def validate(self, attrs):
        attrs = _normalize_ids(attrs, ("customerId",))
        if not (attrs.get("customerId") and attrs.get("shop")):
            raise serializers.ValidationError(QUERY_REQUIRED_MESSAGE)
        return attrs


class WishlistMutationSerializer(serializers.Serializer):
    """
    POST/DELETE 공통 body. ID 는 숫자 / GID 둘 다 허용하고 숫자 ID 로 정규화해 돌려준다.
    customerInfo 는 형식만 느슨하게 받고 내용 검증은 프로필 갱신 단계에서 (실패해도 무시).
    """

    customerId = serializers.CharField(required=False, allow_blank=True, max_length=255)
    productId = serializers.CharField(required=False, allow_blank=True, max_length=255)
    shop = serializers.CharField(required=False, allow_blank=True, max_length=255)
    customerInfo = serializers.JSONField(required=False, allow_null=True)

    def validate(self, attrs):
        attrs = _normalize_ids(attrs, ("customerId", "productId"))
        if not all(attrs.get(k) for k in ("customerId", "productId", "shop")):
            raise serializers.ValidationError(REQUIRED_MESSAGE)
        if any(len(attrs[k]) > ID_MAX_LENGTH for k in ("customerId", "productId")):
            raise serializers.ValidationError(f"customerId and productId must be at most {ID_MAX_LENGTH} characters.")
        return attrs


class WishlistResponseSerializer(serializers.Serializer):
    message = serializers.CharField(required=False)
    wishlist = serializers.ListField(child=serializers.CharField())
    count = serializers.IntegerField(required=False)


class WishlistItemReadSerializer(serializers.ModelSerializer):
    customerId = serializers.CharField(source="customer_id", read_only=True)
    productId = serializers.CharField(source="product_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = WishlistItem
        fields = ("id", "customerId", "productId", "shop", "createdAt")

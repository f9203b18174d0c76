from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from rest_framework import serializers

from .models import CustomerProfile

# CustomerProfile.total_spent: DecimalField(max_digits=14, decimal_places=2)
MONEY_LIMIT = Decimal("1000000000000")
# PositiveIntegerField 상한 (PostgreSQL integer)
MAX_ORDERS_COUNT = 2147483647


def to_money(value) -> Decimal:
    # "12.5" / 12.5 / None 모두 소수 둘째 자리 Decimal 로
    try:
        amount = Decimal(str(value if value not in (None, "") else "0")).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
    except (InvalidOperation, ValueError):
        raise serializers.ValidationError("invalid amount")
    if not amount.is_finite() or abs(amount) >= MONEY_LIMIT:
        raise serializers.ValidationError("amount out of range")
    return amount


class CustomerInfoSerializer(serializers.Serializer):
    """스토어프론트가 보내는 customerInfo (camelCase). 보낸 필드만 반영한다."""

    firstName = serializers.CharField(source="first_name", max_length=255, required=False, allow_blank=True, allow_null=True)
    lastName = serializers.CharField(source="last_name", max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    ordersCount = serializers.IntegerField(
        source="orders_count", required=False, min_value=0, max_value=MAX_ORDERS_COUNT
    )
    totalSpent = serializers.CharField(source="total_spent", required=False, allow_null=True)

    def validate_totalSpent(self, v):
        return to_money(v)

    def validate(self, attrs):
        # null → "" (문자열 컬럼 기본값과 동일하게)
        return {k: ("" if v is None else v) for k, v in attrs.items()}


class CustomerLookupRequestSerializer(serializers.Serializer):
    customerId = serializers.CharField(error_messages={"required": "Missing customerId or shop", "blank": "Missing customerId or shop"})
    shop = serializers.CharField(error_messages={"required": "Missing customerId or shop", "blank": "Missing customerId or shop"})


class CustomerProfileSerializer(serializers.ModelSerializer):
    customerId = serializers.CharField(source="customer_id", read_only=True)
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    ordersCount = serializers.IntegerField(source="orders_count", read_only=True)
    totalSpent = serializers.DecimalField(source="total_spent", max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = CustomerProfile
        fields = ("customerId", "shop", "firstName", "lastName", "email", "phone", "ordersCount", "totalSpent")

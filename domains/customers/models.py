from decimal import Decimal

from django.db import models


class CustomerProfile(models.Model):
    """
    Shopify 고객 프로필 캐시.
    요청 페이로드 또는 Shopify 조회 결과가 있을 때만 upsert 된다 (stale 허용).
    """

    customer_id = models.CharField(max_length=64)
    shop = models.CharField(max_length=255)
    first_name = models.CharField(max_length=255, blank=True, default="")
    last_name = models.CharField(max_length=255, blank=True, default="")
    email = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=64, blank=True, default="")
    orders_count = models.PositiveIntegerField(default=0)
    total_spent = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "customer_profiles"
        constraints = [
            models.UniqueConstraint(
                fields=["customer_id", "shop"],
                name="uq_customer_profile_customer_shop",
            ),
        ]

    def __str__(self):
        return f"{self.customer_id}@{self.shop}"

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or "Customer"

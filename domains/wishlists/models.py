from django.db import models


class WishlistItem(models.Model):
    """
    (customer, product, shop) 위시리스트 멤버십.
    ID 는 숫자 형태로 저장하고, 중복은 DB 유니크 제약으로 막는다.
    """

    customer_id = models.CharField(max_length=64)
    product_id = models.CharField(max_length=64)
    shop = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "wishlist_items"
        constraints = [
            models.UniqueConstraint(
                fields=["customer_id", "product_id", "shop"],
                name="uq_wishlist_customer_product_shop",
            ),
        ]
        indexes = [
            models.Index(fields=["customer_id", "shop", "-created_at"], name="wishlist_cust_shop_recent_idx"),
            models.Index(fields=["shop"], name="wishlist_shop_idx"),
        ]

    def __str__(self):
        return f"{self.customer_id} ♥ {self.product_id} ({self.shop})"


class WishlistSyncState(models.Model):
    """
    (customer, shop) 메타필드 동기화 상태.
    로컬 변경 시 dirty, 푸시 성공 시 clean.
    항목이 모두 지워진 고객도 이 행으로 reconcile 대상에 남는다.
    """

    customer_id = models.CharField(max_length=64)
    shop = models.CharField(max_length=255)
    dirty = models.BooleanField(default=True)
    last_pushed_at = models.DateTimeField(null=True, blank=True)
    last_error = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "wishlist_sync_states"
        constraints = [
            models.UniqueConstraint(fields=["customer_id", "shop"], name="uq_wishlist_sync_customer_shop"),
        ]
        indexes = [models.Index(fields=["dirty", "shop"], name="wishlist_sync_dirty_idx")]

    def __str__(self):
        return f"{self.customer_id}@{self.shop} ({'dirty' if self.dirty else 'clean'})"

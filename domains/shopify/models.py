from django.db import models
from django.utils import timezone


class ShopSession(models.Model):
    """
    Shopify OAuth 세션 저장소.
    - offline 세션: id = "offline_<shop>", 만료 없음 (백그라운드 작업용)
    - online 세션: 스태프 사용자 단위, expires 존재
    """

    id = models.CharField(primary_key=True, max_length=255)
    shop = models.CharField(max_length=255, db_index=True)
    state = models.CharField(max_length=255, blank=True, default="")
    is_online = models.BooleanField(default=False)
    scope = models.TextField(blank=True, default="")
    expires = models.DateTimeField(null=True, blank=True)
    access_token = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "shopify_sessions"
        indexes = [models.Index(fields=["shop", "is_online"], name="shopify_ses_shop_online_idx")]

    def __str__(self):
        return f"{self.id} ({'online' if self.is_online else 'offline'})"

    @property
    def is_expired(self) -> bool:
        return bool(self.expires and self.expires <= timezone.now())

    @property
    def is_usable(self) -> bool:
        return bool(self.access_token) and not self.is_expired

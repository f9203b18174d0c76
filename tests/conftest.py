# tests/conftest.py
from uuid import uuid4

from django.contrib.auth import get_user_model

import pytest
from rest_framework.test import APIClient

from domains.customers.tasks import refresh_customer_profile
from domains.shopify import gid
from domains.shopify.exceptions import ShopSessionMissing
from domains.shopify.models import ShopSession
from domains.shopify.sessions import get_offline_session
from domains.wishlists.models import WishlistItem
from domains.wishlists.tasks import push_wishlist_metafield

User = get_user_model()

SHOP = "a.myshopify.com"


# ─────────────────────────────────────────────────────────────
# Celery: 브로커 없이 .delay 호출만 기록
# ─────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def enqueued(monkeypatch):
    """
    [(task_name, args), ...]
    테스트 중 어떤 태스크가 예약되었는지 확인할 때 사용
    """
    calls = []

    def _recorder(task):
        def _delay(*args, **kwargs):
            calls.append((task.name, args))
        return _delay

    for task in (push_wishlist_metafield, refresh_customer_profile):
        monkeypatch.setattr(task, "delay", _recorder(task))
    return calls


# ─────────────────────────────────────────────────────────────
# 클라이언트 & 인증
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        username=f"staff_{uuid4().hex[:6]}", password="Test1234!A", is_staff=True
    )


@pytest.fixture
def staff_client(staff_user):
    c = APIClient()
    c.force_authenticate(user=staff_user)
    return c


# ─────────────────────────────────────────────────────────────
# Shopify 세션 & 위시리스트 리소스
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def shop_session(db):
    return ShopSession.objects.create(
        id=f"offline_{SHOP}", shop=SHOP, is_online=False, access_token="shpat_test"
    )


@pytest.fixture
def wishlist_item_factory(db):
    """
    사용법: wishlist_item_factory("1", "2") / wishlist_item_factory("1", "3", shop="b.myshopify.com")
    """

    def _make(customer_id="1", product_id="2", shop=SHOP):
        return WishlistItem.objects.create(customer_id=customer_id, product_id=product_id, shop=shop)

    return _make


# ─────────────────────────────────────────────────────────────
# Shopify Admin API 가짜 (메모리)
# ─────────────────────────────────────────────────────────────
class FakeShopify:
    def __init__(self):
        self.customers = {}   # 숫자 ID → customer 노드
        self.products = {}    # 숫자 ID → product 노드
        self.metafields = {}  # (customer 숫자 ID, namespace, key) → value
        self.calls = []
        self.fail_with = None  # 설정 시 모든 호출에서 raise
        self.user_errors = []

    def client(self, shop, access_token="shpat_test", **kw):
        return FakeShopifyClient(self, shop)

    def add_product(self, product_id, title="Basic Tee", price="19.90", compare_at=None, qty=3, handle=None):
        pid = gid.to_numeric_id(product_id)
        self.products[pid] = {
            "id": gid.to_gid(gid.PRODUCT, pid),
            "title": title,
            "handle": handle or f"product-{pid}",
            "vendor": "Acme",
            "description": f"{title} description",
            "totalInventory": qty,
            "featuredImage": {"url": f"https://cdn.example.com/{pid}.png", "altText": None},
            "priceRangeV2": {"minVariantPrice": {"amount": price, "currencyCode": "USD"}},
            "variants": {
                "edges": [
                    {
                        "node": {
                            "id": f"gid://shopify/ProductVariant/{pid}0",
                            "price": price,
                            "compareAtPrice": compare_at,
                            "inventoryQuantity": qty,
                        }
                    }
                ]
            },
        }
        return self.products[pid]

    def add_customer(self, customer_id, **kw):
        cid = gid.to_numeric_id(customer_id)
        node = {
            "id": gid.to_gid(gid.CUSTOMER, cid),
            "firstName": kw.get("firstName", "Jane"),
            "lastName": kw.get("lastName", "Doe"),
            "email": kw.get("email", "jane@example.com"),
            "phone": kw.get("phone"),
            "numberOfOrders": kw.get("numberOfOrders", "3"),
            "amountSpent": {"amount": kw.get("amount", "120.5")},
        }
        self.customers[cid] = node
        return node


class FakeShopifyClient:
    def __init__(self, fake: FakeShopify, shop: str):
        self.fake = fake
        self.shop = shop

    def _call(self, name, *args):
        self.fake.calls.append((name, self.shop) + args)
        if self.fake.fail_with is not None:
            raise self.fake.fail_with

    def fetch_customer(self, customer_id):
        self._call("fetch_customer", customer_id)
        return self.fake.customers.get(gid.to_numeric_id(customer_id))

    def read_customer_metafield(self, customer_id, namespace, key):
        self._call("read_customer_metafield", customer_id)
        return self.fake.metafields.get((gid.to_numeric_id(customer_id), namespace, key))

    def set_customer_metafield(self, customer_id, namespace, key, value, type_="json"):
        self._call("set_customer_metafield", customer_id, value)
        if self.fake.user_errors:
            return list(self.fake.user_errors)
        self.fake.metafields[(gid.to_numeric_id(customer_id), namespace, key)] = value
        return []

    def fetch_products(self, product_ids):
        self._call("fetch_products", tuple(product_ids))
        nodes = [self.fake.products.get(gid.to_numeric_id(p)) for p in product_ids]
        return [n for n in nodes if n]

    def fetch_product(self, product_id):
        self._call("fetch_product", product_id)
        return self.fake.products.get(gid.to_numeric_id(product_id))


@pytest.fixture
def fake_shopify(monkeypatch):
    """
    ShopifyAdminClient 를 메모리 가짜로 교체.
    for_shop 은 실제와 같이 세션이 없으면 ShopSessionMissing.
    """
    fake = FakeShopify()

    def _factory(shop, access_token=None, **kw):
        return fake.client(shop, access_token)

    def _for_shop(shop):
        session = get_offline_session(shop)
        if session is None:
            raise ShopSessionMissing(f"No active session found for shop: {shop}")
        return fake.client(shop, session.access_token)

    _factory.for_shop = _for_shop

    for target in (
        "domains.shopify.client.ShopifyAdminClient",
        "domains.catalog.views_products.ShopifyAdminClient",
        "domains.customers.views.ShopifyAdminClient",
        "domains.customers.management.commands.fetch_customer.ShopifyAdminClient",
        "domains.notifications.views.ShopifyAdminClient",
    ):
        monkeypatch.setattr(target, _factory)
    return fake

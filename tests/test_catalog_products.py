# tests/test_catalog_products.py
import pytest

from domains.catalog.services import serialize_product, to_minor_units
from domains.shopify.exceptions import ShopifyAPIError

URL = "/api/v1/products/"
SHOP = "a.myshopify.com"


@pytest.mark.parametrize(
    "amount, expected",
    [("19.90", 1990), ("0.005", 1), (12, 1200), ("", None), (None, None), ("abc", None)],
)
def test_to_minor_units(amount, expected):
    assert to_minor_units(amount) == expected


def test_serialize_product_without_variants():
    card = serialize_product({"id": "gid://shopify/Product/5", "title": "Gift Card", "handle": "gift",
                              "variants": {"edges": []}})
    assert card["productId"] == "5"
    assert card["url"] == "/products/gift"
    assert card["price"] == 0
    assert card["compareAtPrice"] is None
    assert card["available"] is False
    assert card["variantId"] is None


@pytest.mark.django_db
class TestProductsEndpoint:
    def test_returns_cards(self, api_client, shop_session, fake_shopify):
        fake_shopify.add_product("2", title="Basic Tee", price="19.90", compare_at="25.00", qty=3, handle="basic-tee")
        fake_shopify.add_product("3", qty=0)

        r = api_client.post(URL, {"productIds": ["gid://shopify/Product/2", "3", "404"], "shop": SHOP},
                            format="json")
        assert r.status_code == 200, r.content
        body = r.json()
        assert body["message"] == "Products fetched successfully."
        assert body["count"] == 2

        tee = body["products"][0]
        assert tee["id"] == "gid://shopify/Product/2"
        assert tee["productId"] == "2"
        assert tee["price"] == 1990
        assert tee["compareAtPrice"] == 2500
        assert tee["available"] is True
        assert tee["url"] == "/products/basic-tee"
        assert tee["variantId"] == "20"
        assert body["products"][1]["available"] is False

    def test_empty_ids(self, api_client, shop_session, fake_shopify):
        r = api_client.post(URL, {"productIds": [], "shop": SHOP}, format="json")
        assert r.status_code == 200
        assert r.json()["count"] == 0

    def test_no_session_is_401(self, api_client, fake_shopify):
        r = api_client.post(URL, {"productIds": ["2"], "shop": SHOP}, format="json")
        assert r.status_code == 401
        assert fake_shopify.calls == []

    def test_upstream_failure_is_500(self, api_client, shop_session, fake_shopify):
        fake_shopify.fail_with = ShopifyAPIError("Status: 503", status_code=503)
        r = api_client.post(URL, {"productIds": ["2"], "shop": SHOP}, format="json")
        assert r.status_code == 500
        assert r.json() == {"message": "Shopify API request failed.", "error": "Status: 503"}

    def test_validation_messages(self, api_client):
        r = api_client.post(URL, {"shop": SHOP}, format="json")
        assert r.status_code == 400
        assert r.json()["message"] == "productIds array is required."

        r = api_client.post(URL, {"productIds": ["2"]}, format="json")
        assert r.status_code == 400
        assert r.json()["message"] == "Shop domain is required."

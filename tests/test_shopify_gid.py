# tests/test_shopify_gid.py
import pytest

from domains.shopify import gid


@pytest.mark.parametrize(
    "kind, raw, expected",
    [
        (gid.CUSTOMER, "123", "gid://shopify/Customer/123"),
        (gid.PRODUCT, 9, "gid://shopify/Product/9"),
        (gid.PRODUCT, " 9 ", "gid://shopify/Product/9"),
    ],
)
def test_to_gid_prefixes_numeric_ids(kind, raw, expected):
    assert gid.to_gid(kind, raw) == expected


def test_to_gid_keeps_existing_gid_even_for_other_kind():
    # 이미 GID 면 kind 가 달라도 손대지 않는다
    value = "gid://shopify/ProductVariant/55"
    assert gid.to_gid(gid.PRODUCT, value) == value


def test_to_numeric_id():
    assert gid.to_numeric_id("gid://shopify/Product/9") == "9"
    assert gid.to_numeric_id("9") == "9"
    assert gid.to_numeric_id(42) == "42"


def test_round_trip_and_idempotence():
    for raw in ("1", "8072455848240"):
        g = gid.to_gid(gid.PRODUCT, raw)
        assert gid.to_numeric_id(g) == raw
        assert gid.to_gid(gid.PRODUCT, g) == g
        assert gid.to_numeric_id(gid.to_numeric_id(g)) == raw


def test_is_gid():
    assert gid.is_gid("gid://shopify/Customer/1")
    assert not gid.is_gid("1")
    assert not gid.is_gid(None)

# domains/shopify/gid.py
"""
Shopify 숫자 ID <-> 글로벌 ID(GID) 변환.

    to_gid(CUSTOMER, "123")                  -> "gid://shopify/Customer/123"
    to_gid(CUSTOMER, "gid://shopify/Customer/123") -> 그대로
    to_numeric_id("gid://shopify/Product/9")  -> "9"
"""
from __future__ import annotations

GID_SCHEME = "gid://"
GID_PREFIX = "gid://shopify/"

CUSTOMER = "Customer"
PRODUCT = "Product"
VARIANT = "ProductVariant"


def is_gid(value) -> bool:
    return str(value or "").strip().startswith(GID_SCHEME)


def to_gid(kind: str, raw_id) -> str:
    """이미 GID(리소스 종류 무관)면 그대로, 아니면 kind 접두어를 붙인다."""
    raw = str(raw_id).strip()
    if is_gid(raw):
        return raw
    return f"{GID_PREFIX}{kind}/{raw}"


def to_numeric_id(gid) -> str:
    """마지막 '/' 뒤 세그먼트. '/'가 없으면 입력 그대로."""
    s = str(gid).strip()
    if "/" not in s:
        return s
    return s.rsplit("/", 1)[-1]

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from domains.shopify import gid

logger = logging.getLogger(__name__)


# -----------------------------
# 가격: "19.90" → 1990 (최소 통화 단위 정수)
# -----------------------------
def to_minor_units(amount) -> Optional[int]:
    if amount in (None, ""):
        return None
    try:
        return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        logger.warning("Unparseable price: %r", amount)
        return None


def _first_variant(node: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    edges = ((node.get("variants") or {}).get("edges")) or []
    return (edges[0] or {}).get("node") if edges else None


def serialize_product(node: Dict[str, Any]) -> Dict[str, Any]:
    """
    GraphQL Product 노드 → 스토어프론트 위시리스트 카드 형식.
    가격/재고는 첫 번째 variant 기준.
    """
    variant = _first_variant(node)
    handle = node.get("handle") or ""
    return {
        "id": node["id"],
        "productId": gid.to_numeric_id(node["id"]),
        "title": node.get("title"),
        "vendor": node.get("vendor"),
        "handle": handle,
        "url": f"/products/{handle}",
        "image": (node.get("featuredImage") or {}).get("url"),
        "price": (to_minor_units(variant.get("price")) or 0) if variant else 0,
        "compareAtPrice": to_minor_units(variant.get("compareAtPrice")) if variant else None,
        "available": bool(variant and (variant.get("inventoryQuantity") or 0) > 0),
        "variantId": gid.to_numeric_id(variant["id"]) if variant and variant.get("id") else None,
    }


def fetch_wishlist_products(product_ids: Iterable, client) -> List[Dict[str, Any]]:
    """상품 ID(숫자/GID) 목록 → 카드 리스트. 존재하지 않는 상품은 빠진다."""
    nodes = client.fetch_products(list(product_ids))
    return [serialize_product(n) for n in nodes]


def product_details_for_email(product_id, client) -> Optional[Dict[str, Any]]:
    """메일 본문용 상품 요약. 조회 실패/없음은 None."""
    from domains.shopify.exceptions import ShopifyAPIError

    try:
        product = client.fetch_product(product_id)
    except ShopifyAPIError as e:
        logger.error("Error fetching product details for %s: %s", product_id, e)
        return None
    if not product:
        return None

    price = ((product.get("priceRangeV2") or {}).get("minVariantPrice")) or {}
    return {
        "title": product.get("title"),
        "handle": product.get("handle") or "",
        "description": product.get("description") or "",
        "image": (product.get("featuredImage") or {}).get("url") or "",
        "price": f"{price['amount']} {price['currencyCode']}" if price.get("amount") else "",
    }

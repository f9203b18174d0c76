# domains/customers/services.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from django.db import DatabaseError

from domains.shopify import gid

from .models import CustomerProfile
from .serializers import CustomerInfoSerializer, to_money

logger = logging.getLogger(__name__)


# 프로필 캐시가 없을 때 관리자 화면에 쓰는 값
PLACEHOLDER_PROFILE = {
    "firstName": "Unknown",
    "lastName": "",
    "email": "N/A",
    "phone": "N/A",
    "ordersCount": 0,
}


def profile_fields_from_shopify(node: Dict[str, Any]) -> Dict[str, Any]:
    """GraphQL customer 노드 → CustomerProfile 필드"""
    return {
        "first_name": node.get("firstName") or "",
        "last_name": node.get("lastName") or "",
        "email": node.get("email") or "",
        "phone": node.get("phone") or "",
        "orders_count": int(node.get("numberOfOrders") or 0),
        "total_spent": to_money((node.get("amountSpent") or {}).get("amount")),
    }


def profile_fields_from_payload(data) -> Optional[Dict[str, Any]]:
    """
    요청의 customerInfo → 필드 딕셔너리.
    형식이 잘못되었으면 None (호출부는 프로필 갱신만 건너뛴다).
    """
    if not isinstance(data, dict) or not data:
        return None
    ser = CustomerInfoSerializer(data=data)
    if not ser.is_valid():
        logger.warning("Ignoring invalid customerInfo payload: %s", ser.errors)
        return None
    return dict(ser.validated_data)


def get_profile(customer_id: str, shop: str) -> Optional[CustomerProfile]:
    return CustomerProfile.objects.filter(
        customer_id=gid.to_numeric_id(customer_id), shop=shop
    ).first()


def upsert_profile(customer_id: str, shop: str, **fields) -> CustomerProfile:
    """(customer_id, shop) 기준 덮어쓰기 또는 생성"""
    profile, created = CustomerProfile.objects.update_or_create(
        customer_id=gid.to_numeric_id(customer_id),
        shop=shop,
        defaults=fields,
    )
    logger.info("Customer profile %s: %s@%s", "created" if created else "updated", profile.customer_id, shop)
    return profile


def save_profile_best_effort(customer_id: str, shop: str, fields: Dict[str, Any]) -> Optional[CustomerProfile]:
    """캐시 쓰기 실패는 로그만 남기고 삼킨다 (위시리스트 변경을 막지 않음)"""
    try:
        return upsert_profile(customer_id, shop, **fields)
    except (DatabaseError, OverflowError) as e:
        logger.error("Failed to save customer profile %s@%s: %s", customer_id, shop, e)
        return None


def fetch_and_cache_profile(customer_id: str, shop: str, client) -> Tuple[Optional[Dict[str, Any]], Optional[CustomerProfile]]:
    """
    Shopify 에서 고객을 조회해 캐시에 upsert.
    반환: (customer 노드, 저장된 프로필). 고객이 없으면 (None, None).
    Shopify 오류(ShopifyAPIError)는 호출부로 전파.
    """
    node = client.fetch_customer(customer_id)
    if not node:
        logger.warning("Customer %s not found in Shopify (%s)", customer_id, shop)
        return None, None
    profile = upsert_profile(customer_id, shop, **profile_fields_from_shopify(node))
    return node, profile

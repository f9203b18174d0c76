# domains/wishlists/sync.py
"""
로컬 위시리스트 → Shopify 고객 메타필드 동기화.

로컬 테이블이 원본이고 메타필드는 파생 값(프로젝션)이다.
항상 로컬 전체를 다시 계산해 통째로 덮어쓴다.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.utils import timezone

from .services import mark_synced, projection_for, record_sync_error

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    ok: bool
    products: List[str]
    errors: List[Dict[str, Any]] = field(default_factory=list)


def metafield_location() -> tuple:
    return settings.WISHLIST_METAFIELD_NAMESPACE, settings.WISHLIST_METAFIELD_KEY


def push_projection(customer_id: str, shop: str, client) -> SyncResult:
    """
    1) 로컬 항목 → GID 리스트  2) JSON 직렬화  3) metafieldsSet  4) userErrors 검사
    userErrors 는 로그만 남기고 SyncResult(ok=False) 로 돌려준다 (로컬 롤백 없음).
    네트워크/응답 오류는 ShopifyAPIError 로 전파 (재시도는 태스크 몫).
    """
    started = timezone.now()
    products = projection_for(customer_id, shop)
    namespace, key = metafield_location()

    errors = client.set_customer_metafield(customer_id, namespace, key, json.dumps(products))
    if errors:
        logger.warning("metafieldsSet userErrors for %s@%s: %s", customer_id, shop, errors)
        record_sync_error(customer_id, shop, errors)
        return SyncResult(ok=False, products=products, errors=errors)

    mark_synced(customer_id, shop, since=started)
    logger.info("Wishlist metafield synced for %s@%s (%d items)", customer_id, shop, len(products))
    return SyncResult(ok=True, products=products)


def read_projection(customer_id: str, shop: str, client) -> Optional[List[str]]:
    """
    원격 메타필드 값을 읽는다 (드리프트 비교용, 원본으로 쓰지 않음).
    값이 없으면 None, JSON 배열이 아니면 None.
    """
    namespace, key = metafield_location()
    raw = client.read_customer_metafield(customer_id, namespace, key)
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Malformed wishlist metafield for %s@%s: %r", customer_id, shop, raw[:200])
        return None
    return value if isinstance(value, list) else None


def is_in_sync(customer_id: str, shop: str, client) -> bool:
    return read_projection(customer_id, shop, client) == projection_for(customer_id, shop)

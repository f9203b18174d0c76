# domains/wishlists/services.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, transaction
from django.db.models import Count, Max
from django.utils import timezone

from domains.customers.models import CustomerProfile
from domains.customers.services import (
    PLACEHOLDER_PROFILE,
    profile_fields_from_payload,
    save_profile_best_effort,
)
from domains.shopify import gid
from domains.shopify.sessions import get_offline_session

from .models import WishlistItem, WishlistSyncState

logger = logging.getLogger(__name__)

ADD = "add"
REMOVE = "remove"


def _key(customer_id, product_id=None) -> Dict[str, str]:
    # 저장은 항상 숫자 ID ("2" 와 "gid://shopify/Product/2" 는 같은 항목)
    key = {"customer_id": gid.to_numeric_id(customer_id)}
    if product_id is not None:
        key["product_id"] = gid.to_numeric_id(product_id)
    return key


# =============================================================================
# 로컬 위시리스트 저장소
# =============================================================================
def exists(customer_id, product_id, shop: str) -> bool:
    return WishlistItem.objects.filter(shop=shop, **_key(customer_id, product_id)).exists()


def add(customer_id, product_id, shop: str) -> bool:
    """
    멱등 추가. 반환: 새로 만들었으면 True.
    동시 요청은 유니크 제약 충돌 → get_or_create 가 기존 행을 돌려준다.
    """
    _, created = WishlistItem.objects.get_or_create(shop=shop, **_key(customer_id, product_id))
    return created


def remove(customer_id, product_id, shop: str) -> int:
    """일치하는 행 전부 삭제. 반환: 삭제 개수 (0 이어도 오류 아님)"""
    deleted, _ = WishlistItem.objects.filter(shop=shop, **_key(customer_id, product_id)).delete()
    return deleted


def list_by_customer(customer_id, shop: str):
    return WishlistItem.objects.filter(shop=shop, **_key(customer_id)).order_by("-created_at", "-id")


def list_all():
    return WishlistItem.objects.order_by("-created_at", "-id")


def projection_for(customer_id, shop: str) -> List[str]:
    """로컬 항목 → 상품 GID 리스트 (최신순). 메타필드에 그대로 쓰는 값."""
    return [
        gid.to_gid(gid.PRODUCT, pid)
        for pid in list_by_customer(customer_id, shop).values_list("product_id", flat=True)
    ]


def mark_dirty(customer_id, shop: str) -> None:
    """로컬이 바뀌었으니 원격 메타필드를 다시 써야 한다"""
    WishlistSyncState.objects.update_or_create(
        shop=shop, **_key(customer_id), defaults={"dirty": True}
    )


def mark_synced(customer_id, shop: str, since) -> int:
    """
    since(프로젝션 계산 시각) 이후 다시 dirty 가 되지 않은 경우에만 clean.
    반환: 갱신된 행 수
    """
    return WishlistSyncState.objects.filter(
        shop=shop, updated_at__lte=since, **_key(customer_id)
    ).update(dirty=False, last_pushed_at=timezone.now(), last_error="")


def record_sync_error(customer_id, shop: str, errors) -> None:
    WishlistSyncState.objects.filter(shop=shop, **_key(customer_id)).update(last_error=str(errors)[:2000])


def customer_summaries(shop: Optional[str] = None) -> Dict[str, Any]:
    """
    관리자 대시보드용: (customer, shop) 별 위시리스트 개수 + 프로필 캐시.
    프로필이 없으면 placeholder.
    """
    items = list_all()
    if shop:
        items = items.filter(shop=shop)

    rows = list(
        items.values("customer_id", "shop")
        .annotate(product_count=Count("id"), last_added_at=Max("created_at"))
        .order_by("-last_added_at")
    )

    profiles = {
        (p.customer_id, p.shop): p
        for p in CustomerProfile.objects.filter(customer_id__in={r["customer_id"] for r in rows})
    }

    customers = []
    for r in rows:
        profile = profiles.get((r["customer_id"], r["shop"]))
        if profile is not None:
            info = {
                "customerId": profile.customer_id,
                "firstName": profile.first_name,
                "lastName": profile.last_name,
                "email": profile.email,
                "phone": profile.phone,
                "ordersCount": profile.orders_count,
                "totalSpent": str(profile.total_spent),
            }
        else:
            info = {"customerId": r["customer_id"], **PLACEHOLDER_PROFILE}
        customers.append(
            {
                "customerId": r["customer_id"],
                "shop": r["shop"],
                "productCount": r["product_count"],
                "lastAddedAt": r["last_added_at"],
                "customerInfo": info,
            }
        )

    return {
        "customers": customers,
        "totalCustomers": len(customers),
        "totalProducts": items.count(),
    }


# =============================================================================
# 요청 처리 흐름: 검증된 입력 → 로컬 변경 → 프로필 갱신 → 프로젝션 재계산 → 원격 푸시 예약
# =============================================================================
def enqueue_task(task, *args) -> bool:
    # 브로커 장애가 위시리스트 응답을 막지 않도록
    try:
        task.delay(*args)
        return True
    except Exception as e:
        logger.error("Failed to enqueue %s%s: %s", task.name, args, e)
        return False


def _resolve_session(shop: str):
    try:
        return get_offline_session(shop)
    except DatabaseError as e:
        logger.error("Session lookup failed for %s: %s", shop, e)
        return None


def _refresh_profile(customer_id: str, shop: str, customer_info, has_session: bool) -> None:
    fields = profile_fields_from_payload(customer_info)
    if fields:
        save_profile_best_effort(customer_id, shop, fields)
        return
    if has_session:
        from domains.customers.tasks import refresh_customer_profile
        enqueue_task(refresh_customer_profile, customer_id, shop)


def apply_wishlist_mutation(action: str, *, customer_id, product_id, shop: str, customer_info=None) -> List[str]:
    """
    action: ADD | REMOVE
    반환: 로컬 기준으로 다시 계산한 상품 GID 리스트.
    프로필 갱신/메타필드 푸시는 best-effort 라 실패해도 결과는 동일.
    """
    if action not in (ADD, REMOVE):
        raise ValueError(f"unknown wishlist action: {action}")

    customer_id = gid.to_numeric_id(customer_id)
    product_id = gid.to_numeric_id(product_id)

    session = _resolve_session(shop)

    with transaction.atomic():
        if action == ADD:
            created = add(customer_id, product_id, shop)
            logger.info("Wishlist add %s ♥ %s (%s): %s", customer_id, product_id, shop,
                        "created" if created else "already exists")
        else:
            deleted = remove(customer_id, product_id, shop)
            logger.info("Wishlist remove %s ♥ %s (%s): %s row(s)", customer_id, product_id, shop, deleted)
        mark_dirty(customer_id, shop)

    if action == ADD:
        _refresh_profile(customer_id, shop, customer_info, session is not None)

    wishlist = projection_for(customer_id, shop)

    if session is not None:
        from .tasks import push_wishlist_metafield
        enqueue_task(push_wishlist_metafield, customer_id, shop)
    else:
        logger.info("Skip metafield sync for %s: no session for %s", customer_id, shop)

    return wishlist

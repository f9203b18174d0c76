# domains/wishlists/tasks.py
from __future__ import annotations

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, retry_backoff=True, retry_jitter=True, acks_late=True,
             name="domains.wishlists.tasks.push_wishlist_metafield")
def push_wishlist_metafield(self, customer_id: str, shop: str) -> bool:
    """
    로컬 위시리스트 전체 → 고객 메타필드 덮어쓰기.
    반환: 원격 반영 성공 여부
    - 세션 없음: 건너뜀
    - 네트워크/응답 오류: 백오프 재시도
    - userErrors: 로그만 (재시도해도 같은 결과)
    """
    from domains.shopify.client import ShopifyAdminClient
    from domains.shopify.exceptions import ShopifyAPIError
    from domains.shopify.sessions import get_offline_session

    from .sync import push_projection

    session = get_offline_session(shop)
    if session is None:
        logger.info("Skip metafield push for %s: no session for %s", customer_id, shop)
        return False

    client = ShopifyAdminClient(shop, session.access_token)
    try:
        result = push_projection(customer_id, shop, client)
    except ShopifyAPIError as e:
        logger.warning("Metafield push failed for %s@%s (attempt %s): %s",
                       customer_id, shop, self.request.retries + 1, e)
        raise self.retry(exc=e)
    return result.ok


@shared_task(name="domains.wishlists.tasks.reconcile_wishlist_projections")
def reconcile_wishlist_projections() -> int:
    """
    (customer, shop) 전체를 돌며 원격 메타필드가 로컬과 다르면 푸시 예약.
    대상: 항목이 있는 쌍 + 아직 푸시되지 않은(dirty) 쌍 (항목이 0 개가 된 고객 포함).
    dirty 쌍은 비교 없이 바로 예약한다.
    반환: 예약한 푸시 수
    """
    from domains.shopify.client import ShopifyAdminClient
    from domains.shopify.exceptions import ShopifyAPIError
    from domains.shopify.sessions import get_offline_session

    from .models import WishlistItem, WishlistSyncState
    from .services import enqueue_task
    from .sync import is_in_sync

    dirty = set(WishlistSyncState.objects.filter(dirty=True).values_list("customer_id", "shop"))
    pairs = set(WishlistItem.objects.values_list("customer_id", "shop").distinct()) | dirty

    clients = {}
    queued = 0
    for customer_id, shop in sorted(pairs, key=lambda p: (p[1], p[0])):
        if shop not in clients:
            session = get_offline_session(shop)
            clients[shop] = ShopifyAdminClient(shop, session.access_token) if session else None
        client = clients[shop]
        if client is None:
            continue
        if (customer_id, shop) not in dirty:
            try:
                if is_in_sync(customer_id, shop, client):
                    continue
            except ShopifyAPIError as e:
                logger.warning("Drift check failed for %s@%s: %s", customer_id, shop, e)
                continue
        if enqueue_task(push_wishlist_metafield, customer_id, shop):
            queued += 1

    logger.info("Reconcile queued %d metafield push(es)", queued)
    return queued

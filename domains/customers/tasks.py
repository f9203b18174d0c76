# domains/customers/tasks.py
from __future__ import annotations

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, retry_backoff=True, retry_jitter=True, acks_late=True,
             name="domains.customers.tasks.refresh_customer_profile")
def refresh_customer_profile(self, customer_id: str, shop: str) -> bool:
    """
    Shopify 고객 조회 → 프로필 캐시 upsert.
    세션이 없으면 건너뛰고, Shopify 오류는 백오프 재시도.
    """
    from domains.shopify.client import ShopifyAdminClient
    from domains.shopify.exceptions import ShopifyAPIError
    from domains.shopify.sessions import get_offline_session

    from .services import fetch_and_cache_profile

    session = get_offline_session(shop)
    if session is None:
        logger.info("Skip profile refresh for %s: no session for %s", customer_id, shop)
        return False

    client = ShopifyAdminClient(shop, session.access_token)
    try:
        _, profile = fetch_and_cache_profile(customer_id, shop, client)
    except ShopifyAPIError as e:
        logger.warning("Profile refresh failed for %s@%s (attempt %s): %s",
                       customer_id, shop, self.request.retries + 1, e)
        raise self.retry(exc=e)
    return profile is not None

# domains/shopify/sessions.py
from __future__ import annotations

import logging
from typing import List, Optional

from .models import ShopSession

logger = logging.getLogger(__name__)


def find_sessions_by_shop(shop: str) -> List[ShopSession]:
    return list(ShopSession.objects.filter(shop=(shop or "").strip()).order_by("-updated_at"))


def get_offline_session(shop: str) -> Optional[ShopSession]:
    """
    shop 의 사용 가능한 세션 하나를 고른다.
    offline 세션 우선, 없으면 만료되지 않은 online 세션.
    토큰이 있는 세션이 없으면 None.
    """
    sessions = [s for s in find_sessions_by_shop(shop) if s.is_usable]
    if not sessions:
        logger.info("No usable Shopify session for shop=%s", shop)
        return None
    offline = [s for s in sessions if not s.is_online]
    return (offline or sessions)[0]

# domains/notifications/services.py
"""
위시리스트 메일 알림.

Shopify Admin API 에는 임의 메일 발송 API 가 없어 실제 발송은 하지 않는다.
메일 내용을 구성해 로그로 남기고 결과 딕셔너리를 돌려준다
(Shopify Flow / 외부 메일 서비스 연동 지점).
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

ADDED = "added"
REMOVED = "removed"


@dataclass
class EmailEnvelope:
    to: str
    subject: str
    shop: str
    product: Optional[str] = None
    product_count: Optional[int] = None


def _log_envelope(envelope: EmailEnvelope) -> None:
    logger.info("[EMAIL] %s", json.dumps(asdict(envelope), ensure_ascii=False))


def send_wishlist_email(customer_email: str, customer_name: str, product: Dict[str, Any],
                        shop: str, action: str = ADDED) -> Dict[str, Any]:
    """단일 상품 추가/삭제 알림"""
    if not customer_email:
        logger.info("No email address provided, skipping email")
        return {"success": False, "reason": "No email address"}

    subject = "Item Added to Your Wishlist" if action == ADDED else "Item Removed from Your Wishlist"
    envelope = EmailEnvelope(to=customer_email, subject=subject, shop=shop, product=product.get("title"))
    _log_envelope(envelope)
    logger.debug("Email for %s (%s): %s/products/%s", customer_name, action, shop, product.get("handle") or "")

    return {
        "success": True,
        "message": "Email notification logged",
        "details": {"to": customer_email, "subject": subject, "product": product.get("title")},
    }


def send_wishlist_summary_email(customer_email: str, customer_name: str,
                                products: List[Dict[str, Any]], shop: str) -> Dict[str, Any]:
    """위시리스트 전체 요약"""
    if not customer_email:
        logger.info("No email address provided, skipping email")
        return {"success": False, "reason": "No email address"}

    subject = f"Your Wishlist Summary - {len(products)} Items"
    _log_envelope(EmailEnvelope(to=customer_email, subject=subject, shop=shop, product_count=len(products)))
    logger.debug("Summary email for %s: %s", customer_name, [p.get("title") for p in products])

    return {
        "success": True,
        "message": "Email notification logged",
        "details": {"to": customer_email, "subject": subject, "productCount": len(products)},
    }

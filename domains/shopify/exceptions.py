from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class ShopifyAPIError(Exception):
    """Admin GraphQL 호출 실패 (네트워크, non-2xx, 최상위 errors, 응답 형식 오류)"""

    def __init__(self, message: str, *, status_code: int | None = None, errors=None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class ShopSessionMissing(APIException):
    """해당 shop 에 access token 이 있는 세션이 없을 때"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "No active session found for shop."
    default_code = "shop_session_missing"


class UpstreamError(APIException):
    """원격 데이터 자체가 응답인 경로(상품/고객 조회)에서 Shopify 실패를 그대로 노출"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Shopify API request failed."
    default_code = "upstream_error"

    def __init__(self, detail=None, code=None, error=None):
        super().__init__(detail, code)
        self.error = error

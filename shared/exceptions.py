# shared/exceptions.py
"""
DRF 전역 예외 핸들러.

모든 오류 응답을 {"message": ..., "error"?: ...} 형태로 통일한다.
- APIException (ValidationError / NotFound / MethodNotAllowed / ShopSessionMissing / UpstreamError ...)
  → 해당 status 그대로
- 그 외 예외 → 스택 트레이스 로그 후 500.
  DEBUG 일 때만 error / stack 필드를 붙인다.
"""
import logging
import traceback

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail) -> str:
    """ValidationError.detail(dict/list/str 중첩) 에서 첫 메시지"""
    if isinstance(detail, dict):
        for v in detail.values():
            return _first_message(v)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def json_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        body = {"message": _first_message(getattr(exc, "detail", response.data))}
        error = getattr(exc, "error", None)
        if error:
            body["error"] = error
        response.data = body
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
    body = {"message": "Internal server error."}
    if settings.DEBUG:
        body["error"] = str(exc)
        body["stack"] = traceback.format_exc()
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

# domains/staff/permissions.py
from rest_framework.permissions import BasePermission


class IsShopStaff(BasePermission):
    message = "관리자만 접근할 수 있습니다."

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        return bool(u and u.is_authenticated and (u.is_staff or u.is_superuser))

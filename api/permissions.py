"""
Admin permissions - only signed-in back-office admins may use the API
"""
from rest_framework import permissions
from core.constants import AdminRole


class IsAdminMember(permissions.BasePermission):
    """
    Permission for any active admin (admin or super_admin role).
    """

    def has_permission(self, request, view):
        """Check if user is authenticated and has an admin role"""
        if not (request.user and request.user.is_authenticated):
            return False
        return request.user.is_active and getattr(request.user, 'role', None) in AdminRole.values


class IsSuperAdmin(permissions.BasePermission):
    """
    Permission for super admins only
    """

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return getattr(request.user, 'role', None) == AdminRole.SUPER_ADMIN


class IsSuperAdminOrReadOnly(permissions.BasePermission):
    """
    Any admin may read; only super admins may write
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return IsAdminMember().has_permission(request, view)
        return IsSuperAdmin().has_permission(request, view)

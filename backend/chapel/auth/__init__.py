"""
Role-based access control for admin operations.

Usage:
    from chapel.auth import AdminRole, Permission, can_access

    if can_access(AdminRole.MODERATOR, {Permission.USERS_VIEW}):
        ...
"""

from .evaluator import can_access, has_permission, missing_permissions
from .permissions import PERMISSION_CATALOG, Permission, PermissionInfo, get_permission
from .roles import ROLE_PERMISSIONS, AdminRole, normalize_role, permissions_for

__all__ = [
    "AdminRole",
    "PERMISSION_CATALOG",
    "Permission",
    "PermissionInfo",
    "ROLE_PERMISSIONS",
    "can_access",
    "get_permission",
    "has_permission",
    "missing_permissions",
    "normalize_role",
    "permissions_for",
]

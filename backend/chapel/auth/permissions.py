"""
Permission Catalog - the fixed universe of admin permissions.

Every permission is declared once here. Roles and sections reference
permissions by id only and never duplicate the metadata.

SECURITY:
- Explicit permission enumeration only (closed enum)
- No wildcard permissions
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class Permission(str, Enum):
    """
    Admin permissions, identified by a dotted ``resource.action`` id.
    """
    # Content management
    SERMONS_CREATE = "content.sermons.create"
    SERMONS_EDIT = "content.sermons.edit"
    SERMONS_DELETE = "content.sermons.delete"
    ARTICLES_CREATE = "content.articles.create"
    ARTICLES_EDIT = "content.articles.edit"
    ARTICLES_DELETE = "content.articles.delete"

    # Topics and series
    TOPICS_CREATE = "topics.create"
    TOPICS_MANAGE = "topics.manage"
    SERIES_CREATE = "series.create"
    SERIES_MANAGE = "series.manage"

    # Users and notifications
    USERS_VIEW = "users.view"
    USERS_MANAGE_ROLES = "users.manage_roles"
    USERS_SEND_NOTIFICATIONS = "users.send_notifications"
    NOTIFICATIONS_MANAGE = "notifications.manage"

    # Media
    MEDIA_UPLOAD = "media.upload"
    MEDIA_MANAGE = "media.manage"

    # Analytics
    ANALYTICS_VIEW = "analytics.view"


@dataclass(frozen=True)
class PermissionInfo:
    """Human-readable metadata for a single permission."""

    id: str
    name: str
    description: str
    resource: str
    action: str


def _info(
    permission: Permission, name: str, description: str, resource: str, action: str
) -> tuple[Permission, PermissionInfo]:
    return permission, PermissionInfo(
        id=permission.value,
        name=name,
        description=description,
        resource=resource,
        action=action,
    )


PERMISSION_CATALOG: Final[Mapping[Permission, PermissionInfo]] = MappingProxyType(dict([
    _info(Permission.SERMONS_CREATE, "Create Sermons", "Create new sermon content", "sermons", "create"),
    _info(Permission.SERMONS_EDIT, "Edit Sermons", "Edit existing sermon content", "sermons", "update"),
    _info(Permission.SERMONS_DELETE, "Delete Sermons", "Delete sermon content", "sermons", "delete"),
    _info(Permission.ARTICLES_CREATE, "Create Articles", "Create new article content", "articles", "create"),
    _info(Permission.ARTICLES_EDIT, "Edit Articles", "Edit existing article content", "articles", "update"),
    _info(Permission.ARTICLES_DELETE, "Delete Articles", "Delete article content", "articles", "delete"),
    _info(Permission.TOPICS_CREATE, "Create Topics", "Create new content topics", "topics", "create"),
    _info(Permission.TOPICS_MANAGE, "Manage Topics", "Edit and delete topics", "topics", "manage"),
    _info(Permission.SERIES_CREATE, "Create Series", "Create new content series", "series", "create"),
    _info(Permission.SERIES_MANAGE, "Manage Series", "Edit and delete series", "series", "manage"),
    _info(Permission.USERS_VIEW, "View Users", "View user list and details", "users", "read"),
    _info(Permission.USERS_MANAGE_ROLES, "Manage User Roles", "Assign and modify user roles", "users", "manage_roles"),
    _info(Permission.USERS_SEND_NOTIFICATIONS, "Send Notifications", "Send notifications to users", "users", "notify"),
    _info(Permission.NOTIFICATIONS_MANAGE, "Manage Notifications", "Create and manage notifications", "notifications", "manage"),
    _info(Permission.MEDIA_UPLOAD, "Upload Media", "Upload media files", "media", "create"),
    _info(Permission.MEDIA_MANAGE, "Manage Media", "Delete and organize media files", "media", "manage"),
    _info(Permission.ANALYTICS_VIEW, "View Analytics", "View user engagement analytics", "analytics", "read"),
]))


def parse_permission(value: object) -> Permission | None:
    """Coerce a raw permission id to its enum member, or None if unknown."""
    if isinstance(value, Permission):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Permission(value)
    except ValueError:
        return None


def get_permission(
    permission_id: Permission | str,
    catalog: Mapping[Permission, PermissionInfo] = PERMISSION_CATALOG,
) -> PermissionInfo | None:
    """
    Look up permission metadata by id.

    Returns None for unknown ids instead of raising; callers decide whether
    absence is fatal.
    """
    permission = parse_permission(permission_id)
    if permission is None:
        return None
    return catalog.get(permission)


def permission_value(permission: Permission | str) -> str:
    """Plain string id for a permission member or raw id."""
    if isinstance(permission, Permission):
        return permission.value
    return str(permission)

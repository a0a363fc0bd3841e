"""
Role Policy - static role-to-permission grants for the admin surface.

Grants are configuration, not runtime state: there is no grant/revoke API
here. Role changes for individual users belong to user management.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from .permissions import PERMISSION_CATALOG, Permission, PermissionInfo, parse_permission


class AdminRole(str, Enum):
    """Closed set of admin roles."""
    SUPER_ADMIN = "super_admin"
    CONTENT_MANAGER = "content_manager"
    MODERATOR = "moderator"


# Keys and members compare equal to their plain string values.
RoleGrants = Mapping[str, frozenset[str]]

CONTENT_PERMISSIONS: Final[frozenset[Permission]] = frozenset({
    Permission.SERMONS_CREATE,
    Permission.SERMONS_EDIT,
    Permission.SERMONS_DELETE,
    Permission.ARTICLES_CREATE,
    Permission.ARTICLES_EDIT,
    Permission.ARTICLES_DELETE,
})

TAXONOMY_PERMISSIONS: Final[frozenset[Permission]] = frozenset({
    Permission.TOPICS_CREATE,
    Permission.TOPICS_MANAGE,
    Permission.SERIES_CREATE,
    Permission.SERIES_MANAGE,
})

MEDIA_PERMISSIONS: Final[frozenset[Permission]] = frozenset({
    Permission.MEDIA_UPLOAD,
    Permission.MEDIA_MANAGE,
})

ROLE_PERMISSIONS: Final[RoleGrants] = MappingProxyType({
    # Full access to everything
    AdminRole.SUPER_ADMIN: frozenset(Permission),

    # Content creation and management, no user administration
    AdminRole.CONTENT_MANAGER: frozenset({
        *CONTENT_PERMISSIONS,
        *TAXONOMY_PERMISSIONS,
        *MEDIA_PERMISSIONS,
        Permission.ANALYTICS_VIEW,
    }),

    # Limited editing and user communication
    AdminRole.MODERATOR: frozenset({
        Permission.SERMONS_EDIT,
        Permission.ARTICLES_EDIT,
        Permission.USERS_VIEW,
        Permission.USERS_SEND_NOTIFICATIONS,
        Permission.NOTIFICATIONS_MANAGE,
        Permission.ANALYTICS_VIEW,
    }),
})

# Legacy session role values mapped onto admin roles.
DEFAULT_ROLE_ALIASES: Final[Mapping[str, AdminRole]] = MappingProxyType({
    "admin": AdminRole.SUPER_ADMIN,
})


def parse_role(value: object) -> AdminRole | None:
    """Coerce a raw role value to its enum member, or None if unknown."""
    if isinstance(value, AdminRole):
        return value
    if not isinstance(value, str):
        return None
    try:
        return AdminRole(value)
    except ValueError:
        return None


def normalize_role(
    raw: str | None,
    aliases: Mapping[str, AdminRole | str] = DEFAULT_ROLE_ALIASES,
) -> AdminRole | None:
    """
    Resolve a role value read from the session into an AdminRole.

    Aliases are applied here, at the session boundary, so the evaluator
    only ever sees canonical roles.

    Args:
        raw: Role string as supplied by the identity provider
        aliases: Mapping of legacy role strings to canonical roles; keys are
            matched case-insensitively

    Returns:
        The canonical AdminRole, or None if the value is empty or not an
        admin role (e.g. "member")
    """
    if isinstance(raw, AdminRole):
        return raw
    if not isinstance(raw, str):
        return None
    value = raw.strip().lower()
    if not value:
        return None
    folded = {alias.strip().lower(): target for alias, target in aliases.items()}
    if value in folded:
        return parse_role(folded[value])
    return parse_role(value)


def permissions_for(
    role: AdminRole | str | None,
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> frozenset[str]:
    """
    Return the static grant set for a role.

    Unknown roles fail closed to the empty set. Lookups are by string value,
    so alternate grant tables may introduce roles outside AdminRole.
    """
    if not isinstance(role, str):
        return frozenset()
    return frozenset(grants.get(role, frozenset()))


def role_permission_details(
    role: AdminRole | str | None,
    grants: RoleGrants = ROLE_PERMISSIONS,
    catalog: Mapping[Permission, PermissionInfo] = PERMISSION_CATALOG,
) -> list[PermissionInfo]:
    """Return catalog metadata for every permission a role holds, sorted by id."""
    details = []
    for permission in permissions_for(role, grants):
        info = catalog.get(parse_permission(permission))  # type: ignore[arg-type]
        if info is not None:
            details.append(info)
    return sorted(details, key=lambda info: info.id)

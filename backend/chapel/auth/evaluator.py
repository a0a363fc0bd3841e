"""
Authorization Evaluator - pure permission checks over the role policy.

Every function here is a pure function of (role, grants): no I/O, no
caching, no exceptions for business outcomes. Denial is a plain False.
"""
from __future__ import annotations

from typing import Iterable

from .permissions import Permission, permission_value
from .roles import ROLE_PERMISSIONS, AdminRole, RoleGrants, permissions_for


def has_permission(
    role: AdminRole | str | None,
    permission_id: Permission | str,
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> bool:
    """
    Check if a role holds a specific permission.

    Unknown permission ids evaluate to False rather than raising.

    Args:
        role: The role to check
        permission_id: The permission to validate
        grants: Role grant table to evaluate against

    Returns:
        True if the role has the permission, False otherwise
    """
    if not isinstance(permission_id, str):
        return False
    return permission_id in permissions_for(role, grants)


def can_access(
    role: AdminRole | str | None,
    required_permission_ids: Iterable[Permission | str],
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> bool:
    """
    Check if a role holds ALL of the required permissions.

    An empty requirement is satisfied by every role.
    """
    granted = permissions_for(role, grants)
    return all(
        isinstance(permission, str) and permission in granted
        for permission in required_permission_ids
    )


def missing_permissions(
    role: AdminRole | str | None,
    required_permission_ids: Iterable[Permission | str],
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> frozenset[str]:
    """Return the required permission ids the role does not hold."""
    granted = permissions_for(role, grants)
    return frozenset(
        permission_value(permission)
        for permission in required_permission_ids
        if not (isinstance(permission, str) and permission in granted)
    )

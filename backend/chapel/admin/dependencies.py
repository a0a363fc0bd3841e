"""
Admin Dependencies - permission-based route protection.

The host application's auth layer resolves the signed-in actor and stores
the raw session role on ``request.state.role`` (``None`` for a signed-in
actor without a role). A request without that attribute is treated as
unauthenticated. No tokens or sessions are handled here.

All permission checks enforce:
- Actor must be authenticated (401 if not)
- Actor must hold an admin role after alias normalization (403 if not)
- Actor must hold the exact role a route is reserved for (403 if not)
- Actor must hold ALL required permissions (403 if not)
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from fastapi import Request

from chapel.auth.permissions import Permission, permission_value
from chapel.auth.roles import AdminRole, normalize_role
from chapel.config import settings
from chapel.errors import AuthError, PermissionError

from .guard import AccessOutcome, evaluate_access

logger = logging.getLogger("chapel.rbac")

_UNSET = object()


def get_current_role(request: Request) -> AdminRole | None:
    """Resolve the current actor's admin role, or None for non-admins."""
    raw_role = getattr(request.state, "role", None)
    return normalize_role(raw_role, settings.role_aliases)


def enforce_access(
    request: Request,
    required: Iterable[Permission | str] = (),
    *,
    required_role: AdminRole | None = None,
) -> AdminRole:
    """
    Evaluate the guard for the current request and raise on denial.

    Returns:
        The actor's AdminRole when access is allowed

    Raises:
        AuthError: If no actor is signed in
        PermissionError: If the actor is not an admin, holds a different role
            than ``required_role``, or lacks permissions
    """
    required_ids = sorted({permission_value(p) for p in required})
    raw_role = getattr(request.state, "role", _UNSET)
    authenticated = raw_role is not _UNSET

    decision = evaluate_access(
        raw_role if authenticated else None,
        required_ids,
        authenticated=authenticated,
        required_role=required_role,
        aliases=settings.role_aliases,
    )
    if decision.allowed and decision.role is not None:
        return decision.role

    if decision.outcome is AccessOutcome.UNAUTHENTICATED:
        raise AuthError("Please sign in to access the admin dashboard")

    missing = sorted(decision.missing)
    logger.warning(
        "Admin access denied: method=%s path=%s role=%s outcome=%s missing=%s",
        request.method,
        request.url.path,
        raw_role,
        decision.outcome.value,
        ",".join(missing),
    )

    if decision.outcome is AccessOutcome.NOT_ADMIN:
        raise PermissionError(
            "Administrative privileges required",
            details={"role": raw_role},
        )

    if decision.outcome is AccessOutcome.ROLE_REQUIRED and required_role is not None:
        raise PermissionError(
            f"This section requires the {required_role.value} role",
            role=decision.role.value if decision.role else None,
            required_role=required_role.value,
        )

    raise PermissionError(
        f"Permission denied: requires all of {required_ids}",
        required_permissions=required_ids,
        missing_permissions=missing,
    )


def require_admin_permissions(*permissions: Permission) -> Callable:
    """
    Enforce that the actor holds ALL of the given permissions.

    With no permissions, only an authenticated admin role is required.

    Returns:
        Dependency function resolving to the actor's AdminRole
    """
    async def dependency(request: Request) -> AdminRole:
        return enforce_access(request, permissions)

    return dependency


def require_admin_permission(permission: Permission) -> Callable:
    """Enforce a single admin permission."""
    return require_admin_permissions(permission)


def require_admin_role(role: AdminRole) -> Callable:
    """
    Reserve a route for one admin role, after alias normalization.

    Roles are matched exactly: there is no hierarchy between admin roles.
    """
    async def dependency(request: Request) -> AdminRole:
        return enforce_access(request, required_role=role)

    return dependency

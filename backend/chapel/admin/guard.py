"""
Access guard decision for protected admin screens and actions.

The decision is binary and terminal per navigation attempt: render the
protected content, or deny with a reason the caller turns into a redirect
or an error response.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from chapel.auth.evaluator import missing_permissions
from chapel.auth.permissions import Permission
from chapel.auth.roles import (
    DEFAULT_ROLE_ALIASES,
    ROLE_PERMISSIONS,
    AdminRole,
    RoleGrants,
    normalize_role,
)


class AccessOutcome(str, Enum):
    ALLOWED = "allowed"
    UNAUTHENTICATED = "unauthenticated"
    NOT_ADMIN = "not_admin"
    ROLE_REQUIRED = "role_required"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AccessDecision:
    outcome: AccessOutcome
    role: AdminRole | None = None
    missing: frozenset[str] = field(default_factory=frozenset)

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.ALLOWED


def evaluate_access(
    raw_role: str | None,
    required: Iterable[Permission | str] = (),
    *,
    authenticated: bool = True,
    required_role: AdminRole | None = None,
    aliases: Mapping[str, AdminRole | str] = DEFAULT_ROLE_ALIASES,
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> AccessDecision:
    """
    Decide whether an actor may open a protected admin area.

    Args:
        raw_role: Role value from the session, before alias normalization
        required: Permissions that must ALL be held
        authenticated: Whether the session provider reports a signed-in actor
        required_role: Exact admin role the area is reserved for, if any
        aliases: Legacy role aliases applied at this boundary
        grants: Role grant table to evaluate against

    Returns:
        AccessDecision with the outcome and, when forbidden, the missing ids
    """
    if not authenticated:
        return AccessDecision(AccessOutcome.UNAUTHENTICATED)

    role = normalize_role(raw_role, aliases)
    if role is None:
        return AccessDecision(AccessOutcome.NOT_ADMIN)

    if required_role is not None and role != required_role:
        return AccessDecision(AccessOutcome.ROLE_REQUIRED, role=role)

    missing = missing_permissions(role, required, grants)
    if missing:
        return AccessDecision(AccessOutcome.FORBIDDEN, role=role, missing=missing)

    return AccessDecision(AccessOutcome.ALLOWED, role=role)

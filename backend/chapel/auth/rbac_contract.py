"""
RBAC Contract - consistency checks over the static policy tables.

The permission catalog, role grants and section registry are configuration.
A grant or section that references a permission missing from the catalog
is a configuration defect, so it is caught here at import/startup time
instead of being surfaced to end users at lookup time.

SECURITY:
- No wildcard permissions
- Every referenced permission must exist in the catalog
"""
from __future__ import annotations

import logging
import re
from typing import Final, Mapping, Sequence

from chapel.admin.sections import ADMIN_SECTIONS, Section

from .permissions import PERMISSION_CATALOG, Permission, PermissionInfo, parse_permission
from .roles import ROLE_PERMISSIONS, AdminRole, RoleGrants

logger = logging.getLogger("chapel.rbac")

# resource.action or resource.sub.action, lower-case segments
PERMISSION_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z_]+(\.[a-z_]+){1,2}$")


def _text(value: object) -> str:
    return str(getattr(value, "value", value))


def validate_permission(
    permission: str,
    catalog: Mapping[Permission, PermissionInfo] = PERMISSION_CATALOG,
) -> None:
    """
    Validate that a permission id is explicit and known to the catalog.

    Raises:
        ValueError: If the permission contains wildcards or is not in the catalog
    """
    if "*" in permission:
        raise ValueError(
            f"SECURITY VIOLATION: Wildcard permission '{permission}' is FORBIDDEN. "
            "All permissions must be explicit."
        )

    if parse_permission(permission) not in catalog:
        raise ValueError(f"Invalid permission '{_text(permission)}'")


def validate_contract(
    catalog: Mapping[Permission, PermissionInfo] = PERMISSION_CATALOG,
    grants: RoleGrants = ROLE_PERMISSIONS,
    sections: Sequence[Section] = ADMIN_SECTIONS,
) -> list[str]:
    """
    Check the policy tables against each other.

    Returns:
        list[str]: Human-readable contract violations (empty when valid)
    """
    errors: list[str] = []

    for permission in Permission:
        if permission not in catalog:
            errors.append(f"Permission '{permission.value}' has no catalog entry")

    for key, info in catalog.items():
        if info.id != key:
            errors.append(f"Catalog key '{_text(key)}' does not match permission id '{info.id}'")
        if not PERMISSION_ID_PATTERN.match(info.id):
            errors.append(f"Permission id '{info.id}' is not a dotted resource.action path")
        if not info.resource or not info.action:
            errors.append(f"Permission '{info.id}' is missing resource or action")

    for role, permissions in grants.items():
        if not isinstance(role, AdminRole):
            errors.append(f"Invalid role in grants: {_text(role)}")
        for permission in sorted(permissions):
            try:
                validate_permission(permission, catalog)
            except ValueError as e:
                errors.append(f"Role '{_text(role)}' has invalid permission: {e}")

    seen: set[str] = set()
    for section in sections:
        if not section.id:
            errors.append(f"Section '{section.title}' has an empty id")
        elif section.id in seen:
            errors.append(f"Duplicate section id '{section.id}'")
        seen.add(section.id)

        for permission in sorted(section.required_permissions):
            try:
                validate_permission(permission, catalog)
            except ValueError as e:
                errors.append(f"Section '{section.id}' requires invalid permission: {e}")

    return errors


def assert_contract(
    catalog: Mapping[Permission, PermissionInfo] = PERMISSION_CATALOG,
    grants: RoleGrants = ROLE_PERMISSIONS,
    sections: Sequence[Section] = ADMIN_SECTIONS,
) -> None:
    """
    Fail fast when the policy tables are inconsistent.

    Raises:
        RuntimeError: Listing every contract violation found
    """
    errors = validate_contract(catalog, grants, sections)
    if errors:
        raise RuntimeError(
            "RBAC contract validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    logger.debug(
        "RBAC contract valid: %d permissions, %d roles, %d sections",
        len(catalog),
        len(grants),
        len(sections),
    )


# Validate the production tables on import (fail-fast)
assert_contract()

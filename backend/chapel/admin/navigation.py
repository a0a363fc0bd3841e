"""
Section Resolver - the single source of admin navigation for a role.

Both the dashboard list and the sidebar render from available_sections(),
so the two surfaces cannot drift apart.
"""
from __future__ import annotations

from typing import Sequence

from chapel.auth.evaluator import can_access
from chapel.auth.roles import ROLE_PERMISSIONS, AdminRole, RoleGrants

from .sections import ADMIN_SECTIONS, DEFAULT_ROUTE_PREFIX, Section

OVERVIEW_SECTION_ID = "overview"


def available_sections(
    role: AdminRole | str | None,
    sections: Sequence[Section] = ADMIN_SECTIONS,
    grants: RoleGrants = ROLE_PERMISSIONS,
) -> list[Section]:
    """
    Return the sections a role may access, in registry order.

    Recomputed on every call. Roles missing from the grant table get an
    empty list, even for sections without requirements.
    """
    if not isinstance(role, str) or role not in grants:
        return []
    return [
        section
        for section in sections
        if can_access(role, section.required_permissions, grants)
    ]


def active_section_id(
    path: str,
    sections: Sequence[Section],
    prefix: str = DEFAULT_ROUTE_PREFIX,
) -> str | None:
    """
    Match a navigation path to the section it belongs to.

    The bare admin root highlights the overview section. Nested routes
    (``/admin/users/42``) match their parent section.
    """
    root = prefix.rstrip("/")
    if path in (root, f"{root}/"):
        if any(section.id == OVERVIEW_SECTION_ID for section in sections):
            return OVERVIEW_SECTION_ID
        return None

    for section in sections:
        section_path = section.route_path(prefix)
        if path == section_path or path.startswith(f"{section_path}/"):
            return section.id
    return None

"""
Admin Router - navigation and permission introspection endpoints.

Every admin surface (dashboard list, sidebar) reads its menu from
GET /admin/sections so both render the same role-filtered list.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from chapel.auth.permissions import PERMISSION_CATALOG, Permission, permission_value
from chapel.auth.roles import ROLE_PERMISSIONS, AdminRole, role_permission_details
from chapel.config import settings
from chapel.errors import NotFoundError

from .dependencies import enforce_access, get_current_role, require_admin_permission
from .navigation import available_sections
from .schemas import (
    PermissionRead,
    RoleMatrix,
    RolePermissionList,
    RoleRead,
    SectionList,
    SectionRead,
)
from .sections import Section, get_section

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)


def _section_read(section: Section) -> SectionRead:
    return SectionRead(
        id=section.id,
        title=section.title,
        description=section.description,
        icon=section.icon,
        route=section.route_path(settings.admin_route_prefix),
        required_permissions=sorted(
            permission_value(p) for p in section.required_permissions
        ),
    )


@router.get("/sections", response_model=SectionList)
async def list_sections(
    role: AdminRole | None = Depends(get_current_role),
) -> SectionList:
    """
    List the admin sections the current actor may open, in menu order.

    Non-admin actors receive an empty list.
    """
    return SectionList(
        role=role.value if role else None,
        items=[_section_read(section) for section in available_sections(role)],
    )


@router.get("/sections/{section_id}", response_model=SectionRead)
async def read_section(section_id: str, request: Request) -> SectionRead:
    """
    Guard a single section: 404 if unknown, 401/403 if the actor may not open it.
    """
    section = get_section(section_id)
    if section is None:
        raise NotFoundError(f"Section '{section_id}' not found")
    enforce_access(request, section.required_permissions)
    return _section_read(section)


@router.get("/permissions", response_model=RolePermissionList)
async def list_my_permissions(
    role: AdminRole | None = Depends(get_current_role),
) -> RolePermissionList:
    """List permission metadata for the current actor's role."""
    return RolePermissionList(
        role=role.value if role else None,
        permissions=[
            PermissionRead.model_validate(info) for info in role_permission_details(role)
        ],
    )


@router.get("/roles", response_model=RoleMatrix)
async def role_matrix(
    _: AdminRole = Depends(require_admin_permission(Permission.USERS_MANAGE_ROLES)),
) -> RoleMatrix:
    """
    Full role/permission matrix for the role management screen.

    Required permission: USERS_MANAGE_ROLES
    """
    return RoleMatrix(
        roles=[
            RoleRead(
                role=role.value,
                permissions=sorted(
                    permission_value(p) for p in ROLE_PERMISSIONS.get(role, ())
                ),
            )
            for role in AdminRole
        ],
        permission_labels={
            permission.value: info.name for permission, info in PERMISSION_CATALOG.items()
        },
    )

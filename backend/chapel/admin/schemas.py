from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PermissionRead(BaseModel):
    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    resource: str = Field(..., min_length=1, max_length=100)
    action: str = Field(..., min_length=1, max_length=100)

    model_config = ConfigDict(from_attributes=True)


class RolePermissionList(BaseModel):
    role: str | None
    permissions: list[PermissionRead]


class SectionRead(BaseModel):
    id: str
    title: str
    description: str
    icon: str
    route: str
    required_permissions: list[str]


class SectionList(BaseModel):
    role: str | None
    items: list[SectionRead]


class RoleRead(BaseModel):
    role: str
    permissions: list[str]


class RoleMatrix(BaseModel):
    roles: list[RoleRead]
    permission_labels: dict[str, str]

"""Pydantic models for AIMS roles and the permissions they grant."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import ModifiedCreated


class Permission(str, Enum):
    ALLOWED = "allowed"
    DENIED = "denied"


class Role(BaseModel):
    """Role definition returned by the AIMS role endpoints."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    permissions: dict[str, Permission] = Field(default_factory=dict)
    version: int | None = None
    global_: bool | None = Field(default=None, alias="global")
    legacy_permissions: list[str] = Field(default_factory=list)
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class RoleList(BaseModel):
    roles: list[Role] = Field(default_factory=list)


class CreateRoleRequest(BaseModel):
    """Payload used to create an account role."""

    name: str
    permissions: dict[str, Permission]

    model_config = ConfigDict(extra="forbid")


class UpdateRoleRequest(BaseModel):
    """Payload used to update an account role."""

    name: str | None = None
    permissions: dict[str, Permission] | None = None

    model_config = ConfigDict(extra="forbid")


class RoleIdList(BaseModel):
    role_ids: list[str] = Field(default_factory=list)


class PermissionList(BaseModel):
    """Effective permissions of a user, one single-entry mapping per grant."""

    permissions: list[dict[str, Permission]] = Field(default_factory=list)


__all__ = [
    "CreateRoleRequest",
    "Permission",
    "PermissionList",
    "Role",
    "RoleIdList",
    "RoleList",
    "UpdateRoleRequest",
]

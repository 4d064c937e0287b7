"""Re-export typed models for the alertlogic SDK."""

from __future__ import annotations

from .aims import (
    AccessKey,
    Account,
    AccountDetails,
    AccountRelationship,
    AuthenticateResponse,
    Authentication,
    CreateUserRequest,
    LinkedUser,
    UpdateAccountDetailsRequest,
    UpdateUserRequest,
    User,
    UserCredential,
    UserList,
)
from .assets import (
    ExternalDNSAssetRequest,
    ExternalDNSNameAsset,
    ExternalDNSNameAssets,
    Relationship,
)
from .common import ModifiedCreated
from .deployments import Deployment
from .roles import (
    CreateRoleRequest,
    Permission,
    PermissionList,
    Role,
    RoleIdList,
    RoleList,
    UpdateRoleRequest,
)

__all__ = [
    "AccessKey",
    "Account",
    "AccountDetails",
    "AccountRelationship",
    "AuthenticateResponse",
    "Authentication",
    "CreateUserRequest",
    "LinkedUser",
    "UpdateAccountDetailsRequest",
    "UpdateUserRequest",
    "User",
    "UserCredential",
    "UserList",
    "ExternalDNSAssetRequest",
    "ExternalDNSNameAsset",
    "ExternalDNSNameAssets",
    "Relationship",
    "ModifiedCreated",
    "Deployment",
    "CreateRoleRequest",
    "Permission",
    "PermissionList",
    "Role",
    "RoleIdList",
    "RoleList",
    "UpdateRoleRequest",
]

"""Typed models for AIMS accounts, users and authentication."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .common import ModifiedCreated


class AccountRelationship(str, Enum):
    """Relationship of one account to another."""

    BILLS_TO = "bills_to"
    MANAGED = "managed"
    MANAGING = "managing"


class Account(BaseModel):
    """Account level information returned alongside a user."""

    id: str | None = None
    name: str | None = None
    active: bool | None = None
    version: int | None = None
    accessible_locations: list[str] = Field(default_factory=list)
    default_location: str | None = None
    default_esb_location: str | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(extra="allow")


class AccountDetails(BaseModel):
    id: str | None = None
    name: str | None = None
    active: bool | None = None
    version: int | None = None
    accessible_locations: list[str] = Field(default_factory=list)
    default_location: str | None = None
    mfa_required: bool | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(extra="allow")


class UpdateAccountDetailsRequest(BaseModel):
    """Payload for updating an account. Only ``mfa_required`` is writable."""

    mfa_required: bool

    model_config = ConfigDict(extra="forbid")


class LinkedUser(BaseModel):
    user_id: int | None = None
    location: str | None = None


class UserCredential(BaseModel):
    """Credential metadata included when ``include_user_credential`` is set."""

    version: int | None = None
    one_time_password: bool | None = None
    last_login: int | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(extra="allow")


class AccessKey(BaseModel):
    label: str | None = None
    last_login: int | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None
    access_key_id: str | None = None

    model_config = ConfigDict(extra="allow")


class User(BaseModel):
    """User level information."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    username: str | None = None
    email: str | None = None
    active: bool | None = None
    locked: bool | None = None
    version: int | None = None
    mfa_enabled: bool | None = None
    mobile_phone: str | None = None
    linked_users: list[LinkedUser] = Field(default_factory=list)
    user_credential: UserCredential | None = None
    role_ids: list[str] | None = None
    access_keys: list[AccessKey] | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(extra="allow")


class UserList(BaseModel):
    users: list[User] = Field(default_factory=list)


class CreateUserRequest(BaseModel):
    """Payload used to create a user.

    When ``password`` is omitted the user is emailed a link to set one.
    """

    name: str
    email: str
    password: str | None = None
    role_id: str | None = None
    active: bool | None = None
    mobile_phone: str | None = None
    phone: str | None = None
    webhook_url: str | None = None
    notifications_only: bool | None = None

    model_config = ConfigDict(extra="forbid")


class UpdateUserRequest(BaseModel):
    """Payload used to update a user; unset fields are left untouched."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role_id: str | None = None
    active: bool | None = None
    mobile_phone: str | None = None
    phone: str | None = None
    webhook_url: str | None = None
    notifications_only: bool | None = None

    model_config = ConfigDict(extra="forbid")


class Authentication(BaseModel):
    user: User | None = None
    account: Account | None = None
    token: str
    token_expiration: int | None = None

    model_config = ConfigDict(extra="allow")


class AuthenticateResponse(BaseModel):
    """Response returned by ``POST /aims/v1/authenticate``."""

    authentication: Authentication


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
]

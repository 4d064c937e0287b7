"""Typed models for the deployments service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .common import ModifiedCreated


class CloudDefender(BaseModel):
    enabled: bool | None = None
    location_id: str | None = None


class Credential(BaseModel):
    id: str | None = None
    purpose: str | None = None
    version: str | None = None


class Monitor(BaseModel):
    enabled: bool | None = None
    ct_install_region: str | None = None


class Platform(BaseModel):
    """Cloud platform the deployment protects, e.g. an AWS account."""

    type: str | None = None
    id: str | None = None
    monitor: Monitor | None = None
    default: bool | None = None

    model_config = ConfigDict(extra="allow")


class Policy(BaseModel):
    id: str | None = None


class Include(BaseModel):
    type: str | None = None
    key: str | None = None
    policy: Policy | None = None


class Exclude(BaseModel):
    type: str | None = None
    key: str | None = None


class Scope(BaseModel):
    include: list[Include] = Field(default_factory=list)
    exclude: list[Exclude] = Field(default_factory=list)


class Status(BaseModel):
    status: str | None = None
    updated: int | None = None


class Deployment(BaseModel):
    """Deployment configuration for an account."""

    id: str | None = None
    account_id: str | None = None
    name: str | None = None
    version: int | None = None
    status: Status | None = None
    scope: Scope | None = None
    scan: bool | None = None
    platform: Platform | None = None
    mode: str | None = None
    enabled: bool | None = None
    discover: bool | None = None
    credentials: list[Credential] = Field(default_factory=list)
    cloud_defender: CloudDefender | None = None
    created: ModifiedCreated | None = None
    modified: ModifiedCreated | None = None

    model_config = ConfigDict(extra="allow")


__all__ = [
    "CloudDefender",
    "Credential",
    "Deployment",
    "Exclude",
    "Include",
    "Monitor",
    "Platform",
    "Policy",
    "Scope",
    "Status",
]

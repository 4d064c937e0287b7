"""Models for the assets_query and assets_write services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

EXTERNAL_DNS_NAME_TYPE = "external-dns-name"


class ExternalDNSNameAsset(BaseModel):
    """An asset of type ``external-dns-name`` as reported by assets_query."""

    version: int | None = None
    type: str | None = None
    threatiness: float | None = None
    threat_level: int | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    tag_keys: dict[str, Any] = Field(default_factory=dict)
    state: str | None = None
    scope_external_scan_request_id: str | None = None
    scope_external_last_external_scan_time: int | None = None
    scope_external_last_dequeue_time: int | None = None
    scope_external_heartbeat: int | None = None
    scope_aws_state: str | None = None
    scope_aws_name: str | None = None
    scope_aws_dns_name: str | None = None
    native_type: str | None = None
    name: str | None = None
    modified_on: int | None = None
    key: str | None = None
    dns_name: str | None = None
    deployment_id: str | None = None
    deleted_on: int | None = None
    declared: bool | None = None
    created_on: int | None = None
    account_id: str | None = None

    model_config = ConfigDict(extra="allow")


class ExternalDNSNameAssets(BaseModel):
    """Query result; each row of ``assets`` is one group of related assets."""

    rows: int = 0
    assets: list[list[ExternalDNSNameAsset]] = Field(default_factory=list)


class Relationship(BaseModel):
    key: str | None = None
    type: str | None = None


class ExternalDNSAssetRequest(BaseModel):
    """Body for the declare_asset and remove_asset operations."""

    operation: str
    type: str = EXTERNAL_DNS_NAME_TYPE
    scope: str = "aws"
    properties: dict[str, str] | None = None
    relationships: list[Relationship] | None = None
    key: str

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "EXTERNAL_DNS_NAME_TYPE",
    "ExternalDNSAssetRequest",
    "ExternalDNSNameAsset",
    "ExternalDNSNameAssets",
    "Relationship",
]

"""Shared plumbing for the per-service resource clients."""

from __future__ import annotations

from typing import Any, TypeVar, cast

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ResponseDecodeError
from ..http_client import HttpClient

DEFAULT_BASE_URL = "https://api.cloudinsight.alertlogic.com"

AIMS_SERVICE_PATH = "aims/v1"
ASSETS_QUERY_SERVICE_PATH = "assets_query/v1"
ASSETS_WRITE_SERVICE_PATH = "assets_write/v1"
DEPLOYMENTS_SERVICE_PATH = "deployments/v1"

T = TypeVar("T")


class ResourceClient:
    """Base for clients bound to a single account on a shared :class:`HttpClient`."""

    def __init__(self, http: HttpClient, account_id: str) -> None:
        self.http = http
        self.account_id = account_id

    @staticmethod
    def _dump(payload: Any) -> dict[str, Any]:
        if isinstance(payload, BaseModel):
            return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        return cast(dict[str, Any], payload)

    @staticmethod
    def _decode(resp: httpx.Response, shape: type[T]) -> T:
        try:
            return TypeAdapter(shape).validate_json(resp.content)
        except ValidationError as exc:
            raise ResponseDecodeError(exc) from exc


def include_params(
    include_access_keys: bool,
    include_user_credentials: bool,
    include_role_ids: bool,
) -> dict[str, str]:
    """Build the ``include_*`` query flags; every flag is always sent."""

    def flag(value: bool) -> str:
        return "true" if value else "false"

    return {
        "include_access_keys": flag(include_access_keys),
        "include_user_credential": flag(include_user_credentials),
        "include_role_ids": flag(include_role_ids),
    }

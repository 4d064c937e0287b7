"""Client for declaring and removing assets through assets_write."""

from __future__ import annotations

from ..models.assets import EXTERNAL_DNS_NAME_TYPE, ExternalDNSAssetRequest
from .base import ASSETS_WRITE_SERVICE_PATH, ResourceClient


def _dns_asset_key(dns_name: str) -> str:
    return f"/{EXTERNAL_DNS_NAME_TYPE}/{dns_name}"


class AssetsWriteClient(ResourceClient):
    """Manage AWS-scoped ``external-dns-name`` assets of a deployment.

    Every operation returns the HTTP status of the write (201 on success).
    """

    def _put_asset(self, deployment_id: str, request: ExternalDNSAssetRequest) -> int:
        resp = self.http.put(
            f"{ASSETS_WRITE_SERVICE_PATH}/{self.account_id}/deployments/{deployment_id}/assets",
            json=self._dump(request),
        )
        return resp.status_code

    def _declare_dns_asset(
        self, deployment_id: str, dns_name: str, old_dns_name: str | None
    ) -> int:
        request = ExternalDNSAssetRequest(
            operation="declare_asset",
            key=_dns_asset_key(old_dns_name or dns_name),
            properties={"dns_name": dns_name, "name": dns_name, "state": "new"},
        )
        return self._put_asset(deployment_id, request)

    def create_external_dns_name_asset(self, deployment_id: str, dns_name: str) -> int:
        return self._declare_dns_asset(deployment_id, dns_name, None)

    def update_external_dns_name_asset(
        self, deployment_id: str, dns_name: str, old_dns_name: str
    ) -> int:
        """Rename the asset keyed by ``old_dns_name``; the DNS name is the only mutable field."""

        return self._declare_dns_asset(deployment_id, dns_name, old_dns_name)

    def remove_external_dns_name_asset(self, deployment_id: str, dns_name: str) -> int:
        request = ExternalDNSAssetRequest(operation="remove_asset", key=_dns_asset_key(dns_name))
        return self._put_asset(deployment_id, request)


__all__ = ["AssetsWriteClient"]

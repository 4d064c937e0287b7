"""Client for the assets_query service."""

from __future__ import annotations

from ..models.assets import EXTERNAL_DNS_NAME_TYPE, ExternalDNSNameAssets
from .base import ASSETS_QUERY_SERVICE_PATH, ResourceClient


class AssetsQueryClient(ResourceClient):
    def get_external_dns_name_assets(self) -> ExternalDNSNameAssets:
        """Return the account's assets of type ``external-dns-name`` only."""

        resp = self.http.get(
            f"{ASSETS_QUERY_SERVICE_PATH}/{self.account_id}/assets",
            params={"asset_types": f"e:{EXTERNAL_DNS_NAME_TYPE}"},
        )
        return self._decode(resp, ExternalDNSNameAssets)


__all__ = ["AssetsQueryClient"]

"""Client for the deployments service."""

from __future__ import annotations

from ..models.deployments import Deployment
from .base import DEPLOYMENTS_SERVICE_PATH, ResourceClient


class DeploymentsClient(ResourceClient):
    def _deployments_path(self) -> str:
        return f"{DEPLOYMENTS_SERVICE_PATH}/{self.account_id}/deployments"

    def list_deployments(self) -> list[Deployment]:
        """Return every deployment configured for the bound account."""

        resp = self.http.get(self._deployments_path())
        return self._decode(resp, list[Deployment])

    def get_deployment(self, deployment_id: str) -> Deployment:
        resp = self.http.get(f"{self._deployments_path()}/{deployment_id}")
        return self._decode(resp, Deployment)


__all__ = ["DeploymentsClient"]

"""Client bindings for AIMS account and global roles."""

from __future__ import annotations

from typing import Any

from ..models.roles import CreateRoleRequest, Role, RoleList, UpdateRoleRequest
from .base import AIMS_SERVICE_PATH, ResourceClient


class RolesClient(ResourceClient):
    """Typed wrapper for AIMS role endpoints.

    Account roles live under ``/aims/v1/{account_id}/roles``; global roles are
    shared by every account and live under ``/aims/v1/roles``.
    """

    def _account_roles_path(self) -> str:
        return f"{AIMS_SERVICE_PATH}/{self.account_id}/roles"

    def _get_role(self, path: str) -> Role:
        return self._decode(self.http.get(path), Role)

    def _get_roles(self, path: str) -> RoleList:
        return self._decode(self.http.get(path), RoleList)

    def list_roles(self) -> RoleList:
        return self._get_roles(self._account_roles_path())

    def list_global_roles(self) -> RoleList:
        return self._get_roles(f"{AIMS_SERVICE_PATH}/roles")

    def get_role_details(self, role_id: str) -> Role:
        return self._get_role(f"{self._account_roles_path()}/{role_id}")

    def get_global_role_details(self, role_id: str) -> Role:
        return self._get_role(f"{AIMS_SERVICE_PATH}/roles/{role_id}")

    def create_role(self, request: CreateRoleRequest | dict[str, Any]) -> Role:
        """Create a role in the bound account."""

        resp = self.http.post(self._account_roles_path(), json=self._dump(request))
        return self._decode(resp, Role)

    def update_role_details(
        self, role_id: str, request: UpdateRoleRequest | dict[str, Any]
    ) -> Role:
        """Update the name or permissions of an account role."""

        resp = self.http.post(
            f"{self._account_roles_path()}/{role_id}", json=self._dump(request)
        )
        return self._decode(resp, Role)

    def delete_role(self, role_id: str) -> int:
        """Delete an account role and return the response status."""

        resp = self.http.delete(f"{self._account_roles_path()}/{role_id}")
        return resp.status_code


__all__ = ["RolesClient"]

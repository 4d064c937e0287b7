"""Client for role assignments and effective permissions of AIMS users."""

from __future__ import annotations

from ..models.roles import PermissionList, RoleIdList, RoleList
from .base import AIMS_SERVICE_PATH, ResourceClient


class UserRolesClient(ResourceClient):
    def _user_path(self, user_id: str) -> str:
        return f"{AIMS_SERVICE_PATH}/{self.account_id}/users/{user_id}"

    def get_assigned_roles(self, user_id: str) -> RoleList:
        """Return the full roles assigned to a user."""

        resp = self.http.get(f"{self._user_path(user_id)}/roles")
        return self._decode(resp, RoleList)

    def get_assigned_role_ids(self, user_id: str) -> RoleIdList:
        resp = self.http.get(f"{self._user_path(user_id)}/role_ids")
        return self._decode(resp, RoleIdList)

    def get_user_permissions(self, user_id: str) -> PermissionList:
        """Return the effective permissions granted to a user by all roles."""

        resp = self.http.get(f"{self._user_path(user_id)}/permissions")
        return self._decode(resp, PermissionList)

    def grant_user_role(self, user_id: str, role_id: str) -> int:
        resp = self.http.put(f"{self._user_path(user_id)}/roles/{role_id}")
        return resp.status_code

    def revoke_user_role(self, user_id: str, role_id: str) -> int:
        resp = self.http.delete(f"{self._user_path(user_id)}/roles/{role_id}")
        return resp.status_code


__all__ = ["UserRolesClient"]

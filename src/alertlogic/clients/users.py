"""Client for the AIMS user resources."""

from __future__ import annotations

from urllib.parse import quote_plus

from ..models.aims import CreateUserRequest, UpdateUserRequest, User, UserList
from .base import AIMS_SERVICE_PATH, ResourceClient, include_params

_ONE_TIME_PASSWORD_ERROR = "one_time_password must be accompanied by a password"


class UsersClient(ResourceClient):
    """Typed wrapper for AIMS user endpoints.

    The ``include_*`` flags on the read operations control whether access
    keys, the user credential and assigned role ids are embedded in each
    returned :class:`User`.
    """

    def _users_path(self) -> str:
        return f"{AIMS_SERVICE_PATH}/{self.account_id}/users"

    def _write_user(
        self,
        path: str,
        request: CreateUserRequest | UpdateUserRequest,
        one_time_password: bool,
    ) -> User:
        if one_time_password and not request.password:
            raise ValueError(_ONE_TIME_PASSWORD_ERROR)
        params = {"one_time_password": "true"} if one_time_password else None
        resp = self.http.post(path, params=params, json=self._dump(request))
        return self._decode(resp, User)

    def _get_user(
        self,
        path: str,
        include_access_keys: bool,
        include_user_credentials: bool,
        include_role_ids: bool,
    ) -> User:
        params = include_params(include_access_keys, include_user_credentials, include_role_ids)
        resp = self.http.get(path, params=params)
        return self._decode(resp, User)

    def _get_users(
        self,
        path: str,
        include_access_keys: bool,
        include_user_credentials: bool,
        include_role_ids: bool,
        role_id: str | None = None,
    ) -> UserList:
        params = include_params(include_access_keys, include_user_credentials, include_role_ids)
        if role_id:
            params["role_id"] = role_id
        resp = self.http.get(path, params=params)
        return self._decode(resp, UserList)

    def create_user(self, request: CreateUserRequest, *, one_time_password: bool = False) -> User:
        """Create a user in the bound account.

        With ``one_time_password`` the supplied password must be changed on
        first login, so a password is mandatory in that case.
        """

        return self._write_user(self._users_path(), request, one_time_password)

    def update_user_details(
        self,
        user_id: str,
        request: UpdateUserRequest,
        *,
        one_time_password: bool = False,
    ) -> User:
        """Update a user; ``one_time_password`` follows the same rule as :meth:`create_user`."""

        return self._write_user(f"{self._users_path()}/{user_id}", request, one_time_password)

    def delete_user(self, user_id: str) -> int:
        """Delete a user and return the response status.

        The API answers 204 even for unknown ids and 400 when deleting the
        user that owns the calling token.
        """

        resp = self.http.delete(f"{self._users_path()}/{user_id}")
        return resp.status_code

    def get_user_details(
        self,
        user_id: str,
        *,
        include_access_keys: bool = False,
        include_user_credentials: bool = False,
        include_role_ids: bool = False,
    ) -> User:
        return self._get_user(
            f"{self._users_path()}/{user_id}",
            include_access_keys,
            include_user_credentials,
            include_role_ids,
        )

    def get_user_details_by_id(
        self,
        user_id: str,
        *,
        include_access_keys: bool = False,
        include_user_credentials: bool = False,
        include_role_ids: bool = False,
    ) -> User:
        """Look a user up by id without knowing its account."""

        return self._get_user(
            f"{AIMS_SERVICE_PATH}/user/{user_id}",
            include_access_keys,
            include_user_credentials,
            include_role_ids,
        )

    def get_user_details_by_username(
        self,
        username: str,
        *,
        include_access_keys: bool = False,
        include_user_credentials: bool = False,
        include_role_ids: bool = False,
    ) -> User:
        return self._get_user(
            f"{AIMS_SERVICE_PATH}/user/username/{username}",
            include_access_keys,
            include_user_credentials,
            include_role_ids,
        )

    def list_users(
        self,
        *,
        include_access_keys: bool = False,
        include_user_credentials: bool = False,
        include_role_ids: bool = False,
        role_id: str | None = None,
    ) -> UserList:
        """List users of the bound account, optionally only members of ``role_id``."""

        return self._get_users(
            self._users_path(),
            include_access_keys,
            include_user_credentials,
            include_role_ids,
            role_id,
        )

    def list_users_by_email(
        self,
        email: str,
        *,
        include_access_keys: bool = False,
        include_user_credentials: bool = False,
        include_role_ids: bool = False,
    ) -> UserList:
        """List users across accounts that share ``email``."""

        return self._get_users(
            f"{AIMS_SERVICE_PATH}/users/email/{quote_plus(email)}",
            include_access_keys,
            include_user_credentials,
            include_role_ids,
        )


__all__ = ["UsersClient"]

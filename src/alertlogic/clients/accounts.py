"""Client for the AIMS account resources."""

from __future__ import annotations

from typing import Any

from ..models.aims import AccountDetails, AccountRelationship, UpdateAccountDetailsRequest
from .base import AIMS_SERVICE_PATH, ResourceClient


class AccountsClient(ResourceClient):
    """Typed wrapper for ``/aims/v1/{account_id}/account`` endpoints."""

    def get_account_details(self) -> AccountDetails:
        """Return details of the bound account."""

        resp = self.http.get(f"{AIMS_SERVICE_PATH}/{self.account_id}/account")
        return self._decode(resp, AccountDetails)

    def get_account_relationship(
        self,
        related_account_id: str,
        relationship: AccountRelationship | str,
    ) -> int:
        """Check whether the bound account has ``relationship`` to ``related_account_id``.

        The API answers 204 when the relationship exists. A 404, meaning the
        accounts are not related, raises :class:`~alertlogic.errors.HttpError`.
        """

        kind = AccountRelationship(relationship).value
        resp = self.http.get(
            f"{AIMS_SERVICE_PATH}/{self.account_id}/accounts/{kind}/{related_account_id}"
        )
        return resp.status_code

    def update_account_details(
        self, request: UpdateAccountDetailsRequest | dict[str, Any]
    ) -> AccountDetails:
        """Update the account; the API only accepts ``mfa_required``."""

        resp = self.http.post(
            f"{AIMS_SERVICE_PATH}/{self.account_id}/account",
            json=self._dump(request),
        )
        return self._decode(resp, AccountDetails)


__all__ = ["AccountsClient"]

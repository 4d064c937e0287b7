from __future__ import annotations

import json

import httpx
import pytest

from alertlogic.errors import HttpError, InvalidCredentialsError, ResponseDecodeError
from alertlogic.models.aims import AccountRelationship, UpdateAccountDetailsRequest

from .conftest import ACCOUNT_ID, BASE_URL, RELATED_ACCOUNT_ID

ACCOUNT_URL = f"{BASE_URL}/aims/v1/{ACCOUNT_ID}/account"

ACCOUNT_PAYLOAD = {
    "id": ACCOUNT_ID,
    "name": "Company Name",
    "active": True,
    "version": 1,
    "accessible_locations": ["insight-us-virginia"],
    "default_location": "insight-us-virginia",
    "mfa_required": False,
    "created": {"by": "System", "at": 1436482061},
    "modified": {"by": "System", "at": 1436482061},
}


def test_get_account_details(respx_mock, api):
    route = respx_mock.get(ACCOUNT_URL).mock(return_value=httpx.Response(200, json=ACCOUNT_PAYLOAD))

    details = api.accounts.get_account_details()

    assert route.called
    assert route.calls.last.request.headers["X-Aims-Auth-Token"] == "my_token"
    assert details.id == ACCOUNT_ID
    assert details.name == "Company Name"
    assert details.accessible_locations == ["insight-us-virginia"]
    assert details.mfa_required is False
    assert details.created is not None
    assert details.created.at == 1436482061


def test_get_account_details_invalid_credentials(respx_mock, api):
    respx_mock.get(ACCOUNT_URL).mock(return_value=httpx.Response(401))

    with pytest.raises(InvalidCredentialsError) as exc_info:
        api.accounts.get_account_details()

    assert str(exc_info.value) == "HTTP status 401: invalid credentials"


def test_get_account_details_unmarshal_error(respx_mock, api):
    respx_mock.get(ACCOUNT_URL).mock(return_value=httpx.Response(200, text="not json"))

    with pytest.raises(ResponseDecodeError) as exc_info:
        api.accounts.get_account_details()

    assert str(exc_info.value).startswith("error unmarshalling the JSON response: ")


def test_update_account_details_always_sends_mfa_flag(respx_mock, api):
    route = respx_mock.post(ACCOUNT_URL).mock(
        return_value=httpx.Response(200, json={**ACCOUNT_PAYLOAD, "mfa_required": True})
    )

    details = api.accounts.update_account_details(UpdateAccountDetailsRequest(mfa_required=False))

    sent = json.loads(route.calls.last.request.content.decode())
    assert sent == {"mfa_required": False}
    assert details.mfa_required is True


def test_get_account_relationship_returns_status(respx_mock, api):
    route = respx_mock.get(
        f"{BASE_URL}/aims/v1/{ACCOUNT_ID}/accounts/managed/{RELATED_ACCOUNT_ID}"
    ).mock(return_value=httpx.Response(204))

    status = api.accounts.get_account_relationship(RELATED_ACCOUNT_ID, AccountRelationship.MANAGED)

    assert route.called
    assert status == 204


def test_get_account_relationship_accepts_plain_string(respx_mock, api):
    route = respx_mock.get(
        f"{BASE_URL}/aims/v1/{ACCOUNT_ID}/accounts/bills_to/{RELATED_ACCOUNT_ID}"
    ).mock(return_value=httpx.Response(204))

    assert api.accounts.get_account_relationship(RELATED_ACCOUNT_ID, "bills_to") == 204
    assert route.called


def test_get_account_relationship_not_found(respx_mock, api):
    respx_mock.get(
        f"{BASE_URL}/aims/v1/{ACCOUNT_ID}/accounts/managed/{RELATED_ACCOUNT_ID}"
    ).mock(return_value=httpx.Response(404))

    with pytest.raises(HttpError) as exc_info:
        api.accounts.get_account_relationship(RELATED_ACCOUNT_ID, AccountRelationship.MANAGED)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == 'HTTP status 404: content ""'


def test_get_account_relationship_rejects_unknown_kind(api):
    with pytest.raises(ValueError):
        api.accounts.get_account_relationship(RELATED_ACCOUNT_ID, "partner")

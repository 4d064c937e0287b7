from __future__ import annotations

import base64

import httpx
import pytest

from alertlogic import AlertLogic, AlertLogicSettings
from alertlogic.errors import ConfigurationError, InvalidCredentialsError

from .conftest import ACCOUNT_ID, AUTH_URL, BASE_URL, auth_payload

ACCOUNT_URL = f"{BASE_URL}/aims/v1/{ACCOUNT_ID}/account"


def test_init_rejects_empty_account_id(token_getter) -> None:
    with pytest.raises(ConfigurationError, match="account ID must not be empty"):
        AlertLogic("", token_getter)


def test_from_api_token_validates_arguments() -> None:
    with pytest.raises(ConfigurationError, match="API token must not be empty"):
        AlertLogic.from_api_token(ACCOUNT_ID, "")
    with pytest.raises(ConfigurationError, match="account ID must not be empty"):
        AlertLogic.from_api_token("", "my_token")


def test_from_api_token_checks_token_before_account_id() -> None:
    with pytest.raises(ConfigurationError, match="API token must not be empty"):
        AlertLogic.from_api_token("", "")


def test_from_username_and_password_validates_arguments(respx_mock) -> None:
    route = respx_mock.post(AUTH_URL)

    with pytest.raises(ConfigurationError, match="username or password must not be empty"):
        AlertLogic.from_username_and_password(ACCOUNT_ID, "bob", "")
    with pytest.raises(ConfigurationError, match="account ID must not be empty"):
        AlertLogic.from_username_and_password("", "bob", "s3cret")

    assert not route.called


def test_from_access_key_validates_arguments() -> None:
    with pytest.raises(ConfigurationError, match="accessKeyId or secretKey must not be empty"):
        AlertLogic.from_access_key(ACCOUNT_ID, "", "secret")


def test_from_username_and_password_sends_token(respx_mock) -> None:
    auth_route = respx_mock.post(AUTH_URL).mock(
        return_value=httpx.Response(200, json=auth_payload("session-token", expiration=4_102_444_800))
    )
    account_route = respx_mock.get(ACCOUNT_URL).mock(
        return_value=httpx.Response(200, json={"id": ACCOUNT_ID, "name": "Company Name"})
    )

    with AlertLogic.from_username_and_password(ACCOUNT_ID, "bob", "s3cret") as api:
        assert api.authentication is not None
        assert api.authentication.authentication.token == "session-token"
        details = api.accounts.get_account_details()
        api.accounts.get_account_details()

    assert details.name == "Company Name"
    assert auth_route.call_count == 1
    assert account_route.calls.last.request.headers["X-Aims-Auth-Token"] == "session-token"


def test_from_access_key_authenticates_with_key_pair(respx_mock) -> None:
    route = respx_mock.post(AUTH_URL).mock(
        return_value=httpx.Response(200, json=auth_payload("key-token"))
    )

    with AlertLogic.from_access_key(ACCOUNT_ID, "key-id", "key-secret") as api:
        assert api.authentication is not None

    assert route.calls.last.request.headers["Authorization"].startswith("Basic ")


def test_from_username_and_password_propagates_auth_failure(respx_mock) -> None:
    respx_mock.post(AUTH_URL).mock(return_value=httpx.Response(401))

    with pytest.raises(InvalidCredentialsError):
        AlertLogic.from_username_and_password(ACCOUNT_ID, "bob", "wrong")


def test_from_settings_prefers_api_token(clean_env, respx_mock) -> None:
    auth_route = respx_mock.post(AUTH_URL)
    account_route = respx_mock.get(ACCOUNT_URL).mock(
        return_value=httpx.Response(200, json={"id": ACCOUNT_ID})
    )
    settings = AlertLogicSettings(
        _env_file=None,
        account_id=ACCOUNT_ID,
        api_token="settings-token",
        username="bob",
        password="s3cret",
    )

    with AlertLogic.from_settings(settings) as api:
        api.accounts.get_account_details()

    assert not auth_route.called
    assert account_route.calls.last.request.headers["X-Aims-Auth-Token"] == "settings-token"


def test_from_settings_uses_access_key_before_username(clean_env, respx_mock) -> None:
    route = respx_mock.post(AUTH_URL).mock(
        return_value=httpx.Response(200, json=auth_payload("key-token"))
    )
    settings = AlertLogicSettings(
        _env_file=None,
        account_id=ACCOUNT_ID,
        access_key_id="key-id",
        secret_key="key-secret",
        username="bob",
        password="s3cret",
    )

    with AlertLogic.from_settings(settings):
        pass

    assert route.call_count == 1
    sent = route.calls.last.request.headers["Authorization"]
    assert sent == "Basic " + base64.b64encode(b"key-id:key-secret").decode()


def test_from_settings_without_credentials_fails(clean_env) -> None:
    settings = AlertLogicSettings(_env_file=None, account_id=ACCOUNT_ID)

    with pytest.raises(ConfigurationError, match="username or password must not be empty"):
        AlertLogic.from_settings(settings)


def test_close_closes_http_clients(monkeypatch: pytest.MonkeyPatch, respx_mock) -> None:
    respx_mock.post(AUTH_URL).mock(return_value=httpx.Response(200, json=auth_payload("tok")))
    api = AlertLogic.from_username_and_password(ACCOUNT_ID, "bob", "s3cret")
    closed: list[str] = []
    monkeypatch.setattr(api.http, "close", lambda: closed.append("api"))
    assert api._token_provider is not None
    monkeypatch.setattr(api._token_provider, "close", lambda: closed.append("auth"))

    api.close()

    assert closed == ["api", "auth"]

"""Entry point bundling every Alert Logic resource client behind one session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType

from .auth.aims import AimsTokenProvider
from .auth.base import StaticTokenProvider
from .clients import (
    AccountsClient,
    AssetsQueryClient,
    AssetsWriteClient,
    DeploymentsClient,
    RolesClient,
    UserRolesClient,
    UsersClient,
)
from .clients.base import DEFAULT_BASE_URL
from .config import AlertLogicSettings
from .errors import ConfigurationError
from .http_client import HttpClient
from .models.aims import AuthenticateResponse

logger = logging.getLogger(__name__)


class AlertLogic:
    """Client for one Alert Logic account.

    Prefer the ``from_*`` constructors over calling ``__init__`` with a raw
    token getter::

        api = AlertLogic.from_username_and_password(account_id, username, password)
        details = api.accounts.get_account_details()
    """

    def __init__(
        self,
        account_id: str,
        token_getter: Callable[[], str],
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> None:
        if not account_id:
            raise ConfigurationError("account ID must not be empty")
        self.account_id = account_id
        self.http = HttpClient(base_url, token_getter=token_getter, timeout=timeout)
        self.authentication: AuthenticateResponse | None = None
        self._token_provider: AimsTokenProvider | None = None

        self.accounts = AccountsClient(self.http, account_id)
        self.users = UsersClient(self.http, account_id)
        self.roles = RolesClient(self.http, account_id)
        self.user_roles = UserRolesClient(self.http, account_id)
        self.assets_query = AssetsQueryClient(self.http, account_id)
        self.assets_write = AssetsWriteClient(self.http, account_id)
        self.deployments = DeploymentsClient(self.http, account_id)

    @classmethod
    def from_api_token(
        cls,
        account_id: str,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> AlertLogic:
        """Build a client that sends an existing AIMS token with every request."""

        provider = StaticTokenProvider(api_token)
        return cls(account_id, provider.get_token, base_url=base_url, timeout=timeout)

    @classmethod
    def from_username_and_password(
        cls,
        account_id: str,
        username: str,
        password: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> AlertLogic:
        """Authenticate immediately and reuse the resulting token.

        ``username`` and ``password`` may also be an access key id and secret
        key, see https://docs.alertlogic.com/prepare/access-key-management.htm.
        """

        if not username or not password:
            raise ConfigurationError("username or password must not be empty")
        if not account_id:
            raise ConfigurationError("account ID must not be empty")
        provider = AimsTokenProvider(username, password, base_url=base_url, timeout=timeout)
        try:
            authentication = provider.authenticate()
        except Exception:
            provider.close()
            raise
        api = cls(account_id, provider.get_token, base_url=base_url, timeout=timeout)
        api.authentication = authentication
        api._token_provider = provider
        return api

    @classmethod
    def from_access_key(
        cls,
        account_id: str,
        access_key_id: str,
        secret_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> AlertLogic:
        if not access_key_id or not secret_key:
            raise ConfigurationError("accessKeyId or secretKey must not be empty")
        return cls.from_username_and_password(
            account_id, access_key_id, secret_key, base_url=base_url, timeout=timeout
        )

    @classmethod
    def from_settings(cls, settings: AlertLogicSettings | None = None) -> AlertLogic:
        """Build a client from :class:`AlertLogicSettings` (``ALERTLOGIC_*`` env vars)."""

        cfg = settings or AlertLogicSettings()
        options = {"base_url": cfg.base_url, "timeout": cfg.timeout}
        token = cfg.api_token_value
        if token:
            logger.debug("Using AIMS token from settings")
            return cls.from_api_token(cfg.account_id, token, **options)
        if cfg.access_key_id or cfg.secret_key_value:
            logger.debug("Authenticating with access key %s", cfg.access_key_id)
            return cls.from_access_key(
                cfg.account_id,
                cfg.access_key_id or "",
                cfg.secret_key_value or "",
                **options,
            )
        logger.debug("Authenticating with username %s", cfg.username)
        return cls.from_username_and_password(
            cfg.account_id,
            cfg.username or "",
            cfg.password_value or "",
            **options,
        )

    def close(self) -> None:
        """Close the underlying HTTP clients."""

        self.http.close()
        if self._token_provider is not None:
            self._token_provider.close()

    def __enter__(self) -> AlertLogic:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["AlertLogic"]

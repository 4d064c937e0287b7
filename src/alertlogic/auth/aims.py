from __future__ import annotations

import logging
import time
from collections.abc import Callable
from types import TracebackType

from pydantic import ValidationError

from ..clients.base import AIMS_SERVICE_PATH, DEFAULT_BASE_URL
from ..errors import ConfigurationError, ResponseDecodeError
from ..http_client import HttpClient
from ..models.aims import AuthenticateResponse
from .base import TokenProvider

logger = logging.getLogger(__name__)

EXPIRY_SKEW_SECONDS = 60


class AimsTokenProvider(TokenProvider):
    """Exchange AIMS credentials for a token and reuse it until it expires.

    ``username`` and ``password`` may be an Alert Logic UI login or an access
    key id and secret key pair; AIMS accepts both through HTTP basic auth.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not username or not password:
            raise ConfigurationError("username or password must not be empty")
        self._username = username
        self._password = password
        self._clock = clock
        self.http = HttpClient(base_url, timeout=timeout)
        self._token: str | None = None
        self._expires_at: int | None = None
        self.last_response: AuthenticateResponse | None = None

    def authenticate(self) -> AuthenticateResponse:
        """Authenticate against AIMS and remember the returned token."""

        resp = self.http.post(
            f"{AIMS_SERVICE_PATH}/authenticate",
            auth=(self._username, self._password),
        )
        try:
            result = AuthenticateResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise ResponseDecodeError(exc) from exc
        self._token = result.authentication.token
        self._expires_at = result.authentication.token_expiration
        self.last_response = result
        account = result.authentication.account
        logger.info("Acquired AIMS token for account %s", account.id if account else "<unknown>")
        return result

    def _token_expired(self) -> bool:
        if self._expires_at is None:
            return False
        return self._clock() >= self._expires_at - EXPIRY_SKEW_SECONDS

    def get_token(self) -> str:
        if self._token is None or self._token_expired():
            if self._token is not None:
                logger.info("AIMS token expired; re-authenticating")
            self.authenticate()
        return str(self._token)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> AimsTokenProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

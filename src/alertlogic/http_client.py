from __future__ import annotations

import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any

import httpx

from .errors import HttpError, error_for_status

logger = logging.getLogger(__name__)

AUTH_TOKEN_HEADER = "X-Aims-Auth-Token"


class HttpClient:
    """Thin httpx wrapper that injects the AIMS token and maps error statuses."""

    def __init__(
        self,
        base_url: str,
        token_getter: Callable[[], str] | None = None,
        default_headers: dict[str, str] | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token_getter = token_getter
        self._client = httpx.Client(timeout=timeout)
        self._default_headers = default_headers or {}

    def _auth_header(self) -> dict[str, str]:
        if not self._token_getter:
            return {}
        token = self._token_getter()
        return {AUTH_TOKEN_HEADER: token} if token else {}

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> httpx.Response:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{path.lstrip('/')}"
        # Basic auth is only used to exchange credentials for a token.
        auth_header = {} if auth is not None else self._auth_header()
        merged_headers = {**self._default_headers, **(headers or {}), **auth_header}

        request_kwargs: dict[str, Any] = {
            "params": params,
            "headers": merged_headers,
        }
        if json is not None:
            request_kwargs["json"] = json
        if auth is not None:
            request_kwargs["auth"] = auth

        logger.debug("%s %s", method, url)
        try:
            resp = self._client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            raise HttpError(0, f"Transport error: {e}") from e
        logger.debug("%s %s -> %s", method, url, resp.status_code)

        if 200 <= resp.status_code < 300:
            return resp
        try:
            detail = resp.json()
        except ValueError:
            detail = resp.text
        raise error_for_status(resp.status_code, resp.text, details=detail)

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client`."""

        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

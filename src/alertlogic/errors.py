from __future__ import annotations

import json
from typing import Any, Optional

SERVICE_FAILURE_STATUSES = frozenset({502, 503, 504, 522, 523, 524})


class AlertLogicError(Exception):
    """Base error for the Alert Logic client."""


class ConfigurationError(AlertLogicError):
    """Raised when a client is built with missing account or credential values."""


class ResponseDecodeError(AlertLogicError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"error unmarshalling the JSON response: {detail}")


class HttpError(AlertLogicError):
    def __init__(self, status_code: int, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class BadRequestError(HttpError):
    pass


class InvalidCredentialsError(HttpError):
    pass


class InsufficientPermissionsError(HttpError):
    pass


class ServiceFailureError(HttpError):
    pass


def error_for_status(status_code: int, body: str, *, details: Optional[Any] = None) -> HttpError:
    """Map a non-2xx status and its raw body onto the matching :class:`HttpError`."""

    if status_code == 401:
        return InvalidCredentialsError(
            status_code, f"HTTP status {status_code}: invalid credentials", details=details
        )
    if status_code == 403:
        return InsufficientPermissionsError(
            status_code, f"HTTP status {status_code}: insufficient permissions", details=details
        )
    if status_code in SERVICE_FAILURE_STATUSES:
        return ServiceFailureError(
            status_code, f"HTTP status {status_code}: service failure", details=details
        )
    if status_code == 400:
        return BadRequestError(status_code, body, details=details)
    return HttpError(
        status_code,
        f"HTTP status {status_code}: content {json.dumps(body, ensure_ascii=False)}",
        details=details,
    )

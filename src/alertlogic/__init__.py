"""Typed client for the Alert Logic Cloud Insight API."""

from __future__ import annotations

from .client import AlertLogic
from .config import AlertLogicSettings
from .errors import (
    AlertLogicError,
    BadRequestError,
    ConfigurationError,
    HttpError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    ResponseDecodeError,
    ServiceFailureError,
)

__version__ = "0.1.0"

__all__ = [
    "AlertLogic",
    "AlertLogicError",
    "AlertLogicSettings",
    "BadRequestError",
    "ConfigurationError",
    "HttpError",
    "InsufficientPermissionsError",
    "InvalidCredentialsError",
    "ResponseDecodeError",
    "ServiceFailureError",
]

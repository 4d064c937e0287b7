from __future__ import annotations
from abc import ABC, abstractmethod

from ..errors import ConfigurationError

class TokenProvider(ABC):
    @abstractmethod
    def get_token(self) -> str:
        """Return an AIMS token string for the X-Aims-Auth-Token header."""

class StaticTokenProvider(TokenProvider):
    def __init__(self, token: str) -> None:
        if not token:
            raise ConfigurationError("API token must not be empty")
        self._token = token
    def get_token(self) -> str:
        return self._token

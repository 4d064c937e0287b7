from .aims import AimsTokenProvider as AimsTokenProvider
from .base import StaticTokenProvider as StaticTokenProvider
from .base import TokenProvider as TokenProvider

__all__ = ["AimsTokenProvider", "StaticTokenProvider", "TokenProvider"]

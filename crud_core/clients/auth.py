from abc import ABC, abstractmethod
from typing import Optional


class IAccessTokenService(ABC):
    """Supplies the bearer token attached to outbound requests."""

    @abstractmethod
    async def get_access_token(self) -> Optional[str]:
        """Return the current access token, or None when unauthenticated."""
        pass


class StaticAccessTokenService(IAccessTokenService):
    """Serves a token obtained elsewhere (login flow, environment, tests)."""

    def __init__(self, token: Optional[str] = None):
        self.token = token

    async def get_access_token(self) -> Optional[str]:
        return self.token

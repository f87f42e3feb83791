"""Bearer token sources for the store and admin surfaces."""

from __future__ import annotations

import enum
import logging
from typing import Optional, Protocol

from .client import MedusaClient


logger = logging.getLogger(__name__)


class NotAuthenticatedError(RuntimeError):
    pass


class TokenSource(Protocol):
    def bearer_token(self) -> str: ...


class PublishableKeyAuth:
    """Store requests authenticate with the publishable API key."""

    def __init__(self, publishable_key: str) -> None:
        self.publishable_key = publishable_key

    def bearer_token(self) -> str:
        return self.publishable_key


class SessionState(str, enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class AdminSession:
    """Admin user session.

    The token is acquired once by ``login`` and only read afterwards. There is
    no refresh; an expired token shows up as whatever the backend returns.
    """

    def __init__(self, client: MedusaClient, email: str, password: str) -> None:
        self.client = client
        self.email = email
        self.password = password
        self._token: Optional[str] = None

    @property
    def state(self) -> SessionState:
        if self._token is None:
            return SessionState.UNAUTHENTICATED
        return SessionState.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    async def login(self) -> None:
        logger.info("Logging in to Medusa admin as %s", self.email)
        self._token = await self.client.login(self.email, self.password)

    def bearer_token(self) -> str:
        if self._token is None:
            raise NotAuthenticatedError("Admin session has not logged in")
        return self._token

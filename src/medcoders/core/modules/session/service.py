from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.session.models import AuthToken
from medcoders.core.modules.session.tokens import SessionSigner

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Stateless admin sessions backed by signed tokens."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._signer: SessionSigner | None = None

    async def on_start(self) -> None:
        config = self.core.config
        self._signer = SessionSigner(config.session_secret_key, production=config.is_production)
        logger.debug("session_service_started", production=config.is_production)

    @property
    def signer(self) -> SessionSigner:
        if self._signer is None:
            raise RuntimeError("Session service is not started")
        return self._signer

    def create_session(self, user_id: UUID) -> AuthToken:
        """Issue a token for a user whose password has just been verified."""
        return AuthToken(self.signer.issue(str(user_id)))

    def get_session_user_id(self, auth_token: AuthToken) -> UUID | None:
        """Return the user id carried by a valid token, None for any invalid token."""
        subject = self.signer.verify(auth_token)
        if subject is None:
            return None
        try:
            return UUID(subject)
        except ValueError:
            return None

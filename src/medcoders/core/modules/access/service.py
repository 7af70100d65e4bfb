import structlog

from medcoders.core.core import Service
from medcoders.core.modules.session.models import AuthToken
from medcoders.core.modules.user.models import User
from medcoders.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class AccessService(Service):
    async def ensure_authenticated(self, auth_token: AuthToken) -> User:
        """Resolve the session token to its current user record or raise AuthenticationError."""
        user_id = self.core.services.session.get_session_user_id(auth_token)
        if user_id is None:
            raise AuthenticationError

        user = await self.core.services.user.find_user(user_id)
        if user is None:
            logger.info("session_user_missing", user_id=user_id)
            raise AuthenticationError
        return user

    async def is_authenticated(self, auth_token: AuthToken) -> bool:
        try:
            await self.ensure_authenticated(auth_token)
        except AuthenticationError:
            return False
        return True

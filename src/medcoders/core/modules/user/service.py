from typing import Any
from uuid import UUID

import bcrypt
import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.user.models import User
from medcoders.core.modules.user.validators import normalize_email, validate_password
from medcoders.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


class UserService(Service):
    """Admin users. Always read from the database, sessions rely on fresh lookups."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def on_start(self) -> None:
        await self._collection.create_index([("email", 1)], unique=True)
        await self.ensure_admin_user_exists()
        logger.debug("user_service_started")

    async def find_user(self, user_id: UUID) -> User | None:
        """Get user by ID, None if it does not exist (e.g. deleted)."""
        return User.from_mongo(await self._collection.find_one({"_id": user_id}))

    async def get_user(self, user_id: UUID) -> User:
        user = await self.find_user(user_id)
        if user is None:
            raise NotFoundError(f"User '{user_id}' not found")
        return user

    async def find_user_by_email(self, email: str) -> User | None:
        return User.from_mongo(await self._collection.find_one({"email": normalize_email(email)}))

    async def verify_password(self, email: str, password: str) -> User | None:
        """Return the user if the password matches, None otherwise."""
        user = await self.find_user_by_email(email)
        if user is None or not check_password(password, user.password_hash):
            return None
        return user

    async def create_user(self, email: str, name: str | None, password: str) -> User:
        """Create user with hashed password."""
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required")
        if await self.find_user_by_email(email) is not None:
            raise ValidationError(f"User '{email}' already exists")

        validate_password(password)
        user = User(email=email, name=name, password_hash=hash_password(password))
        await self._collection.insert_one(user.to_mongo())
        logger.info("user_created", user_id=user.id, email=email)
        return user

    async def ensure_admin_user_exists(self) -> None:
        """Create the configured admin account if it is missing."""
        config = self.core.config
        if not config.admin_password:
            return
        if await self.find_user_by_email(config.admin_email) is not None:
            return
        await self.create_user(config.admin_email, config.admin_name, config.admin_password)
        logger.warning("admin_user_created", email=config.admin_email, hint="change the password after first login")

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from medcoders.core.db import MongoModel
from medcoders.utils import now


class User(MongoModel):
    """Admin user with credentials."""

    email: str
    name: str | None = None
    password_hash: str  # bcrypt hash
    created_at: datetime = Field(default_factory=now)


class UserProfile(BaseModel):
    """Admin account information (API representation)."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Login email")
    name: str | None = Field(None, description="Display name")

    @classmethod
    def from_domain(cls, user: User) -> "UserProfile":
        return cls(id=user.id, email=user.email, name=user.name)

"""Contact form leads."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from medcoders.core.db import MongoModel
from medcoders.utils import now


class Lead(MongoModel):
    """Contact form submission. Indexed on created_at."""

    name: str
    email: str
    organization: str
    role: str
    services_needed: list[str]
    message: str
    created_at: datetime = Field(default_factory=now)


class ContactSubmission(BaseModel):
    """Public contact form."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    organization: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    services_needed: list[str] = Field(..., min_length=1, description="At least one service must be selected")
    message: str = Field(..., min_length=1)
    phi_acknowledgment: bool = Field(..., description="Sender confirms the message contains no PHI")

    @field_validator("phi_acknowledgment")
    @classmethod
    def require_acknowledgment(cls, value: bool) -> bool:
        if not value:
            raise ValueError("PHI acknowledgment is required")
        return value

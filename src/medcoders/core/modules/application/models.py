"""Job application models."""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from medcoders.core.db import MongoModel
from medcoders.utils import now


class ApplicationStatus(StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class JobApplication(MongoModel):
    """Application submitted through the careers page.

    Indexed on created_at and (status, created_at).
    """

    career_post_id: UUID | None = None  # None for general applications
    position_title: str
    first_name: str
    last_name: str
    email: str
    phone: str
    resume: str  # Path of the uploaded resume, e.g. /uploads/resumes/...
    cover_letter: str | None = None
    experience: str | None = None
    certifications: str | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    notes: str | None = None  # Reviewer notes, included in the status email
    reviewed_by: UUID | None = None
    reviewed_at: datetime | None = None
    created_at: datetime = Field(default_factory=now)


class CareerPostRef(BaseModel):
    """Title and slug of the posting an application belongs to."""

    title: str
    slug: str


class JobApplicationView(JobApplication):
    """Application with its career post for the admin dashboard."""

    career_post: CareerPostRef | None = None


class ApplicationSubmission(BaseModel):
    """Public job application form."""

    career_post_id: UUID | None = Field(None, description="ID of the posting, omit for a general application")
    position_title: str = Field(..., min_length=1, description="Position applied for")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    resume: str = Field(..., min_length=1, description="URL returned by the resume upload endpoint")
    cover_letter: str | None = None
    experience: str | None = None
    certifications: str | None = None

    @field_validator("career_post_id", "cover_letter", "experience", "certifications", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ApplicationReview(BaseModel):
    """Admin decision on an application."""

    status: ApplicationStatus
    notes: str | None = Field(None, description="Optional notes sent to the applicant")

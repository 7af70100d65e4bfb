"""Career (job posting) models."""

from datetime import datetime
from typing import Any, ClassVar, Self
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from medcoders.core.db import MongoModel
from medcoders.core.modules.markup.renderer import render_markup
from medcoders.utils import check_slug, now

DEFAULT_EMPLOYMENT_TYPE = "Full-time"


class CareerPost(MongoModel):
    """Job posting. Indexed on slug (unique) and (published, date)."""

    slug: str
    title: str
    excerpt: str | None = None
    content: str
    location: str | None = None
    employment_type: str = DEFAULT_EMPLOYMENT_TYPE
    department: str | None = None
    published: bool = False
    date: datetime = Field(default_factory=now)
    created_by: UUID | None = None
    updated_by: UUID | None = None
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)


class CareerPostCreate(BaseModel):
    title: str = Field(..., min_length=1, description="Position title")
    slug: str = Field(..., min_length=1, description="URL slug, lowercase letters, numbers and hyphens")
    excerpt: str | None = Field(None, description="Short summary for listings")
    content: str = Field(..., min_length=1, description="Job description in markdown-like syntax")
    location: str | None = Field(None, description="e.g. 'Remote' or a city")
    employment_type: str = Field(DEFAULT_EMPLOYMENT_TYPE, description="e.g. 'Full-time', 'Contract'")
    department: str | None = None
    published: bool = False

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: str | None) -> str | None:
        return check_slug(value)


class CareerPostUpdate(BaseModel):
    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"excerpt", "location", "department"})

    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    content: str | None = Field(None, min_length=1)
    location: str | None = None
    employment_type: str | None = None
    department: str | None = None
    published: bool | None = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: str | None) -> str | None:
        return check_slug(value)

    def to_changes(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.NULLABLE_FIELDS
        }


class PublishedCareerPost(BaseModel):
    """Public representation of an open position."""

    id: UUID = Field(..., description="Used as career_post_id when applying")
    slug: str
    title: str
    excerpt: str | None = None
    content: str
    html: str = Field(..., description="Content rendered to HTML")
    location: str | None = None
    employment_type: str
    department: str | None = None
    date: str = Field(..., description="Posting date, YYYY-MM-DD")

    @classmethod
    def from_domain(cls, post: CareerPost) -> Self:
        return cls(
            id=post.id,
            slug=post.slug,
            title=post.title,
            excerpt=post.excerpt,
            content=post.content,
            html=render_markup(post.content),
            location=post.location,
            employment_type=post.employment_type,
            department=post.department,
            date=post.date.date().isoformat(),
        )

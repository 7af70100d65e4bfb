"""Blog ("resources") post models."""

from datetime import datetime
from typing import Any, ClassVar, Self
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from medcoders.core.db import MongoModel
from medcoders.core.modules.markup.renderer import render_markup
from medcoders.core.modules.markup.text import calculate_read_time, make_excerpt
from medcoders.utils import check_slug, now

DEFAULT_AUTHOR = "Elite Surgical Coders"
DEFAULT_CATEGORY = "Blog"


class BlogPost(MongoModel):
    """Blog post as stored. Indexed on slug (unique) and (published, date)."""

    slug: str
    title: str
    excerpt: str | None = None
    content: str  # Markdown-like source, rendered with render_markup
    image: str | None = None  # Cover image URL
    category: str = DEFAULT_CATEGORY
    author: str = DEFAULT_AUTHOR
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    date: datetime = Field(default_factory=now)  # Publication date shown on the site
    created_by: UUID | None = None  # None for posts imported from files
    updated_by: UUID | None = None
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)


class BlogPostCreate(BaseModel):
    """Fields accepted when creating a post."""

    title: str = Field(..., min_length=1, description="Post title")
    slug: str = Field(..., min_length=1, description="URL slug, lowercase letters, numbers and hyphens")
    excerpt: str | None = Field(None, description="Short summary for listings")
    content: str = Field(..., min_length=1, description="Post body in markdown-like syntax")
    image: str | None = Field(None, description="Cover image URL")
    category: str = Field(DEFAULT_CATEGORY, description="Category label")
    author: str = Field(DEFAULT_AUTHOR, description="Author name")
    tags: list[str] = Field(default_factory=list, description="Tags")
    published: bool = Field(False, description="Whether the post is visible on the site")

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: str | None) -> str | None:
        return check_slug(value)


class BlogPostUpdate(BaseModel):
    """Partial update, only fields present in the request are changed."""

    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"excerpt", "image"})

    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    excerpt: str | None = None
    content: str | None = Field(None, min_length=1)
    image: str | None = None
    category: str | None = None
    author: str | None = None
    tags: list[str] | None = None
    published: bool | None = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, value: str | None) -> str | None:
        return check_slug(value)

    def to_changes(self) -> dict[str, Any]:
        """Fields to set. Null only clears nullable fields, elsewhere it means unchanged."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.NULLABLE_FIELDS
        }


class PublishedBlogPost(BaseModel):
    """Public representation of a published post."""

    slug: str
    title: str
    excerpt: str = Field(..., description="Stored excerpt, or the start of the first paragraph")
    content: str
    html: str = Field(..., description="Content rendered to HTML")
    date: str = Field(..., description="Publication date, YYYY-MM-DD")
    read_time: str = Field(..., description="Estimated reading time, e.g. '4 min read'")
    category: str
    image: str | None = None
    author: str | None = None
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, post: BlogPost) -> Self:
        return cls(
            slug=post.slug,
            title=post.title,
            excerpt=post.excerpt or make_excerpt(post.content),
            content=post.content,
            html=render_markup(post.content),
            date=post.date.date().isoformat(),
            read_time=calculate_read_time(post.content),
            category=post.category,
            image=post.image,
            author=post.author,
            tags=post.tags,
        )

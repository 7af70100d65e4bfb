import asyncio
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.blog.models import DEFAULT_AUTHOR, BlogPost, BlogPostCreate, BlogPostUpdate
from medcoders.core.modules.markup.frontmatter import parse_frontmatter
from medcoders.core.modules.markup.text import make_excerpt
from medcoders.core.pagination import PaginationResult
from medcoders.errors import NotFoundError, ValidationError
from medcoders.utils import is_slug, now

logger = structlog.get_logger(__name__)

POST_FILE_SUFFIXES = (".md", ".txt")
IMPORTED_POST_CATEGORY = "General"


def _parse_post_date(value: str | None) -> datetime:
    if not value:
        return now()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("post_date_invalid", value=value)
        return now()
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def load_post_file(path: Path) -> BlogPost:
    """Build a published post from a frontmatter file, the file name is the slug."""
    frontmatter, body = parse_frontmatter(path.read_text(encoding="utf-8"))
    slug = path.stem
    tags = [tag.strip() for tag in frontmatter.get("tags", "").split(",") if tag.strip()]
    return BlogPost(
        slug=slug,
        title=frontmatter.get("title") or slug.replace("-", " "),
        excerpt=frontmatter.get("excerpt") or make_excerpt(body),
        content=body,
        image=frontmatter.get("image") or None,
        category=frontmatter.get("category") or IMPORTED_POST_CATEGORY,
        author=frontmatter.get("author") or DEFAULT_AUTHOR,
        tags=tags,
        published=True,
        date=_parse_post_date(frontmatter.get("date")),
    )


def list_post_files(directory: Path) -> list[Path]:
    """Post files in a content directory, README and hidden files skipped."""
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file()
        and path.suffix in POST_FILE_SUFFIXES
        and not path.name.lower().startswith(("readme", "."))
    )


class BlogService(Service):
    """Blog posts shown in the resources section."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("blog_posts")

    async def on_start(self) -> None:
        await self._collection.create_index([("slug", 1)], unique=True)
        await self._collection.create_index([("published", 1), ("date", -1)])
        if self.core.config.blog_content_path:
            await self.import_posts_from_directory(Path(self.core.config.blog_content_path))

    async def has_slug(self, slug: str) -> bool:
        return await self._collection.count_documents({"slug": slug}, limit=1) > 0

    async def list_posts(self, published: bool | None = None, limit: int = 50, offset: int = 0) -> PaginationResult[BlogPost]:
        """List posts newest first, optionally only published or only drafts."""
        query: dict[str, Any] = {} if published is None else {"published": published}
        total = await self._collection.count_documents(query)
        cursor = self._collection.find(query).sort("date", -1).skip(offset).limit(limit)
        items = await BlogPost.list_cursor(cursor)
        return PaginationResult(items=items, total=total, limit=limit, offset=offset)

    async def list_published_posts(self) -> list[BlogPost]:
        return await BlogPost.list_cursor(self._collection.find({"published": True}).sort("date", -1))

    async def get_post(self, post_id: UUID) -> BlogPost:
        post = BlogPost.from_mongo(await self._collection.find_one({"_id": post_id}))
        if post is None:
            raise NotFoundError("Blog post not found")
        return post

    async def get_published_post(self, slug: str) -> BlogPost:
        post = BlogPost.from_mongo(await self._collection.find_one({"slug": slug, "published": True}))
        if post is None:
            raise NotFoundError("Blog post not found")
        return post

    async def create_post(self, data: BlogPostCreate, user_id: UUID) -> BlogPost:
        if await self.has_slug(data.slug):
            raise ValidationError("A blog post with this slug already exists")

        post = BlogPost(**data.model_dump(), created_by=user_id, updated_by=user_id)
        await self._collection.insert_one(post.to_mongo())
        logger.info("blog_post_created", post_id=post.id, slug=post.slug, user_id=user_id)
        return post

    async def update_post(self, post_id: UUID, data: BlogPostUpdate, user_id: UUID) -> BlogPost:
        existing = await self.get_post(post_id)
        changes = data.to_changes()

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != existing.slug and await self.has_slug(new_slug):
            raise ValidationError("A blog post with this slug already exists")

        changes.update(updated_by=user_id, updated_at=now())
        await self._collection.update_one({"_id": post_id}, {"$set": changes})
        logger.info("blog_post_updated", post_id=post_id, fields=sorted(changes), user_id=user_id)
        return await self.get_post(post_id)

    async def delete_post(self, post_id: UUID) -> None:
        result = await self._collection.delete_one({"_id": post_id})
        if result.deleted_count == 0:
            raise NotFoundError("Blog post not found")
        logger.info("blog_post_deleted", post_id=post_id)

    async def import_posts_from_directory(self, directory: Path) -> int:
        """Import frontmatter files as published posts, skipping slugs that already exist.

        Returns the number of imported posts.
        """
        if not directory.is_dir():
            logger.warning("blog_content_path_missing", path=str(directory))
            return 0

        imported = 0
        for path in await asyncio.to_thread(list_post_files, directory):
            if not is_slug(path.stem):
                logger.warning("blog_post_file_skipped", path=str(path), reason="file name is not a valid slug")
                continue
            if await self.has_slug(path.stem):
                continue
            post = await asyncio.to_thread(load_post_file, path)
            await self._collection.insert_one(post.to_mongo())
            imported += 1

        logger.info("blog_posts_imported", path=str(directory), count=imported)
        return imported

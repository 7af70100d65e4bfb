from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.career.models import CareerPost, CareerPostCreate, CareerPostUpdate
from medcoders.core.pagination import PaginationResult
from medcoders.errors import NotFoundError, ValidationError
from medcoders.utils import now

logger = structlog.get_logger(__name__)


class CareerService(Service):
    """Job postings for the careers section."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("career_posts")

    async def on_start(self) -> None:
        await self._collection.create_index([("slug", 1)], unique=True)
        await self._collection.create_index([("published", 1), ("date", -1)])

    async def has_slug(self, slug: str) -> bool:
        return await self._collection.count_documents({"slug": slug}, limit=1) > 0

    async def list_posts(self, published: bool | None = None, limit: int = 50, offset: int = 0) -> PaginationResult[CareerPost]:
        query: dict[str, Any] = {} if published is None else {"published": published}
        total = await self._collection.count_documents(query)
        cursor = self._collection.find(query).sort("date", -1).skip(offset).limit(limit)
        items = await CareerPost.list_cursor(cursor)
        return PaginationResult(items=items, total=total, limit=limit, offset=offset)

    async def list_published_posts(self) -> list[CareerPost]:
        return await CareerPost.list_cursor(self._collection.find({"published": True}).sort("date", -1))

    async def get_posts_by_ids(self, post_ids: set[UUID]) -> dict[UUID, CareerPost]:
        """Bulk lookup used to annotate applications with their posting."""
        if not post_ids:
            return {}
        posts = await CareerPost.list_cursor(self._collection.find({"_id": {"$in": list(post_ids)}}))
        return {post.id: post for post in posts}

    async def find_post(self, post_id: UUID) -> CareerPost | None:
        return CareerPost.from_mongo(await self._collection.find_one({"_id": post_id}))

    async def get_post(self, post_id: UUID) -> CareerPost:
        post = await self.find_post(post_id)
        if post is None:
            raise NotFoundError("Career post not found")
        return post

    async def get_published_post(self, slug: str) -> CareerPost:
        post = CareerPost.from_mongo(await self._collection.find_one({"slug": slug, "published": True}))
        if post is None:
            raise NotFoundError("Career post not found")
        return post

    async def create_post(self, data: CareerPostCreate, user_id: UUID) -> CareerPost:
        if await self.has_slug(data.slug):
            raise ValidationError("A career post with this slug already exists")

        post = CareerPost(**data.model_dump(), created_by=user_id, updated_by=user_id)
        await self._collection.insert_one(post.to_mongo())
        logger.info("career_post_created", post_id=post.id, slug=post.slug, user_id=user_id)
        return post

    async def update_post(self, post_id: UUID, data: CareerPostUpdate, user_id: UUID) -> CareerPost:
        existing = await self.get_post(post_id)
        changes = data.to_changes()

        new_slug = changes.get("slug")
        if new_slug is not None and new_slug != existing.slug and await self.has_slug(new_slug):
            raise ValidationError("A career post with this slug already exists")

        changes.update(updated_by=user_id, updated_at=now())
        await self._collection.update_one({"_id": post_id}, {"$set": changes})
        logger.info("career_post_updated", post_id=post_id, fields=sorted(changes), user_id=user_id)
        return await self.get_post(post_id)

    async def delete_post(self, post_id: UUID) -> None:
        result = await self._collection.delete_one({"_id": post_id})
        if result.deleted_count == 0:
            raise NotFoundError("Career post not found")
        logger.info("career_post_deleted", post_id=post_id)

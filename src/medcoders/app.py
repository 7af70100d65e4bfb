from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from pathlib import Path
from uuid import UUID

import structlog

from medcoders.config import Config
from medcoders.core.core import Core
from medcoders.core.modules.application.models import (
    ApplicationReview,
    ApplicationStatus,
    ApplicationSubmission,
    JobApplication,
    JobApplicationView,
)
from medcoders.core.modules.blog.models import BlogPost, BlogPostCreate, BlogPostUpdate, PublishedBlogPost
from medcoders.core.modules.career.models import CareerPost, CareerPostCreate, CareerPostUpdate, PublishedCareerPost
from medcoders.core.modules.lead.models import ContactSubmission, Lead
from medcoders.core.modules.session.models import AuthToken
from medcoders.core.modules.upload.models import StoredUpload
from medcoders.core.modules.user.models import UserProfile
from medcoders.core.pagination import PaginationResult
from medcoders.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations, validates authentication before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        async with self._core.lifespan():
            yield

    @property
    def config(self) -> Config:
        return self._core.config

    @property
    def session_max_age(self) -> timedelta:
        return self._core.services.session.signer.max_age

    # === Authentication ===
    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        return await self._core.services.access.is_authenticated(auth_token)

    async def login(self, email: str, password: str) -> AuthToken:
        """Check the password and issue a session token."""
        user = await self._core.services.user.verify_password(email, password)
        if user is None:
            logger.info("login_failed", email=email)
            raise AuthenticationError("Invalid email or password")
        logger.info("login_succeeded", user_id=user.id)
        return self._core.services.session.create_session(user.id)

    async def get_current_user(self, auth_token: AuthToken) -> UserProfile:
        user = await self._core.services.access.ensure_authenticated(auth_token)
        return UserProfile.from_domain(user)

    # === Blog posts (admin) ===
    async def list_blog_posts(
        self, auth_token: AuthToken, published: bool | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[BlogPost]:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.blog.list_posts(published, limit, offset)

    async def get_blog_post(self, auth_token: AuthToken, post_id: UUID) -> BlogPost:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.blog.get_post(post_id)

    async def create_blog_post(self, auth_token: AuthToken, data: BlogPostCreate) -> BlogPost:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.blog.create_post(data, current_user.id)

    async def update_blog_post(self, auth_token: AuthToken, post_id: UUID, data: BlogPostUpdate) -> BlogPost:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.blog.update_post(post_id, data, current_user.id)

    async def delete_blog_post(self, auth_token: AuthToken, post_id: UUID) -> None:
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.blog.delete_post(post_id)

    # === Blog posts (public) ===
    async def get_published_blog_posts(self) -> list[PublishedBlogPost]:
        posts = await self._core.services.blog.list_published_posts()
        return [PublishedBlogPost.from_domain(post) for post in posts]

    async def get_published_blog_post(self, slug: str) -> PublishedBlogPost:
        return PublishedBlogPost.from_domain(await self._core.services.blog.get_published_post(slug))

    # === Career posts (admin) ===
    async def list_career_posts(
        self, auth_token: AuthToken, published: bool | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[CareerPost]:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.career.list_posts(published, limit, offset)

    async def get_career_post(self, auth_token: AuthToken, post_id: UUID) -> CareerPost:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.career.get_post(post_id)

    async def create_career_post(self, auth_token: AuthToken, data: CareerPostCreate) -> CareerPost:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.career.create_post(data, current_user.id)

    async def update_career_post(self, auth_token: AuthToken, post_id: UUID, data: CareerPostUpdate) -> CareerPost:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.career.update_post(post_id, data, current_user.id)

    async def delete_career_post(self, auth_token: AuthToken, post_id: UUID) -> None:
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.career.delete_post(post_id)

    # === Career posts (public) ===
    async def get_published_career_posts(self) -> list[PublishedCareerPost]:
        posts = await self._core.services.career.list_published_posts()
        return [PublishedCareerPost.from_domain(post) for post in posts]

    async def get_published_career_post(self, slug: str) -> PublishedCareerPost:
        return PublishedCareerPost.from_domain(await self._core.services.career.get_published_post(slug))

    # === Job applications ===
    async def submit_application(self, submission: ApplicationSubmission) -> JobApplication:
        """Public: anyone can apply."""
        return await self._core.services.application.submit_application(submission)

    async def list_applications(
        self, auth_token: AuthToken, status: ApplicationStatus | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[JobApplicationView]:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.application.list_applications(status, limit, offset)

    async def get_application(self, auth_token: AuthToken, application_id: UUID) -> JobApplicationView:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.application.get_application(application_id)

    async def review_application(
        self, auth_token: AuthToken, application_id: UUID, review: ApplicationReview
    ) -> JobApplication:
        current_user = await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.application.review_application(application_id, review, current_user.id)

    # === Contact form ===
    async def submit_contact(self, submission: ContactSubmission) -> Lead:
        return await self._core.services.lead.submit_contact(submission)

    # === Uploads ===
    async def upload_image(self, auth_token: AuthToken, filename: str, content: bytes, content_type: str) -> StoredUpload:
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.upload.save_image(filename, content, content_type)

    async def upload_resume(self, filename: str, content: bytes, content_type: str) -> StoredUpload:
        """Public: applicants upload before submitting the form."""
        return await self._core.services.upload.save_resume(filename, content, content_type)

    def get_upload_path(self, relative_path: str) -> Path:
        return self._core.services.upload.get_upload_path(relative_path)

from typing import Any
from uuid import UUID

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.application.models import (
    ApplicationReview,
    ApplicationStatus,
    ApplicationSubmission,
    CareerPostRef,
    JobApplication,
    JobApplicationView,
)
from medcoders.core.modules.mail.templates import (
    APPLICATION_CONFIRMATION_TEMPLATE,
    APPLICATION_INTERNAL_TEMPLATE,
    APPLICATION_STATUS_TEMPLATE,
    render_email,
)
from medcoders.core.pagination import PaginationResult
from medcoders.errors import NotFoundError, ValidationError
from medcoders.utils import now

logger = structlog.get_logger(__name__)


class ApplicationService(Service):
    """Job applications: public submission and admin review."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("job_applications")

    async def on_start(self) -> None:
        await self._collection.create_index([("created_at", -1)])
        await self._collection.create_index([("status", 1), ("created_at", -1)])

    async def submit_application(self, submission: ApplicationSubmission) -> JobApplication:
        """Store an application and notify both the team and the applicant."""
        if submission.career_post_id is not None and await self.core.services.career.find_post(submission.career_post_id) is None:
            raise ValidationError("Career post not found")

        application = JobApplication(**submission.model_dump())
        await self._collection.insert_one(application.to_mongo())
        logger.info("job_application_submitted", application_id=application.id, position=application.position_title)

        self._notify_submitted(application)
        return application

    def _notify_submitted(self, application: JobApplication) -> None:
        config = self.core.config
        mail = self.core.services.mail
        applicant = f"{application.first_name} {application.last_name}"

        mail.send_in_background(
            to=config.internal_notification_email,
            subject=f"New Job Application: {application.position_title} - {applicant}",
            html=render_email(
                APPLICATION_INTERNAL_TEMPLATE,
                application=application,
                resume_url=config.site_url + application.resume,
                admin_url=config.site_url + "/admin?tab=applications",
                submitted_at=application.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            ),
        )
        mail.send_in_background(
            to=application.email,
            subject=f"Application Received: {application.position_title}",
            html=render_email(APPLICATION_CONFIRMATION_TEMPLATE, application=application),
        )

    async def _attach_career_posts(self, applications: list[JobApplication]) -> list[JobApplicationView]:
        post_ids = {a.career_post_id for a in applications if a.career_post_id is not None}
        posts = await self.core.services.career.get_posts_by_ids(post_ids)

        views = []
        for application in applications:
            post = posts.get(application.career_post_id) if application.career_post_id else None
            career_post = CareerPostRef(title=post.title, slug=post.slug) if post else None
            views.append(JobApplicationView(**application.model_dump(), career_post=career_post))
        return views

    async def list_applications(
        self, status: ApplicationStatus | None = None, limit: int = 50, offset: int = 0
    ) -> PaginationResult[JobApplicationView]:
        """List applications newest first, optionally by status."""
        query: dict[str, Any] = {} if status is None else {"status": status}
        total = await self._collection.count_documents(query)
        cursor = self._collection.find(query).sort("created_at", -1).skip(offset).limit(limit)
        items = await self._attach_career_posts(await JobApplication.list_cursor(cursor))
        return PaginationResult(items=items, total=total, limit=limit, offset=offset)

    async def get_application(self, application_id: UUID) -> JobApplicationView:
        application = JobApplication.from_mongo(await self._collection.find_one({"_id": application_id}))
        if application is None:
            raise NotFoundError("Application not found")
        return (await self._attach_career_posts([application]))[0]

    async def review_application(self, application_id: UUID, review: ApplicationReview, reviewer_id: UUID) -> JobApplication:
        """Set the status and notes, then email the applicant about the decision."""
        existing = await self.get_application(application_id)

        changes = {
            "status": review.status,
            "notes": review.notes or None,
            "reviewed_by": reviewer_id,
            "reviewed_at": now(),
        }
        await self._collection.update_one({"_id": application_id}, {"$set": changes})
        application = JobApplication(**(existing.model_dump(exclude={"career_post"}) | changes))
        logger.info("job_application_reviewed", application_id=application_id, status=review.status, reviewer_id=reviewer_id)

        self.core.services.mail.send_in_background(
            to=application.email,
            subject=f"Application Update: {application.position_title}",
            html=render_email(APPLICATION_STATUS_TEMPLATE, application=application),
        )
        return application

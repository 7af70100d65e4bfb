from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from medcoders.core.modules.application.models import (
    ApplicationReview,
    ApplicationStatus,
    JobApplication,
    JobApplicationView,
)
from medcoders.core.pagination import PaginationResult
from medcoders.web.deps import AppDep, AuthTokenDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["admin-applications"])


@router.get(
    "/admin/applications",
    summary="List job applications",
    description="List applications newest first, with the linked career post's title and slug.",
    operation_id="listApplications",
    responses={
        200: {"description": "Page of applications"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_applications(
    app: AppDep,
    auth_token: AuthTokenDep,
    status: ApplicationStatus | None = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> PaginationResult[JobApplicationView]:
    return await app.list_applications(auth_token, status, limit, offset)


@router.get(
    "/admin/applications/{application_id}",
    summary="Get job application",
    operation_id="getApplication",
    responses={
        200: {"description": "Application"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Application not found"},
    },
)
async def get_application(application_id: UUID, app: AppDep, auth_token: AuthTokenDep) -> JobApplicationView:
    return await app.get_application(auth_token, application_id)


@router.put(
    "/admin/applications/{application_id}",
    summary="Review job application",
    description="Set the status and notes. The applicant is emailed about the new status.",
    operation_id="reviewApplication",
    responses={
        200: {"description": "Updated application"},
        400: {"model": ErrorResponse, "description": "Invalid status"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Application not found"},
    },
)
async def review_application(
    application_id: UUID, review: ApplicationReview, app: AppDep, auth_token: AuthTokenDep
) -> JobApplication:
    return await app.review_application(auth_token, application_id, review)

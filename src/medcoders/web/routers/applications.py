from fastapi import APIRouter

from medcoders.core.modules.application.models import ApplicationSubmission, JobApplication
from medcoders.web.deps import AppDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["applications"])


@router.post(
    "/applications",
    summary="Submit job application",
    description="Store an application. Upload the resume first via `/uploads/resume` and pass its URL.",
    operation_id="submitApplication",
    status_code=201,
    responses={
        201: {"description": "Application stored"},
        400: {"model": ErrorResponse, "description": "Invalid form data or unknown career post"},
    },
)
async def submit_application(submission: ApplicationSubmission, app: AppDep) -> JobApplication:
    return await app.submit_application(submission)

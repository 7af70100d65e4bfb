from uuid import UUID

from fastapi import APIRouter
from pydantic import BaseModel, Field

from medcoders.core.modules.lead.models import ContactSubmission
from medcoders.web.deps import AppDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["contact"])


class ContactResponse(BaseModel):
    """Contact form acknowledgement."""

    message: str = Field(..., description="Confirmation shown to the visitor")
    id: UUID = Field(..., description="Stored lead ID")


@router.post(
    "/contact",
    summary="Submit contact form",
    description="Store a lead and notify the team. The sender receives an auto-reply.",
    operation_id="submitContact",
    responses={
        200: {"description": "Lead stored"},
        400: {"model": ErrorResponse, "description": "Invalid form data"},
    },
)
async def submit_contact(submission: ContactSubmission, app: AppDep) -> ContactResponse:
    lead = await app.submit_contact(submission)
    return ContactResponse(message="Thank you for contacting us. We'll be in touch within 24 hours.", id=lead.id)

from fastapi import APIRouter

from medcoders.core.modules.career.models import PublishedCareerPost
from medcoders.web.deps import AppDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["careers"])


@router.get(
    "/careers",
    summary="Open positions",
    description="All published job postings, newest first.",
    operation_id="listCareers",
    responses={200: {"description": "Published career posts"}},
)
async def list_careers(app: AppDep) -> list[PublishedCareerPost]:
    return await app.get_published_career_posts()


@router.get(
    "/careers/{slug}",
    summary="Open position",
    operation_id="getCareer",
    responses={
        200: {"description": "Career post"},
        404: {"model": ErrorResponse, "description": "Career post not found or not published"},
    },
)
async def get_career(slug: str, app: AppDep) -> PublishedCareerPost:
    return await app.get_published_career_post(slug)

from fastapi import APIRouter

from medcoders.core.modules.blog.models import PublishedBlogPost
from medcoders.web.deps import AppDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["resources"])


@router.get(
    "/resources",
    summary="Published blog posts",
    description="All published blog posts, newest first, with rendered HTML and read time.",
    operation_id="listResources",
    responses={200: {"description": "Published blog posts"}},
)
async def list_resources(app: AppDep) -> list[PublishedBlogPost]:
    return await app.get_published_blog_posts()


@router.get(
    "/resources/{slug}",
    summary="Published blog post",
    operation_id="getResource",
    responses={
        200: {"description": "Blog post"},
        404: {"model": ErrorResponse, "description": "Blog post not found or not published"},
    },
)
async def get_resource(slug: str, app: AppDep) -> PublishedBlogPost:
    return await app.get_published_blog_post(slug)

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from medcoders.core.modules.blog.models import BlogPost, BlogPostCreate, BlogPostUpdate
from medcoders.core.pagination import PaginationResult
from medcoders.web.deps import AppDep, AuthTokenDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["admin-blogs"])


@router.get(
    "/admin/blogs",
    summary="List blog posts",
    description="List all blog posts newest first, including drafts. Filter with `published=true|false`.",
    operation_id="listBlogPosts",
    responses={
        200: {"description": "Page of blog posts"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_blog_posts(
    app: AppDep,
    auth_token: AuthTokenDep,
    published: bool | None = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> PaginationResult[BlogPost]:
    return await app.list_blog_posts(auth_token, published, limit, offset)


@router.post(
    "/admin/blogs",
    summary="Create blog post",
    description="Create a blog post. The slug must be unique.",
    operation_id="createBlogPost",
    status_code=201,
    responses={
        201: {"description": "Blog post created"},
        400: {"model": ErrorResponse, "description": "Invalid data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_blog_post(data: BlogPostCreate, app: AppDep, auth_token: AuthTokenDep) -> BlogPost:
    return await app.create_blog_post(auth_token, data)


@router.get(
    "/admin/blogs/{post_id}",
    summary="Get blog post",
    operation_id="getBlogPost",
    responses={
        200: {"description": "Blog post"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog post not found"},
    },
)
async def get_blog_post(post_id: UUID, app: AppDep, auth_token: AuthTokenDep) -> BlogPost:
    return await app.get_blog_post(auth_token, post_id)


@router.put(
    "/admin/blogs/{post_id}",
    summary="Update blog post",
    description="Partial update: only fields present in the body are changed.",
    operation_id="updateBlogPost",
    responses={
        200: {"description": "Updated blog post"},
        400: {"model": ErrorResponse, "description": "Invalid data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog post not found"},
    },
)
async def update_blog_post(post_id: UUID, data: BlogPostUpdate, app: AppDep, auth_token: AuthTokenDep) -> BlogPost:
    return await app.update_blog_post(auth_token, post_id, data)


@router.delete(
    "/admin/blogs/{post_id}",
    summary="Delete blog post",
    operation_id="deleteBlogPost",
    status_code=204,
    responses={
        204: {"description": "Blog post deleted"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Blog post not found"},
    },
)
async def delete_blog_post(post_id: UUID, app: AppDep, auth_token: AuthTokenDep) -> None:
    await app.delete_blog_post(auth_token, post_id)

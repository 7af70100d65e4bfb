from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from medcoders.core.modules.career.models import CareerPost, CareerPostCreate, CareerPostUpdate
from medcoders.core.pagination import PaginationResult
from medcoders.web.deps import AppDep, AuthTokenDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["admin-careers"])


@router.get(
    "/admin/careers",
    summary="List career posts",
    description="List all job postings newest first, including drafts. Filter with `published=true|false`.",
    operation_id="listCareerPosts",
    responses={
        200: {"description": "Page of career posts"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_career_posts(
    app: AppDep,
    auth_token: AuthTokenDep,
    published: bool | None = None,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> PaginationResult[CareerPost]:
    return await app.list_career_posts(auth_token, published, limit, offset)


@router.post(
    "/admin/careers",
    summary="Create career post",
    operation_id="createCareerPost",
    status_code=201,
    responses={
        201: {"description": "Career post created"},
        400: {"model": ErrorResponse, "description": "Invalid data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def create_career_post(data: CareerPostCreate, app: AppDep, auth_token: AuthTokenDep) -> CareerPost:
    return await app.create_career_post(auth_token, data)


@router.get(
    "/admin/careers/{post_id}",
    summary="Get career post",
    operation_id="getCareerPost",
    responses={
        200: {"description": "Career post"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Career post not found"},
    },
)
async def get_career_post(post_id: UUID, app: AppDep, auth_token: AuthTokenDep) -> CareerPost:
    return await app.get_career_post(auth_token, post_id)


@router.put(
    "/admin/careers/{post_id}",
    summary="Update career post",
    description="Partial update: only fields present in the body are changed.",
    operation_id="updateCareerPost",
    responses={
        200: {"description": "Updated career post"},
        400: {"model": ErrorResponse, "description": "Invalid data or slug already exists"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Career post not found"},
    },
)
async def update_career_post(post_id: UUID, data: CareerPostUpdate, app: AppDep, auth_token: AuthTokenDep) -> CareerPost:
    return await app.update_career_post(auth_token, post_id, data)


@router.delete(
    "/admin/careers/{post_id}",
    summary="Delete career post",
    operation_id="deleteCareerPost",
    status_code=204,
    responses={
        204: {"description": "Career post deleted"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Career post not found"},
    },
)
async def delete_career_post(post_id: UUID, app: AppDep, auth_token: AuthTokenDep) -> None:
    await app.delete_career_post(auth_token, post_id)

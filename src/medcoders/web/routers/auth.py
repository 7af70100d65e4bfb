from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from medcoders.core.modules.session.models import SESSION_COOKIE_NAME
from medcoders.core.modules.user.models import UserProfile
from medcoders.web.deps import AppDep, AuthTokenDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Admin login request."""

    email: str = Field(..., min_length=1, description="Admin email")
    password: str = Field(..., min_length=1, description="Admin password")


class LoginResponse(BaseModel):
    """Admin login response."""

    token: str = Field(..., description="Session token, also set as the admin_session cookie")


@router.post(
    "/auth/login",
    summary="Admin login",
    description="Authenticate with email and password. Sets the http-only admin session cookie, valid for 7 days.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, response: Response) -> LoginResponse:
    token = await app.login(login_data.email, login_data.password)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=app.config.is_production,
        max_age=int(app.session_max_age.total_seconds()),
        path="/",
    )

    return LoginResponse(token=token)


@router.post(
    "/auth/logout",
    summary="Admin logout",
    description="Clear the admin session cookie. Sessions are stateless, the token itself expires on its own.",
    operation_id="logout",
    status_code=204,
    responses={204: {"description": "Cookie cleared"}},
)
async def logout(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")


@router.get(
    "/auth/me",
    summary="Current admin",
    description="Profile of the signed-in admin user.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_current_user(app: AppDep, auth_token: AuthTokenDep) -> UserProfile:
    return await app.get_current_user(auth_token)

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from medcoders.core.modules.session.models import SESSION_COOKIE_NAME

# (method, path) pairs reachable without a session
PUBLIC_ENDPOINTS = {
    ("POST", "/api/v1/auth/login"),
    ("POST", "/api/v1/auth/logout"),
    ("GET", "/api/v1/resources"),
    ("GET", "/api/v1/resources/{slug}"),
    ("GET", "/api/v1/careers"),
    ("GET", "/api/v1/careers/{slug}"),
    ("POST", "/api/v1/contact"),
    ("POST", "/api/v1/applications"),
    ("POST", "/api/v1/uploads/resume"),
    ("GET", "/uploads/{file_path}"),
    ("GET", "/health"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Medcoders API",
            version="0.1.0",
            summary="Resources, careers, contact and admin API for the Elite Surgical Coders website",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "SessionCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE_NAME,
                "description": "Signed admin session set by /auth/login",
            },
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "description": "The same session token passed as a Bearer token",
            },
        }
        openapi_schema["security"] = [{"SessionCookie": []}, {"BearerAuth": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Unauthorized", "type": "authentication_error"},
                {"message": "Blog post not found", "type": "not_found"},
                {"message": "A blog post with this slug already exists", "type": "validation_error"},
            ]
        }
    }

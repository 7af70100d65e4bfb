from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from medcoders.app import App
from medcoders.config import Config
from medcoders.errors import UserError
from medcoders.web.error_handlers import general_exception_handler, request_validation_handler, user_error_handler
from medcoders.web.openapi import set_custom_openapi
from medcoders.web.routers import (
    admin_applications_router,
    admin_blogs_router,
    admin_careers_router,
    applications_router,
    auth_router,
    careers_router,
    contact_router,
    resources_router,
    upload_files_router,
    uploads_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(title="Medcoders API", lifespan=lifespan, openapi_tags=[])

    # The admin frontend sends the session cookie cross-origin
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    # API v1 routes
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(resources_router, prefix="/api/v1")
    app.include_router(careers_router, prefix="/api/v1")
    app.include_router(contact_router, prefix="/api/v1")
    app.include_router(applications_router, prefix="/api/v1")
    app.include_router(uploads_router, prefix="/api/v1")
    app.include_router(admin_blogs_router, prefix="/api/v1")
    app.include_router(admin_careers_router, prefix="/api/v1")
    app.include_router(admin_applications_router, prefix="/api/v1")
    app.include_router(upload_files_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app

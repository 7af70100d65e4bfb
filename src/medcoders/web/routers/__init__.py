from medcoders.web.routers.admin_applications import router as admin_applications_router
from medcoders.web.routers.admin_blogs import router as admin_blogs_router
from medcoders.web.routers.admin_careers import router as admin_careers_router
from medcoders.web.routers.applications import router as applications_router
from medcoders.web.routers.auth import router as auth_router
from medcoders.web.routers.careers import router as careers_router
from medcoders.web.routers.contact import router as contact_router
from medcoders.web.routers.resources import router as resources_router
from medcoders.web.routers.uploads import files_router as upload_files_router
from medcoders.web.routers.uploads import router as uploads_router

__all__ = [
    "admin_applications_router",
    "admin_blogs_router",
    "admin_careers_router",
    "applications_router",
    "auth_router",
    "careers_router",
    "contact_router",
    "resources_router",
    "upload_files_router",
    "uploads_router",
]

from fastapi import APIRouter, UploadFile
from fastapi.responses import FileResponse

from medcoders.core.modules.upload.models import StoredUpload
from medcoders.core.modules.upload.validators import MAX_IMAGE_SIZE, MAX_RESUME_SIZE
from medcoders.web.deps import AppDep, AuthTokenDep
from medcoders.web.openapi import ErrorResponse

router = APIRouter(tags=["uploads"])
files_router = APIRouter(tags=["uploads"])


async def read_upload(file: UploadFile, max_size: int) -> bytes:
    """Read at most one byte past the limit, enough for the size check to reject the file."""
    return await file.read(max_size + 1)


@router.post(
    "/admin/upload",
    summary="Upload blog image",
    description="Upload a jpeg, png, webp or gif image up to 5MB.",
    operation_id="uploadImage",
    responses={
        200: {"description": "Image stored"},
        400: {"model": ErrorResponse, "description": "Invalid file"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def upload_image(file: UploadFile, app: AppDep, auth_token: AuthTokenDep) -> StoredUpload:
    content = await read_upload(file, MAX_IMAGE_SIZE)
    return await app.upload_image(auth_token, file.filename or "", content, file.content_type or "")


@router.post(
    "/uploads/resume",
    summary="Upload resume",
    description="Upload a PDF, DOC or DOCX resume up to 10MB.",
    operation_id="uploadResume",
    responses={
        200: {"description": "Resume stored"},
        400: {"model": ErrorResponse, "description": "Invalid file"},
    },
)
async def upload_resume(file: UploadFile, app: AppDep) -> StoredUpload:
    content = await read_upload(file, MAX_RESUME_SIZE)
    return await app.upload_resume(file.filename or "", content, file.content_type or "")


@files_router.get(
    "/uploads/{file_path:path}",
    summary="Download uploaded file",
    operation_id="getUploadedFile",
    response_class=FileResponse,
    responses={
        200: {"description": "File content"},
        404: {"model": ErrorResponse, "description": "File not found"},
    },
)
async def get_uploaded_file(file_path: str, app: AppDep) -> FileResponse:
    return FileResponse(app.get_upload_path(file_path))

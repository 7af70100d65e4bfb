import asyncio
from pathlib import Path

import structlog

from medcoders.core.core import Service
from medcoders.core.modules.upload.models import StoredUpload
from medcoders.core.modules.upload.storage import resolve_upload_path, write_upload_file
from medcoders.core.modules.upload.validators import validate_image, validate_resume
from medcoders.utils import unique_file_stem

logger = structlog.get_logger(__name__)

UPLOADS_URL_PREFIX = "/uploads"
IMAGES_DIR = "blog"
RESUMES_DIR = "resumes"


class UploadService(Service):
    """Blog images and applicant resumes stored on local disk."""

    async def _store(self, directory: str, extension: str, content: bytes) -> StoredUpload:
        filename = f"{directory}/{unique_file_stem()}.{extension}"
        await asyncio.to_thread(write_upload_file, self.core.config.uploads_path, filename, content)
        logger.info("upload_stored", filename=filename, size=len(content))
        return StoredUpload(url=f"{UPLOADS_URL_PREFIX}/{filename}", filename=filename)

    async def save_image(self, filename: str, content: bytes, content_type: str) -> StoredUpload:
        extension = validate_image(filename, content_type, len(content))
        return await self._store(IMAGES_DIR, extension, content)

    async def save_resume(self, filename: str, content: bytes, content_type: str) -> StoredUpload:
        extension = validate_resume(filename, content_type, len(content))
        return await self._store(RESUMES_DIR, extension, content)

    def get_upload_path(self, relative_path: str) -> Path:
        return resolve_upload_path(self.core.config.uploads_path, relative_path)

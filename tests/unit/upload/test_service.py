"""Tests for the upload service."""

import asyncio
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.responses import FileResponse

from medcoders.core.modules.upload.service import UploadService
from medcoders.errors import ValidationError


@pytest.fixture
def upload_service(config):
    service = UploadService(MagicMock())
    service.set_core(SimpleNamespace(config=config))  # type: ignore[arg-type]
    return service


class TestUploadService:
    """Tests for UploadService."""

    def test_save_image(self, upload_service, config):
        """Test that images are stored under blog/ with a generated name."""
        stored = asyncio.run(upload_service.save_image("My Photo.PNG", b"png-bytes", "image/png"))
        assert stored.filename.startswith("blog/")
        assert stored.filename.endswith(".png")
        assert "My Photo" not in stored.filename
        assert stored.url == f"/uploads/{stored.filename}"
        assert (Path(config.uploads_path) / stored.filename).read_bytes() == b"png-bytes"

    def test_save_resume(self, upload_service):
        """Test that resumes are stored under resumes/."""
        stored = asyncio.run(upload_service.save_resume("cv.pdf", b"%PDF", "application/pdf"))
        assert stored.filename.startswith("resumes/")
        assert upload_service.get_upload_path(stored.filename).read_bytes() == b"%PDF"

    def test_invalid_file_not_written(self, upload_service, config):
        """Test that rejected uploads leave nothing on disk."""
        with pytest.raises(ValidationError):
            asyncio.run(upload_service.save_resume("cv.exe", b"MZ", "application/octet-stream"))
        assert not Path(config.uploads_path).exists()

    def test_html_disguised_as_image_rejected(self, upload_service, config):
        """Test that a script named .html with an image MIME type is never stored."""
        with pytest.raises(ValidationError, match="Invalid file extension"):
            asyncio.run(upload_service.save_image("x.html", b"<script>alert(1)</script>", "image/png"))
        assert not Path(config.uploads_path).exists()

    def test_stored_image_served_as_image(self, upload_service):
        """Test that stored images are served with an image content type."""
        stored = asyncio.run(upload_service.save_image("cover.png", b"png-bytes", "image/png"))
        assert FileResponse(upload_service.get_upload_path(stored.filename)).media_type == "image/png"

    def test_unique_names(self, upload_service):
        first = asyncio.run(upload_service.save_image("a.png", b"1", "image/png"))
        second = asyncio.run(upload_service.save_image("a.png", b"2", "image/png"))
        assert first.filename != second.filename

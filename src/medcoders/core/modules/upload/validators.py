"""Validation of uploaded images and resumes."""

import re

from medcoders.errors import ValidationError

IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"})
# The stored extension decides the Content-Type the file is served with
IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "webp", "gif"})
MAX_IMAGE_SIZE = 5 * 1024 * 1024

RESUME_EXTENSIONS = frozenset({"pdf", "doc", "docx"})
RESUME_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)
MAX_RESUME_SIZE = 10 * 1024 * 1024


def file_extension(filename: str) -> str:
    """Lowercased extension with anything but [a-z0-9] removed, empty if there is none."""
    if "." not in filename:
        return ""
    return re.sub(r"[^a-z0-9]", "", filename.rsplit(".", 1)[1].lower())


def validate_image(filename: str, content_type: str, size: int) -> str:
    """Check an image upload and return the extension to store it under."""
    if content_type not in IMAGE_MIME_TYPES:
        raise ValidationError("Invalid file type. Only images are allowed.")
    if size > MAX_IMAGE_SIZE:
        raise ValidationError("File size exceeds 5MB limit")
    extension = file_extension(filename)
    if extension not in IMAGE_EXTENSIONS:
        raise ValidationError("Invalid file extension")
    return extension


def validate_resume(filename: str, content_type: str, size: int) -> str:
    """Check a resume upload, both extension and MIME type must be PDF or Word."""
    extension = file_extension(filename)
    if extension not in RESUME_EXTENSIONS:
        raise ValidationError("Invalid file type. Only PDF, DOC, and DOCX files are allowed.")
    if content_type not in RESUME_MIME_TYPES:
        raise ValidationError("Invalid file type. File MIME type does not match expected format.")
    if size > MAX_RESUME_SIZE:
        raise ValidationError("File size exceeds 10MB limit")
    return extension

"""File storage operations for uploads."""

from pathlib import Path

from medcoders.errors import NotFoundError


def write_upload_file(uploads_path: str, relative_path: str, content: bytes) -> Path:
    """Write an uploaded file below the uploads directory.

    Returns:
        Absolute path to written file
    """
    file_path = Path(uploads_path) / relative_path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(content)
    return file_path.resolve()


def resolve_upload_path(uploads_path: str, relative_path: str) -> Path:
    """Absolute path of a stored upload.

    Raises:
        NotFoundError: If the file does not exist or the path points outside the uploads directory
    """
    root = Path(uploads_path).resolve()
    file_path = (root / relative_path).resolve()
    if not file_path.is_relative_to(root) or not file_path.is_file():
        raise NotFoundError("File not found")
    return file_path

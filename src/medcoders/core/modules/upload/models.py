from pydantic import BaseModel, Field


class StoredUpload(BaseModel):
    """Result of a successful upload."""

    url: str = Field(..., description="Path the file is served from, e.g. /uploads/blog/1718000000000-ab12cd34ef56.png")
    filename: str = Field(..., description="Storage name relative to the uploads directory")

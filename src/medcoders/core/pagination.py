from pydantic import BaseModel, Field


class PaginationResult[T](BaseModel):
    """One page of an admin listing."""

    items: list[T] = Field(..., description="Items in the current page")
    total: int = Field(..., description="Number of matching items across all pages", ge=0)
    limit: int = Field(..., description="Maximum items per page", ge=1)
    offset: int = Field(..., description="Number of items skipped", ge=0)

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total

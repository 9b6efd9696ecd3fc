"""Common schemas."""
from typing import Generic, List, TypeVar
from pydantic import BaseModel

ItemType = TypeVar("ItemType")


class PaginatedResponse(BaseModel, Generic[ItemType]):
    """Paginated response."""

    total: int
    skip: int
    limit: int
    items: List[ItemType]

from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Page window over the user roster"""
    total: int
    limit: int
    offset: int
    has_more: bool

    @property
    def page(self) -> int:
        """1-indexed page the offset falls on"""
        return (self.offset // self.limit) + 1 if self.limit else 1

    @property
    def total_pages(self) -> int:
        if not self.limit:
            return 1
        return max(1, -(-self.total // self.limit))


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def last_page_for(total_count: int, page_size: int) -> int:
    # an empty result set still has one (empty) page
    return max(1, -(-total_count // page_size))


class Page(BaseModel, Generic[T]):
    """A window over an ordered result set.

    ``current_page`` is already clamped to ``[1, last_page]`` by the paginator
    that built it.
    """

    items: List[T] = Field(default_factory=list)
    current_page: int = Field(ge=1)
    page_size: int = Field(gt=0)
    total_count: int = Field(ge=0)

    @property
    def last_page(self) -> int:
        return last_page_for(self.total_count, self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.last_page

    @property
    def previous_page(self) -> Optional[int]:
        return self.current_page - 1 if self.has_previous_page else None

    @property
    def next_page(self) -> Optional[int]:
        return self.current_page + 1 if self.has_next_page else None

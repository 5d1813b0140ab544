from typing import Awaitable, Callable, Generic, Sequence, TypeVar

from offer_board.domain.models.page import Page, last_page_for

T = TypeVar("T")

FetchWindow = Callable[[int, int], Awaitable[Sequence[T]]]
CountRows = Callable[[], Awaitable[int]]


def clamp_page(page: int, total_count: int, page_size: int) -> int:
    return min(max(page, 1), last_page_for(total_count, page_size))


class Paginator(Generic[T]):
    """Computes a bounded window of results plus the total count.

    The paginator knows nothing about the query mechanism: it is given one
    callable that returns ``limit`` rows starting at ``offset`` in a fixed
    order, and another that returns the total number of matching rows.
    """

    def __init__(self, fetch: FetchWindow, count: CountRows, page_size: int):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.fetch = fetch
        self.count = count
        self.page_size = page_size

    async def get_page(self, page: int = 1) -> Page[T]:
        total_count = await self.count()
        current_page = clamp_page(page, total_count, self.page_size)
        offset = (current_page - 1) * self.page_size

        items = await self.fetch(offset, self.page_size)

        return Page(
            items=list(items),
            current_page=current_page,
            page_size=self.page_size,
            total_count=total_count,
        )

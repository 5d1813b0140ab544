from datetime import datetime
from typing import Optional

from pydantic import BaseModel


def is_persisted_id(value: object) -> bool:
    """Tell whether ``value`` identifies a row that already exists in the store.

    Only positive integers qualify, either as ``int`` or as a string of
    ASCII digits. ``None``, ``0``, negatives, booleans and anything else mean
    the offer has not been saved yet.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, str):
        return value.isascii() and value.isdigit() and int(value) > 0
    return False


class Offer(BaseModel):
    author_id: int
    content: str
    category_id: int
    event_date: datetime
    city_id: int
    region_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        return is_persisted_id(self.id)

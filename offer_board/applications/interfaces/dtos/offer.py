from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OfferSchema(BaseModel):
    """Validated input for creating or editing an offer."""

    model_config = ConfigDict(str_strip_whitespace=True)

    author_id: int = Field(gt=0)
    content: str = Field(min_length=3, max_length=1000)
    category_id: int = Field(gt=0)
    event_date: datetime
    city_id: int = Field(gt=0)
    region_id: int = Field(gt=0)


class OfferPublic(BaseModel):
    id: int
    author_id: int
    content: str
    category_id: int
    event_date: datetime
    created_at: Optional[datetime] = None
    city_id: int
    region_id: int
    model_config = ConfigDict(from_attributes=True)


class OfferPage(BaseModel):
    offers: list[OfferPublic]
    current_page: int
    page_size: int
    total_count: int
    last_page: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

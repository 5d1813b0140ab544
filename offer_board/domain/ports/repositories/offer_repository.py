from abc import ABC, abstractmethod
from typing import List, Optional

from offer_board.domain.models.offer import Offer
from offer_board.domain.models.page import Page

OFFERS_PER_PAGE = 10


class OfferRepository(ABC):
    @abstractmethod
    async def find_all(self) -> List[Offer]:
        pass

    @abstractmethod
    async def find_all_paginated(self, page: int = 1) -> Page[Offer]:
        pass

    @abstractmethod
    async def find_one_by_id(self, offer_id: int) -> Optional[Offer]:
        pass

    @abstractmethod
    async def save(self, offer: Offer) -> Offer:
        pass

    @abstractmethod
    async def delete(self, offer: Offer) -> bool:
        pass

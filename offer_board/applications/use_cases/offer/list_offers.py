from offer_board.applications.interfaces.dtos.offer import OfferPage
from offer_board.applications.services.offer_dto_mapper import OfferDtoMapper
from offer_board.domain.ports.repositories.offer_repository import OfferRepository


class ListOffersUseCase:
    def __init__(self, offer_repository: OfferRepository):
        self.offer_repository = offer_repository

    async def execute(self, page: int = 1) -> OfferPage:
        offers_page = await self.offer_repository.find_all_paginated(page)
        return OfferDtoMapper.to_page(offers_page)

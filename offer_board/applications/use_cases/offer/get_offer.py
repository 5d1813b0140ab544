from offer_board.applications.interfaces.dtos.offer import OfferPublic
from offer_board.applications.services.offer_dto_mapper import OfferDtoMapper
from offer_board.domain.exceptions import NotFoundError
from offer_board.domain.ports.repositories.offer_repository import OfferRepository


class GetOfferUseCase:
    def __init__(self, offer_repository: OfferRepository):
        self.offer_repository = offer_repository

    async def execute(self, offer_id: int) -> OfferPublic:
        offer = await self.offer_repository.find_one_by_id(offer_id)
        if not offer:
            raise NotFoundError(f"Offer with id {offer_id} not found")

        return OfferDtoMapper.to_public(offer)

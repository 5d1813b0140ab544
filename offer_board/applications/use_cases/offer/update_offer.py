from offer_board.applications.interfaces.dtos.offer import OfferPublic, OfferSchema
from offer_board.applications.services.offer_dto_mapper import OfferDtoMapper
from offer_board.domain.exceptions import NotFoundError
from offer_board.domain.ports.repositories.offer_repository import OfferRepository
from offer_board.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateOfferUseCase:
    def __init__(self, offer_repository: OfferRepository):
        self.offer_repository = offer_repository

    async def execute(self, offer_id: int, offer_data: OfferSchema) -> OfferPublic:
        existing_offer = await self.offer_repository.find_one_by_id(offer_id)
        if not existing_offer:
            logger.warning(f"Offer {offer_id} not found, nothing to edit")
            raise NotFoundError(f"Offer with id {offer_id} not found")

        updated_offer = OfferDtoMapper.to_domain(offer_data, offer_id=offer_id)
        updated_offer.created_at = existing_offer.created_at

        saved_offer = await self.offer_repository.save(updated_offer)

        return OfferDtoMapper.to_public(saved_offer)

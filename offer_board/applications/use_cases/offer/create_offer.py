from offer_board.applications.interfaces.dtos.offer import OfferPublic, OfferSchema
from offer_board.applications.services.offer_dto_mapper import OfferDtoMapper
from offer_board.domain.ports.repositories.offer_repository import OfferRepository
from offer_board.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateOfferUseCase:
    def __init__(self, offer_repository: OfferRepository):
        self.offer_repository = offer_repository

    async def execute(self, offer_data: OfferSchema) -> OfferPublic:
        logger.info(f"Creating offer for author {offer_data.author_id}")

        created_offer = await self.offer_repository.save(OfferDtoMapper.to_domain(offer_data))

        if created_offer.id is None:
            raise RuntimeError("Offer creation failed - no ID assigned")

        logger.info(f"Offer created successfully: {created_offer.id}")

        return OfferDtoMapper.to_public(created_offer)

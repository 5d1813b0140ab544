from offer_board.applications.interfaces.dtos.message import Message
from offer_board.domain.exceptions import NotFoundError
from offer_board.domain.ports.repositories.offer_repository import OfferRepository


class DeleteOfferUseCase:
    def __init__(self, offer_repository: OfferRepository):
        self.offer_repository = offer_repository

    async def execute(self, offer_id: int) -> Message:
        existing_offer = await self.offer_repository.find_one_by_id(offer_id)
        if not existing_offer:
            raise NotFoundError(f"Offer with id {offer_id} not found")

        await self.offer_repository.delete(existing_offer)

        return Message(message=f"Offer {offer_id} deleted")

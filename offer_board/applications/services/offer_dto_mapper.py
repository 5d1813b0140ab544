from offer_board.applications.interfaces.dtos.offer import OfferPage, OfferPublic, OfferSchema
from offer_board.domain.models.offer import Offer
from offer_board.domain.models.page import Page


class OfferDtoMapper:
    """Maps between domain offers and the DTOs exposed to callers"""

    @staticmethod
    def to_domain(offer_data: OfferSchema, offer_id: int | None = None) -> Offer:
        return Offer(
            id=offer_id,
            author_id=offer_data.author_id,
            content=offer_data.content,
            category_id=offer_data.category_id,
            event_date=offer_data.event_date,
            city_id=offer_data.city_id,
            region_id=offer_data.region_id,
        )

    @staticmethod
    def to_public(offer: Offer) -> OfferPublic:
        if offer.id is None:
            raise RuntimeError("Cannot expose an offer that was never saved")
        return OfferPublic.model_validate(offer, from_attributes=True)

    @staticmethod
    def to_page(page: Page[Offer]) -> OfferPage:
        return OfferPage(
            offers=[OfferDtoMapper.to_public(offer) for offer in page.items],
            current_page=page.current_page,
            page_size=page.page_size,
            total_count=page.total_count,
            last_page=page.last_page,
            previous_page=page.previous_page,
            next_page=page.next_page,
        )

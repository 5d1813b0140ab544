from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Select, delete, distinct, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from offer_board.domain.models.offer import Offer as DomainOffer
from offer_board.domain.models.page import Page
from offer_board.domain.ports.repositories.offer_repository import OFFERS_PER_PAGE, OfferRepository
from offer_board.domain.ports.services.logger import LoggerPort
from offer_board.domain.services.pagination import Paginator
from offer_board.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from offer_board.infrastructure.persistence.models import Offer as SQLOffer


class SQLAlchemyOfferRepository(OfferRepository):
    """Offer gateway backed by an ``AsyncSession``.

    Every ``save``/``delete`` runs in its own transaction: it commits before
    returning, or rolls back and re-raises the original ``SQLAlchemyError``.
    Reads close the transaction they implicitly began before returning.
    """

    def __init__(
        self,
        session: AsyncSession,
        logger: Optional[LoggerPort] = None,
        page_size: int = OFFERS_PER_PAGE,
    ):
        self.session = session
        self.logger = logger or StdLoggerAdapter(__name__)
        self.page_size = page_size

    def _to_domain(self, sql_offer: SQLOffer) -> DomainOffer:
        return DomainOffer(
            id=sql_offer.id,
            author_id=sql_offer.author_id,
            content=sql_offer.content,
            category_id=sql_offer.category_id,
            event_date=sql_offer.event_date,
            created_at=sql_offer.created_at,
            city_id=sql_offer.city_id,
            region_id=sql_offer.region_id,
        )

    def _to_values(self, offer: DomainOffer) -> Dict[str, Any]:
        """Write-set for ``offer``; never contains the primary key."""
        return {
            "author_id": offer.author_id,
            "content": offer.content,
            "category_id": offer.category_id,
            "event_date": offer.event_date,
            "created_at": offer.created_at,
            "city_id": offer.city_id,
            "region_id": offer.region_id,
        }

    def _query_all(self) -> Select:
        return select(SQLOffer).order_by(SQLOffer.id)

    async def _end_read(self) -> None:
        # end the transaction the read began; nothing was written
        await self.session.rollback()

    async def find_all(self) -> List[DomainOffer]:
        try:
            result = await self.session.scalars(self._query_all())
            return [self._to_domain(sql_offer) for sql_offer in result.all()]
        finally:
            await self._end_read()

    async def find_all_paginated(self, page: int = 1) -> Page[DomainOffer]:
        async def fetch(offset: int, limit: int) -> List[DomainOffer]:
            result = await self.session.scalars(self._query_all().offset(offset).limit(limit))
            return [self._to_domain(sql_offer) for sql_offer in result.all()]

        async def count() -> int:
            total = await self.session.scalar(select(func.count(distinct(SQLOffer.id))))
            return total or 0

        paginator = Paginator(fetch, count, self.page_size)
        try:
            return await paginator.get_page(page)
        finally:
            await self._end_read()

    async def find_one_by_id(self, offer_id: int) -> Optional[DomainOffer]:
        try:
            sql_offer = await self.session.scalar(select(SQLOffer).where(SQLOffer.id == offer_id))
            return self._to_domain(sql_offer) if sql_offer else None
        finally:
            await self._end_read()

    async def save(self, offer: DomainOffer) -> DomainOffer:
        values = self._to_values(offer)

        try:
            if offer.is_persisted:
                offer_id = int(offer.id)
                # created_at is NOT NULL; without a new value the stored one stays
                if values["created_at"] is None:
                    del values["created_at"]
                result = await self.session.execute(
                    update(SQLOffer).where(SQLOffer.id == offer_id).values(**values)
                )
                if not result.rowcount:
                    self.logger.warning("Offer %s does not exist, nothing was updated", offer_id)
                else:
                    self.logger.info("Updating offer %s", offer_id)
            else:
                if values["created_at"] is None:
                    values["created_at"] = datetime.now()
                sql_offer = SQLOffer(**values)
                self.session.add(sql_offer)
                await self.session.flush()
                offer_id = sql_offer.id
                self.logger.info("Inserted offer %s", offer_id)

            await self.session.commit()
        except SQLAlchemyError:
            self.logger.exception("Saving offer failed, rolling back")
            await self.session.rollback()
            raise

        return offer.model_copy(update={"id": offer_id, "created_at": values.get("created_at", offer.created_at)})

    async def delete(self, offer: DomainOffer) -> bool:
        try:
            result = await self.session.execute(delete(SQLOffer).where(SQLOffer.id == offer.id))
            await self.session.commit()
        except SQLAlchemyError:
            self.logger.exception("Deleting offer %s failed, rolling back", offer.id)
            await self.session.rollback()
            raise

        deleted = bool(result.rowcount)
        if deleted:
            self.logger.info("Deleted offer %s", offer.id)
        return deleted

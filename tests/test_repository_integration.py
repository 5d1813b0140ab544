from datetime import datetime

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from offer_board.domain.models.offer import Offer as DomainOffer
from offer_board.infrastructure.adapters.repositories.sqlalchemy_offer_repository import (
    SQLAlchemyOfferRepository,
)
from offer_board.infrastructure.persistence.models import Offer as SQLOffer

from .factories import offer_factory


class TestSQLAlchemyOfferRepositoryIntegration:
    """Integration tests for the offer gateway on PostgreSQL"""

    @pytest.fixture
    def offer_repository(self, test_session):
        return SQLAlchemyOfferRepository(test_session)

    async def _row_count(self, session, offer_id=None) -> int:
        query = select(func.count()).select_from(SQLOffer)
        if offer_id is not None:
            query = query.where(SQLOffer.id == offer_id)
        return await session.scalar(query)

    async def _seed(self, offer_repository, total: int) -> list[DomainOffer]:
        return [
            await offer_repository.save(offer_factory.create_domain_offer(content=f"Offer {i}"))
            for i in range(total)
        ]

    @pytest.mark.asyncio
    async def test_insert_round_trip(self, offer_repository):
        offer = offer_factory.create_domain_offer(created_at=datetime(2024, 3, 3, 12, 0))

        saved = await offer_repository.save(offer)
        found = await offer_repository.find_one_by_id(saved.id)

        assert saved.id == 1
        assert found == saved
        assert found.model_dump(exclude={"id"}) == offer.model_dump(exclude={"id"})

    @pytest.mark.asyncio
    async def test_update_in_place(self, offer_repository, test_session):
        saved = await offer_repository.save(offer_factory.create_domain_offer())

        changed = offer_factory.create_domain_offer(id=saved.id, content="Changed", category_id=9)
        await offer_repository.save(changed)

        found = await offer_repository.find_one_by_id(saved.id)
        assert found.content == "Changed"
        assert found.category_id == 9
        assert found.created_at == saved.created_at
        assert await self._row_count(test_session) == 1
        assert await self._row_count(test_session, saved.id) == 1

    @pytest.mark.asyncio
    async def test_zero_id_creates_new_offer(self, offer_repository, test_session):
        await offer_repository.save(offer_factory.create_domain_offer())

        saved = await offer_repository.save(offer_factory.create_domain_offer(id=0))

        assert saved.id == 2
        assert await self._row_count(test_session) == 2

    @pytest.mark.asyncio
    async def test_find_all_is_ordered(self, offer_repository):
        await self._seed(offer_repository, 3)

        offers = await offer_repository.find_all()

        assert [offer.id for offer in offers] == [1, 2, 3]
        assert [offer.content for offer in offers] == ["Offer 0", "Offer 1", "Offer 2"]

    @pytest.mark.asyncio
    async def test_pagination_over_25_offers(self, offer_repository):
        await self._seed(offer_repository, 25)

        first = await offer_repository.find_all_paginated(1)
        third = await offer_repository.find_all_paginated(3)
        fourth = await offer_repository.find_all_paginated(4)

        assert len(first.items) == 10
        assert first.total_count == 25
        assert [offer.id for offer in third.items] == [21, 22, 23, 24, 25]
        assert fourth == third

    @pytest.mark.asyncio
    async def test_pagination_on_empty_store(self, offer_repository):
        page = await offer_repository.find_all_paginated(2)

        assert page.items == []
        assert page.current_page == 1
        assert page.total_count == 0

    @pytest.mark.asyncio
    async def test_delete(self, offer_repository):
        saved = await offer_repository.save(offer_factory.create_domain_offer())

        assert await offer_repository.delete(saved) is True
        assert await offer_repository.find_one_by_id(saved.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_offer_is_a_no_op(self, offer_repository):
        assert await offer_repository.delete(offer_factory.create_domain_offer(id=123)) is False

    @pytest.mark.asyncio
    async def test_offer_not_found(self, offer_repository):
        assert await offer_repository.find_one_by_id(999) is None

    @pytest.mark.asyncio
    async def test_failed_insert_leaves_store_unchanged(self, offer_repository, test_session):
        existing = await offer_repository.save(offer_factory.create_domain_offer(content="Keep me"))
        # bypass validation so the NOT NULL constraint fails inside the transaction
        broken = DomainOffer.model_construct(
            id=None,
            author_id=None,
            content="Broken",
            category_id=2,
            event_date=datetime(2024, 6, 1),
            created_at=None,
            city_id=3,
            region_id=4,
        )

        with pytest.raises(IntegrityError):
            await offer_repository.save(broken)

        assert await self._row_count(test_session) == 1
        found = await offer_repository.find_one_by_id(existing.id)
        assert found.content == "Keep me"

    @pytest.mark.asyncio
    async def test_failed_update_leaves_row_unchanged(self, offer_repository, test_session):
        existing = await offer_repository.save(offer_factory.create_domain_offer(content="Original"))
        broken = DomainOffer.model_construct(
            id=existing.id,
            author_id=1,
            content=None,
            category_id=2,
            event_date=datetime(2024, 6, 1),
            created_at=None,
            city_id=3,
            region_id=4,
        )

        with pytest.raises(IntegrityError):
            await offer_repository.save(broken)

        found = await offer_repository.find_one_by_id(existing.id)
        assert found.content == "Original"
        assert await self._row_count(test_session) == 1

    @pytest.mark.asyncio
    async def test_no_transaction_left_open_between_calls(self, offer_repository, test_session):
        saved = await offer_repository.save(offer_factory.create_domain_offer())
        assert not test_session.in_transaction()

        await offer_repository.find_one_by_id(saved.id)
        assert not test_session.in_transaction()

        await offer_repository.find_all()
        assert not test_session.in_transaction()

        await offer_repository.find_all_paginated(1)
        assert not test_session.in_transaction()

        await offer_repository.save(offer_factory.create_domain_offer(id=saved.id, content="Edited"))
        assert not test_session.in_transaction()

        await offer_repository.delete(saved)
        assert not test_session.in_transaction()

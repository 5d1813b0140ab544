from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path

from offer_board.applications.interfaces.dtos.message import Message
from offer_board.applications.interfaces.dtos.offer import OfferPage, OfferPublic, OfferSchema
from offer_board.applications.use_cases.offer.create_offer import CreateOfferUseCase
from offer_board.applications.use_cases.offer.delete_offer import DeleteOfferUseCase
from offer_board.applications.use_cases.offer.get_offer import GetOfferUseCase
from offer_board.applications.use_cases.offer.list_offers import ListOffersUseCase
from offer_board.applications.use_cases.offer.update_offer import UpdateOfferUseCase
from offer_board.domain.exceptions import NotFoundError
from offer_board.domain.ports.repositories.offer_repository import OfferRepository
from offer_board.infrastructure.config.dependencies import get_offer_repository

router = APIRouter(prefix="/offers", tags=["offers"])

OfferRepositoryDep = Annotated[OfferRepository, Depends(get_offer_repository)]
OfferId = Annotated[int, Path(gt=0)]


@router.get("/", response_model=OfferPage)
async def read_offers(offer_repository: OfferRepositoryDep):
    use_case = ListOffersUseCase(offer_repository)
    return await use_case.execute()


@router.get("/page/{page}", response_model=OfferPage)
async def read_offers_page(page: int, offer_repository: OfferRepositoryDep):
    use_case = ListOffersUseCase(offer_repository)
    return await use_case.execute(page)


@router.get("/{offer_id}", response_model=OfferPublic)
async def read_offer(offer_id: OfferId, offer_repository: OfferRepositoryDep):
    try:
        use_case = GetOfferUseCase(offer_repository)
        return await use_case.execute(offer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.post("/", status_code=HTTPStatus.CREATED, response_model=OfferPublic)
async def create_offer(offer: OfferSchema, offer_repository: OfferRepositoryDep):
    use_case = CreateOfferUseCase(offer_repository)
    return await use_case.execute(offer)


@router.put("/{offer_id}", response_model=OfferPublic)
async def update_offer(offer_id: OfferId, offer: OfferSchema, offer_repository: OfferRepositoryDep):
    try:
        use_case = UpdateOfferUseCase(offer_repository)
        return await use_case.execute(offer_id, offer)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{offer_id}", response_model=Message)
async def delete_offer(offer_id: OfferId, offer_repository: OfferRepositoryDep):
    try:
        use_case = DeleteOfferUseCase(offer_repository)
        return await use_case.execute(offer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))

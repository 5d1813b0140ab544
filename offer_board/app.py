import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from offer_board.applications.interfaces.dtos.message import Message
from offer_board.infrastructure.config.dependencies import get_logging_settings
from offer_board.infrastructure.logging.logger import setup_logging
from offer_board.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from offer_board.presentation.routers import offers

setup_logging(level=get_logging_settings().LOG_LEVEL, noisy_libs={"sqlalchemy.engine": logging.WARNING})


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create_all skips tables that already exist
    await create_tables(get_engine())
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Offer Board", lifespan=lifespan)

app.include_router(offers.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Offer board is running"}

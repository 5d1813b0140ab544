from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from offer_board.domain.ports.repositories.offer_repository import OfferRepository
from offer_board.domain.ports.services.logger import LoggerPort
from offer_board.infrastructure.adapters.repositories.sqlalchemy_offer_repository import (
    SQLAlchemyOfferRepository,
)
from offer_board.infrastructure.config.settings import LoggingSettings, Settings
from offer_board.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from offer_board.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("offer_board.repository")


def get_settings() -> Settings:
    return Settings()


def get_logging_settings() -> LoggingSettings:
    return LoggingSettings()


def get_offer_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> OfferRepository:
    return SQLAlchemyOfferRepository(session, logger=logger)

import argparse
import asyncio

from sqlalchemy.ext.asyncio import create_async_engine

from offer_board.infrastructure.config.dependencies import get_settings
from offer_board.infrastructure.logging.logger import Logger, setup_logging
from offer_board.infrastructure.persistence.database import create_tables

logger = Logger.get_logger(__name__)


async def run(database_url: str) -> None:
    engine = create_async_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()
    logger.info("Offer tables are in place")


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--database_url", type=str, default=None)
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(args.database_url or get_settings().DATABASE_URL))


if __name__ == "__main__":
    main()

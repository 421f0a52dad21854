import asyncio

from greenlight.infrastructure.logging.logger import Logger, setup_logging
from greenlight.infrastructure.persistence.database import dispose_engine, get_engine
from greenlight.infrastructure.persistence.models import table_registry

logger = Logger.get_logger(__name__)


async def create_tables():
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)
    logger.info("movies table created")
    await dispose_engine()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(create_tables())

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from greenlight.infrastructure.config.settings import VERSION
from greenlight.infrastructure.logging.logger import Logger, setup_logging
from greenlight.infrastructure.persistence.database import dispose_engine, get_engine, ping_database, set_engine
from greenlight.presentation.routers import healthcheck, movies

setup_logging(noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    try:
        await ping_database(engine)
    except Exception:
        logger.exception("unable to establish database connection pool")
        await dispose_engine()
        raise

    logger.info("database connection pool established")
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Greenlight", version=VERSION, lifespan=lifespan)

app.include_router(healthcheck.router)
app.include_router(movies.router)

import uvicorn

from greenlight.infrastructure.config.settings import Settings
from greenlight.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


def main():
    settings = Settings()
    logger.info("starting server", extra={"properties": {"addr": f":{settings.PORT}", "env": settings.ENV}})
    uvicorn.run("greenlight.app:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()

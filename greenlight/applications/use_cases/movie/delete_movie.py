from greenlight.applications.interfaces.dtos.message import Message
from greenlight.domain.ports.repositories.movie_repository import MovieRepository
from greenlight.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Message:
        await self.movie_repository.delete(movie_id)

        logger.info(f"Movie {movie_id} deleted")
        return Message(message="movie successfully deleted")
